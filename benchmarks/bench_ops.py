"""
Microbenchmark: time per operation for the core types, float32 vs float64.
Run:
  python benchmarks/bench_ops.py
"""
import time
import numpy as np
from rotmath import Angle, EulerAngles, Mat3, Mat4, Quaternion, Vector3, Vector4

def timed(fn, reps: int = 2000):
    # warmup
    for _ in range(50):
        fn()
    t0 = time.perf_counter()
    for _ in range(reps):
        fn()
    t1 = time.perf_counter()
    return (t1 - t0) / reps

def run(dtype):
    rng = np.random.default_rng(12345)  # determinism
    t = np.dtype(dtype).type

    a = Mat4(rng.uniform(-1.0, 1.0, size=(4, 4)).astype(dtype))
    b = Mat4(rng.uniform(-1.0, 1.0, size=(4, 4)).astype(dtype))
    m3a = Mat3(rng.uniform(-1.0, 1.0, size=(3, 3)).astype(dtype))
    m3b = Mat3(rng.uniform(-1.0, 1.0, size=(3, 3)).astype(dtype))
    v = Vector3(rng.normal(size=3).astype(dtype))
    p = Vector4(rng.normal(size=4).astype(dtype))
    e = EulerAngles(Angle.deg(t(10.0)), Angle.deg(t(20.0)), Angle.deg(t(30.0)))
    q = Quaternion.from_euler(e)

    return {
        "mat4 @ mat4": timed(lambda: a @ b),
        "mat3 @ mat3": timed(lambda: m3a @ m3b),
        "mat4 @ vec4": timed(lambda: a @ p),
        "normalized": timed(lambda: v.normalized()),
        "from_euler": timed(lambda: Quaternion.from_euler(e)),
        "to_euler": timed(lambda: q.to_euler()),
        "to_mat3": timed(lambda: q.to_mat3()),
        "rotate": timed(lambda: q.rotate(v)),
    }

if __name__ == "__main__":
    for dtype in (np.float32, np.float64):
        print(np.dtype(dtype).name)
        for name, per_op in run(dtype).items():
            print(f"  {name:12s} {1e6*per_op:8.2f} us  ops/s={1/per_op:10.1f}")
        print()
