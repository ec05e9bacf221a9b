# examples/precision.py
import numpy as np
from rotmath import EulerAngles, Quaternion, Angle
from rotmath.functions import vec3f32, vec3f64

for dtype in (np.float32, np.float64):
    t = np.dtype(dtype).type
    e = EulerAngles(Angle.deg(t(10.0)), Angle.deg(t(89.0)), Angle.deg(t(-30.0)))
    back = Quaternion.from_euler(e).to_euler().to_degrees()
    print(np.dtype(dtype).name, back)

a = vec3f32(1.0, 2.0, 3.0)
b = vec3f64(1.0, 2.0, 3.0)
print(a.dtype, a.magnitude(), b.dtype, b.magnitude())
print("same vector?", a == b, a.astype(np.float64) == b)
