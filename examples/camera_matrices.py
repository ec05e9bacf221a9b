# examples/camera_matrices.py
from rotmath import Mat4, deg, look_at, perspective, vec3, vec4
from rotmath.gfx import RecordingBinding
import numpy as np

eye = vec3(4.0, 3.0, 8.0)
center = vec3(0.0, 0.0, 0.0)
up = vec3(0.0, 1.0, 0.0)

# look_at and perspective are laid out for row vectors (p @ M).
view = look_at(eye, center, up)
proj = perspective(16 / 9, np.deg2rad(60.0), 0.1, 100.0)
view_proj = view @ proj

p = vec4(0.5, 0.5, 0.5, 1.0) @ view_proj
print("clip:", p)
print("ndc:", [float(c / p.w) for c in (p.x, p.y, p.z)])

# translation/scale are column-vector transforms (M @ p).
model = Mat4.translation(vec3(0.0, 1.0, 0.0)) @ Mat4.scale(vec3(2.0, 2.0, 2.0))
print("model @ origin:", model @ vec4(0.0, 0.0, 0.0, 1.0))

binding = RecordingBinding()
binding.bind(view_proj, "u_view_proj", program="demo")
binding.bind(model.transpose(), "u_model", program="demo")
for upload in binding.uploads:
    print(upload.name, upload.location, upload.count, upload.data.dtype)

print(view_proj.to_string(decimals=3))
print("ortho:")
print(Mat4.orthographic(-1.0, 1.0, -1.0, 1.0, 0.1, 10.0))
print("fov:", deg(60.0).to_radians())
