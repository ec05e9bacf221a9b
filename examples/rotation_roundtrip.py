# examples/rotation_roundtrip.py
from rotmath import EulerAngles, Quaternion, deg, vec3

e = EulerAngles(roll=deg(30.0), pitch=deg(-20.0), yaw=deg(75.0))
q = Quaternion.from_euler(e)

print("euler in:", e)
print("quaternion:", q)
print("norm:", q.norm())
print("euler out:", q.to_euler().to_degrees())

v = vec3(1.0, 0.0, 0.0)
print("rotate:", q.rotate(v))
print("mat3 @ v:", q.to_mat3() @ v)
print(q.to_mat3())

# Gimbal lock: roll and yaw collapse into one degree of freedom.
locked = Quaternion.from_euler(EulerAngles(deg(180.0), deg(90.0), deg(45.0)))
print("at the pole:", locked.to_euler().to_degrees())
