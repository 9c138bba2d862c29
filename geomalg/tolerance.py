from __future__ import annotations

# Default approximate-equality epsilon for the built-in scalar families.
EPS_APPROX = 1e-6

# Quaternion dot product above which slerp falls back to nlerp.
SLERP_DOT_THRESHOLD = 0.9995

# Smallest ray parameter accepted as a ray-plane hit (hits behind the origin are rejected).
RAY_TMIN = 0.0
