from __future__ import annotations

import time

from geomalg import Quat, Vec3


def _inputs(n: int) -> tuple[Quat, list[Vec3]]:
    q = Quat.new(0.3, -0.5, 0.2, 0.7).normalize()
    vs = [Vec3(float(i % 7), float(i % 11) - 5.0, float(i % 13) * 0.5) for i in range(n)]
    return q, vs


def main() -> int:
    n = 20000
    q, vs = _inputs(n)
    q_conj = q.conjugate()

    t0 = time.perf_counter()
    fast = [q.mul_v(v) for v in vs]
    t1 = time.perf_counter()
    sandwich = [q.mul_q(Quat(0.0, v)).mul_q(q_conj).v for v in vs]
    t2 = time.perf_counter()
    m = q.to_mat3()
    via_matrix = [Vec3.from_array(m @ v.to_array()) for v in vs]
    t3 = time.perf_counter()

    mismatches = sum(1 for a, b, c in zip(fast, sandwich, via_matrix) if not (a.approx_eq(b) and a.approx_eq(c)))

    print("bench_quat_rotation")
    print(f"  vectors: {n}")
    print(f"  mul_v_s: {t1 - t0:.4f}")
    print(f"  sandwich_s: {t2 - t1:.4f}")
    print(f"  to_mat3_s: {t3 - t2:.4f}")
    print(f"  mismatches: {mismatches}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
