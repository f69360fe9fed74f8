"""Quaternion and rotation-matrix helpers.

Quaternions are ``(x, y, z, w)`` sequences, matching the message layout.
None of the helpers normalize their input: a non-unit quaternion yields a
scaled (non-orthonormal) matrix and NaN components propagate unchanged.
"""

from collections.abc import Sequence

import numpy as np


def quaternion_norm(q: Sequence[float]) -> float:
    return float(np.linalg.norm(np.asarray(q, dtype=np.float64)))


def quaternion_to_matrix(q: Sequence[float]) -> np.ndarray:
    """
    Convert a quaternion to a 3x3 rotation matrix.

    Args:
        q: Quaternion as ``(x, y, z, w)``.

    Returns:
        3x3 float64 array. Orthonormal only if ``q`` has unit norm.
    """
    x, y, z, w = (float(c) for c in q)
    x2, y2, z2, w2 = x * x, y * y, z * z, w * w
    return np.array(
        [
            [w2 + x2 - y2 - z2, 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), w2 - x2 + y2 - z2, 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), w2 - x2 - y2 + z2],
        ],
        dtype=np.float64,
    )


def quaternion_multiply(
    a: Sequence[float], b: Sequence[float]
) -> tuple[float, float, float, float]:
    """
    Hamilton product ``a * b``.

    The result rotates by ``b`` first, then by ``a``.
    """
    ax, ay, az, aw = (float(c) for c in a)
    bx, by, bz, bw = (float(c) for c in b)
    return (
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    )

