"""Reshape 6x6 covariance matrices between row-major and nested layouts.

Layout only: values are copied verbatim, no symmetry or definiteness checks.
Rows and columns follow :class:`CovarianceAxis` order.
"""

from collections.abc import Sequence

from .constants import COVARIANCE_DIM, COVARIANCE_SIZE, CovarianceAxis

CovarianceMatrix = tuple[tuple[float, ...], ...]

_AXIS_INDEX = {axis: i for i, axis in enumerate(CovarianceAxis)}


def covariance_row_major_to_nested(flat: Sequence[float]) -> CovarianceMatrix:
    """
    Convert a flat row-major covariance into a nested 6x6 matrix.

    Args:
        flat: 36 values, element (i, j) at index ``6 * i + j``.

    Returns:
        Tuple of 6 rows, each a tuple of 6 floats.

    Raises:
        ValueError: If ``flat`` does not hold exactly 36 values.
    """
    if len(flat) != COVARIANCE_SIZE:
        raise ValueError(f"Need {COVARIANCE_SIZE} covariance entries, received {len(flat)}")

    return tuple(
        tuple(flat[COVARIANCE_DIM * i + j] for j in range(COVARIANCE_DIM))
        for i in range(COVARIANCE_DIM)
    )


def covariance_nested_to_row_major(nested: Sequence[Sequence[float]]) -> tuple[float, ...]:
    """Inverse of :func:`covariance_row_major_to_nested`."""
    if len(nested) != COVARIANCE_DIM or any(len(row) != COVARIANCE_DIM for row in nested):
        raise ValueError(f"Need a {COVARIANCE_DIM}x{COVARIANCE_DIM} covariance matrix")

    return tuple(value for row in nested for value in row)


def covariance_entry(
    matrix: Sequence[Sequence[float]], row: CovarianceAxis | str, col: CovarianceAxis | str
) -> float:
    """
    Read one entry of a nested covariance matrix by axis name.

    ``covariance_entry(matrix, CovarianceAxis.X, "yaw")`` is ``matrix[0][5]``.
    """
    return matrix[_AXIS_INDEX[CovarianceAxis(row)]][_AXIS_INDEX[CovarianceAxis(col)]]
