"""Ring orientation from the signed (shoelace) area."""

from typing import Sequence

import numpy as np


def _shoelace_sum(ring: Sequence[Sequence[float]]) -> float:
    """Sum of x_i * y_(i+1) - y_i * x_(i+1), wrapping the last point to the first."""
    if len(ring) == 0:
        return 0.0

    coords = np.asarray(ring, dtype=np.float64)[:, :2]
    x = coords[:, 0]
    y = coords[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    # cumsum accumulates in ring order; np.sum would sum pairwise
    return float(np.cumsum(x * y_next - y * x_next)[-1])


def signed_area(ring: Sequence[Sequence[float]]) -> float:
    """Return the signed area enclosed by a ring.

    Positive for counter-clockwise rings and negative for clockwise rings
    in a y-up coordinate system. Rings with fewer than three points have
    zero area.
    """
    if len(ring) < 3:
        return 0.0
    return _shoelace_sum(ring) / 2.0


def is_clockwise(ring: Sequence[Sequence[float]]) -> bool:
    """Return True if the ring winds clockwise.

    A ring is clockwise when its shoelace sum is strictly negative. A zero
    sum (collinear, degenerate or empty rings) counts as counter-clockwise.

    Args:
        ring: Sequence of (x, y) pairs. The closing point may be repeated
            or omitted; both give the same result.

    Returns:
        True for clockwise rings.
    """
    if len(ring) < 3:
        return False
    return _shoelace_sum(ring) < 0.0
