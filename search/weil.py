"""Weil bound cutoffs for genus-g curves.

A genus-g curve over GF(q) has at least q + 1 - 2g*sqrt(q) rational points.
That count is positive once q > 2g^2 - 1 + 2g*sqrt(g^2 - 1), so no field
beyond the cutoff can carry a pointless curve of genus g.
"""

import math


def weil_bound(g: int) -> float:
    """2g^2 - 1 + 2g*sqrt(g^2 - 1).

    Raises:
        ValueError: If g < 1
    """
    if g < 1:
        raise ValueError(f"genus must be >= 1, got {g}")
    return 2 * g**2 - 1 + 2 * g * math.sqrt(g**2 - 1)


def field_size_cutoff(g: int) -> int:
    """Largest field order worth searching for genus g."""
    return math.floor(weil_bound(g))


def guaranteed_point_threshold(g: int) -> int:
    """Smallest T such that every genus-g curve over GF(q), q > T, has a rational point."""
    return math.ceil(weil_bound(g))


def hasse_weil_lower_bound(q: int, g: int) -> float:
    """Lower bound q + 1 - 2g*sqrt(q) on the number of GF(q)-points of a genus-g curve."""
    return q + 1 - 2 * g * math.sqrt(q)
