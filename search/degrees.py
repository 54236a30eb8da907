"""Admissible degrees of f(x) for genus-g curves y^n = f(x).

For separable f of degree d the curve y^n = f(x) has genus

    ((n - 1)(d - 2) + n - gcd(n, d)) / 2

When gcd(n, d) == 1 the place at infinity of the x-line is totally ramified
and the single point above it is rational, so such d can never give a
pointless curve and are dropped.

The candidate range 1..2 + floor(2g/(n-1)) comes from bounding the genus
formula from below. It is kept as is; it has not been shown to cover every
(n, g).
"""

from fractions import Fraction
from math import gcd
from typing import List, Union


def genus(n: int, d: int) -> Union[int, Fraction]:
    """Genus of y^n = f(x) for separable f of degree d.

    Returns an int when the formula is integral, otherwise the exact Fraction.
    """
    value = Fraction((n - 1) * (d - 2) + n - gcd(n, d), 2)
    return int(value) if value.denominator == 1 else value


def degree_upper_bound(n: int, g: int) -> int:
    """Largest candidate degree, 2 + floor(2g / (n - 1))."""
    return 2 + (2 * g) // (n - 1)


def possible_degrees(n: int, g: int) -> List[int]:
    """Degrees d for which y^n = f(x) has genus g and infinity is not totally ramified.

    Args:
        n: Exponent of y, n >= 2
        g: Target genus, g >= 1

    Returns:
        Admissible degrees in ascending order

    Raises:
        ValueError: If n < 2 or g < 1
    """
    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")
    if g < 1:
        raise ValueError(f"genus must be >= 1, got {g}")
    return [
        d for d in range(1, degree_upper_bound(n, g) + 1)
        if gcd(d, n) > 1 and genus(n, d) == g
    ]
