"""Randomized search for pointless curves y^n = f(x) over GF(q).

A candidate f has separable coefficients and a leading coefficient that is not
an n'th power, so y^n = lc(f) has no solution and, when n divides deg f, the
points above infinity are not rational. The affine points are checked
exhaustively: the curve has a rational point at x = a exactly when f(a) is an
n'th power (0 included).

A returned polynomial is therefore always pointless. A not-found result only
means the trial budget ran out.
"""

import logging
from dataclasses import dataclass
from math import gcd
from typing import Optional, Union

import galois
import numpy as np

from primitives.field import field_elements, get_field, make_rng, to_ints
from primitives.polynomial import PolynomialSampler, evaluate_all
from primitives.power_residues import NthPowerSet

logger = logging.getLogger(__name__)

NOT_FOUND = "Not found!"


@dataclass
class SearchResult:
    """Outcome of one (degree, field) search.

    Attributes:
        polynomial: Witness f with y^n = f(x) pointless, or None if not found
        trials: Candidate polynomials tested
        sampler_attempts: Polynomials drawn including non-separable rejects
    """
    polynomial: Optional[galois.Poly] = None
    trials: int = 0
    sampler_attempts: int = 0

    @property
    def found(self) -> bool:
        return self.polynomial is not None

    def __str__(self) -> str:
        return str(self.polynomial) if self.found else NOT_FOUND


def rational_point_x(f: galois.Poly, nth_powers: NthPowerSet):
    """First a in GF(q), in enumeration order, with f(a) an n'th power.

    Returns:
        The field element a, or None if y^n = f(x) has no affine rational point
    """
    elements = field_elements(nth_powers.field)
    values = to_ints(evaluate_all(f, nth_powers.field))
    for a, value in zip(elements, values):
        if value in nth_powers.members:
            return a
    return None


def is_pointless(f: galois.Poly, n: int) -> bool:
    """Exhaustively check that y^n = f(x) has no rational points over the field of f.

    With m = gcd(n, deg f), the places above infinity are rational exactly
    when z^m = lc(f) has a solution, i.e. lc(f) is an m'th power. For m == 1
    that always holds (total ramification). For m == n it is the leading
    coefficient condition used by the sampler.
    """
    field = f.field
    m = gcd(n, f.degree)
    if f.coeffs[0] in NthPowerSet.compute(m, field):
        return False
    return rational_point_x(f, NthPowerSet.compute(n, field)) is None


def pointless_search(
    n: int,
    q: int,
    d: int,
    g: int,
    max_trials: int,
    rng: Optional[Union[int, np.random.Generator]] = None,
) -> SearchResult:
    """Look for f of degree d over GF(q) with y^n = f(x) pointless.

    Args:
        n: Exponent of y, n >= 2
        q: Field order, a prime power
        d: Degree of f, d >= 1
        g: Genus of the curves searched (informational, encoded by d)
        max_trials: Candidate polynomials to test before giving up, >= 1
        rng: numpy Generator or seed

    Returns:
        SearchResult holding the first pointless witness, or not-found

    Raises:
        ValueError: On invalid parameters, or if every element of GF(q) is an
            n'th power (no admissible leading coefficient exists)
    """
    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")
    if d < 1:
        raise ValueError(f"degree must be >= 1, got {d}")
    if max_trials < 1:
        raise ValueError(f"max_trials must be >= 1, got {max_trials}")
    field = get_field(q)
    rng = make_rng(rng)

    nth_powers = NthPowerSet.compute(n, field)
    non_nth_powers = nth_powers.complement()
    if non_nth_powers.size == 0:
        raise ValueError(
            f"every element of GF({q}) is an {n}'th power; no admissible leading coefficient"
        )
    sampler = PolynomialSampler(field, non_nth_powers, rng)

    logger.debug("n=%d q=%d d=%d g=%d: %d n'th powers, %d leading choices",
                 n, q, d, g, len(nth_powers), non_nth_powers.size)

    for trial in range(1, max_trials + 1):
        f = sampler.sample(d)
        if rational_point_x(f, nth_powers) is None:
            logger.debug("n=%d q=%d d=%d: witness after %d trials", n, q, d, trial)
            return SearchResult(polynomial=f, trials=trial,
                                sampler_attempts=sampler.attempts)

    return SearchResult(polynomial=None, trials=max_trials,
                        sampler_attempts=sampler.attempts)
