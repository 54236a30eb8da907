"""Search driver over (degree, field) pairs for fixed (n, g).

For every admissible degree d, and every prime power q in [q_start, cutoff]
with q = 1 mod n (so GF(q) has primitive n'th roots of unity), run one
pointless search and yield the result. Records come out grouped by degree,
then by ascending q.

Example:
    for record in run_search(2, 2, q_start=2, max_trials=1000, rng=1):
        print(record.degree, record.q, record.result)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional, Union

import numpy as np

from primitives.field import is_field_order, make_rng
from search.degrees import possible_degrees
from search.pointless import SearchResult, pointless_search
from search.weil import (
    field_size_cutoff,
    guaranteed_point_threshold,
    hasse_weil_lower_bound,
    weil_bound,
)

logger = logging.getLogger(__name__)


class SearchRecord(NamedTuple):
    """One examined (degree, field order) pair and its outcome."""
    degree: int
    q: int
    result: SearchResult


@dataclass
class SearchSummary:
    """Quantities fixed by (n, g) before any field is searched.

    Attributes:
        n: Exponent of y
        genus: Target genus
        weil_bound: 2g^2 - 1 + 2g*sqrt(g^2 - 1)
        threshold: ceil(weil_bound), every curve over GF(q), q > threshold, has points
        degrees: Admissible degrees of f(x)
        field_orders: Field orders q that will be searched for each degree
    """
    n: int
    genus: int
    weil_bound: float
    threshold: int
    degrees: List[int] = field(default_factory=list)
    field_orders: List[int] = field(default_factory=list)


def _validate(n: int, g: int, q_start: int, max_trials: Optional[int] = None) -> None:
    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")
    if g < 1:
        raise ValueError(f"genus must be >= 1, got {g}")
    if q_start < 2:
        raise ValueError(f"q_start must be >= 2, got {q_start}")
    if max_trials is not None and max_trials < 1:
        raise ValueError(f"max_trials must be >= 1, got {max_trials}")


def candidate_field_orders(n: int, g: int, q_start: int = 2) -> List[int]:
    """Prime powers q in [q_start, floor(weil_bound(g))] with q = 1 mod n."""
    _validate(n, g, q_start)
    return [
        q for q in range(q_start, field_size_cutoff(g) + 1)
        if is_field_order(q) and q % n == 1
    ]


def summarize(n: int, g: int, q_start: int = 2) -> SearchSummary:
    """Compute the Weil bound, degree list and field orders for a search."""
    _validate(n, g, q_start)
    return SearchSummary(
        n=n,
        genus=g,
        weil_bound=weil_bound(g),
        threshold=guaranteed_point_threshold(g),
        degrees=possible_degrees(n, g),
        field_orders=candidate_field_orders(n, g, q_start),
    )


def run_search(
    n: int,
    g: int,
    q_start: int,
    max_trials: int,
    rng: Optional[Union[int, np.random.Generator]] = None,
) -> Iterator[SearchRecord]:
    """Lazily search every admissible (degree, field order) pair.

    Args:
        n: Exponent of y, n >= 2
        g: Target genus, g >= 1
        q_start: Smallest field order examined, >= 2
        max_trials: Candidates tested per pair before giving up, >= 1
        rng: numpy Generator or seed, shared by every pair

    Yields:
        SearchRecord(degree, q, result), grouped by degree then ascending q

    Raises:
        ValueError: On invalid parameters (raised on the first next())
    """
    _validate(n, g, q_start, max_trials)
    rng = make_rng(rng)
    degrees = possible_degrees(n, g)
    field_orders = candidate_field_orders(n, g, q_start)
    logger.info("y^%d = f(x), genus %d: degrees %s, field orders %s",
                n, g, degrees, field_orders)

    for d in degrees:
        for q in field_orders:
            logger.info("searching d=%d over GF(%d)", d, q)
            logger.debug("GF(%d): genus-%d curves have at least %.2f points",
                         q, g, hasse_weil_lower_bound(q, g))
            result = pointless_search(n, q, d, g, max_trials, rng=rng)
            if result.found:
                logger.info("d=%d q=%d: pointless witness after %d trials",
                            d, q, result.trials)
            else:
                logger.info("d=%d q=%d: none found in %d trials", d, q, result.trials)
            yield SearchRecord(d, q, result)
