"""Text report for a pointless-curve search.

Lines follow the layout of the original search printout: parameters, Weil
threshold, degree list, then one line per (degree, field) pair. Extension
field elements are written in galois integer representation.
"""

import sys
from typing import Iterable, Iterator, Optional, TextIO

import galois

from primitives.polynomial import coefficients_ascending
from search.config import SearchConfig
from search.orchestrator import SearchRecord, SearchSummary
from search.pointless import NOT_FOUND


def format_polynomial(f: galois.Poly, var: str = "x") -> str:
    """Write f as e.g. '2*x^6 + x^2 + 2', highest degree first."""
    terms = []
    coeffs = coefficients_ascending(f)
    for k in range(len(coeffs) - 1, -1, -1):
        c = coeffs[k]
        if c == 0:
            continue
        if k == 0:
            terms.append(str(c))
            continue
        monomial = var if k == 1 else f"{var}^{k}"
        terms.append(monomial if c == 1 else f"{c}*{monomial}")
    return " + ".join(terms) if terms else "0"


def header_lines(summary: SearchSummary) -> Iterator[str]:
    n, g = summary.n, summary.genus
    yield f"Looking for examples of pointless curves of the form y^{n}=f(x) of genus {g}"
    yield f"For q > {summary.threshold} one is guaranteed rational points"
    yield (f"Possible degrees of f(x) for which y^{n}-f(x) has genus {g} "
           f"and infinity does not totally ramify: d in {summary.degrees}")


def record_line(record: SearchRecord) -> str:
    result = record.result
    shown = format_polynomial(result.polynomial) if result.found else NOT_FOUND
    return f"q = {record.q} and f(x) = {shown}"


def report_lines(
    config: SearchConfig,
    summary: SearchSummary,
    records: Iterable[SearchRecord],
) -> Iterator[str]:
    """Lazily render the full report, one line per yielded string."""
    yield from header_lines(summary)
    current = None
    for record in records:
        if record.degree != current:
            current = record.degree
            yield f"When the degree of f(x) is {current}:"
        yield record_line(record)
    yield (f"Finished search, checking up to {config.max_trials} polynomials "
           f"for each pair (degree, F_q).")


def write_report(
    lines: Iterable[str],
    stream: Optional[TextIO] = None,
    sink: Optional[TextIO] = None,
) -> int:
    """Print each line as it is produced, also writing it to `sink` if given.

    The caller owns `sink` (e.g. a report file opened in append mode).

    Returns:
        Number of lines written
    """
    stream = stream if stream is not None else sys.stdout
    count = 0
    for line in lines:
        print(line, file=stream, flush=True)
        if sink is not None:
            sink.write(line + "\n")
            sink.flush()
        count += 1
    return count
