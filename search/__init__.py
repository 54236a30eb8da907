"""Search - degree filtering, Weil cutoffs and the pointless-curve search."""

from search.config import SearchConfig, read_config_file
from search.degrees import degree_upper_bound, genus, possible_degrees
from search.orchestrator import (
    SearchRecord,
    SearchSummary,
    candidate_field_orders,
    run_search,
    summarize,
)
from search.pointless import (
    NOT_FOUND,
    SearchResult,
    is_pointless,
    pointless_search,
    rational_point_x,
)
from search.weil import (
    field_size_cutoff,
    guaranteed_point_threshold,
    hasse_weil_lower_bound,
    weil_bound,
)

__all__ = [
    # Config
    "SearchConfig",
    "read_config_file",
    # Degrees
    "genus",
    "degree_upper_bound",
    "possible_degrees",
    # Weil bound
    "weil_bound",
    "field_size_cutoff",
    "guaranteed_point_threshold",
    "hasse_weil_lower_bound",
    # Pointless search
    "NOT_FOUND",
    "SearchResult",
    "pointless_search",
    "rational_point_x",
    "is_pointless",
    # Orchestration
    "SearchRecord",
    "SearchSummary",
    "candidate_field_orders",
    "summarize",
    "run_search",
]
