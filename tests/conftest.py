"""
Pytest configuration for the search tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the root, so parent is the root)
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from primitives.field import make_rng  # noqa: E402


@pytest.fixture
def rng():
    """Seeded generator so sampled polynomials are reproducible."""
    return make_rng(20201)
