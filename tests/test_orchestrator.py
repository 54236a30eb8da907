"""Tests for the (degree, field order) search driver."""

import logging
from itertools import islice

import numpy as np
import pytest

from primitives.polynomial import evaluate_all
from search.orchestrator import (
    SearchRecord,
    candidate_field_orders,
    run_search,
    summarize,
)
from search.pointless import SearchResult, is_pointless


class TestCandidateFieldOrders:
    """Test field order selection."""

    def test_genus_two_hyperelliptic(self) -> None:
        """All odd prime powers up to floor(13.93)."""
        assert candidate_field_orders(2, 2, 2) == [3, 5, 7, 9, 11, 13]

    def test_q_start(self) -> None:
        """Orders below q_start are skipped."""
        assert candidate_field_orders(2, 2, 6) == [7, 9, 11, 13]
        assert candidate_field_orders(2, 2, 14) == []

    def test_roots_of_unity_condition(self) -> None:
        """Only q = 1 mod n, including prime powers like 4, 9, 25."""
        assert candidate_field_orders(3, 2, 2) == [4, 7, 13]
        assert candidate_field_orders(4, 3, 2) == [5, 9, 13, 17, 25, 29]

    def test_genus_one_has_no_fields(self) -> None:
        """Elliptic curves always have points: nothing to search."""
        assert candidate_field_orders(2, 1, 2) == []

    @pytest.mark.parametrize("n,g,q_start", [(1, 2, 2), (2, 0, 2), (2, 2, 1)])
    def test_invalid_parameters(self, n: int, g: int, q_start: int) -> None:
        with pytest.raises(ValueError):
            candidate_field_orders(n, g, q_start)


class TestSummarize:
    """Test the report header data."""

    def test_genus_two_hyperelliptic(self) -> None:
        summary = summarize(2, 2, 2)
        assert summary.n == 2
        assert summary.genus == 2
        assert summary.weil_bound == pytest.approx(13.928, abs=1e-3)
        assert summary.threshold == 14
        assert summary.degrees == [6]
        assert summary.field_orders == [3, 5, 7, 9, 11, 13]


class TestRunSearch:
    """Test the lazy record stream."""

    def test_examines_every_pair_in_order(self) -> None:
        """y^2 = f(x), genus 2: d = 6 over q = 3, 5, 7, 9, 11, 13."""
        records = list(run_search(2, 2, 2, 3, rng=1))
        assert [(r.degree, r.q) for r in records] == [
            (6, 3), (6, 5), (6, 7), (6, 9), (6, 11), (6, 13),
        ]
        for record in records:
            assert isinstance(record, SearchRecord)
            assert isinstance(record.result, SearchResult)
            assert 1 <= record.result.trials <= 3
            if record.result.found:
                assert record.result.polynomial.degree == 6
                assert is_pointless(record.result.polynomial, 2)

    def test_superelliptic_pairs(self) -> None:
        """y^3 = f(x), genus 4: d = 6 over every q = 1 mod 3 up to 61."""
        records = list(run_search(3, 4, 2, 1, rng=3))
        assert [r.degree for r in records] == [6] * len(records)
        assert [r.q for r in records] == [4, 7, 13, 16, 19, 25, 31, 37, 43, 49, 61]

    def test_superelliptic_witnesses(self) -> None:
        """The first two pairs (GF(4), GF(7)) yield verified cubic witnesses."""
        records = list(islice(run_search(3, 4, 2, 3000, rng=5), 2))
        assert [(r.degree, r.q) for r in records] == [(6, 4), (6, 7)]
        for record in records:
            assert record.result.found
            f = record.result.polynomial
            assert f.degree == 6
            assert is_pointless(f, 3)
            e = (record.q - 1) // 3
            assert f.coeffs[0] ** e != 1
            values = evaluate_all(f, f.field)
            assert not np.any(values == 0)
            assert np.all(values ** e != 1)

    def test_lazy(self) -> None:
        """Records are produced one pair at a time."""
        gen = run_search(2, 2, 2, 1, rng=0)
        first = next(gen)
        assert (first.degree, first.q) == (6, 3)
        second = next(gen)
        assert (second.degree, second.q) == (6, 5)

    def test_restartable_and_reproducible(self) -> None:
        """Each call starts over; the same seed gives the same results."""
        a = [(r.degree, r.q, str(r.result)) for r in run_search(2, 2, 2, 200, rng=11)]
        b = [(r.degree, r.q, str(r.result)) for r in run_search(2, 2, 2, 200, rng=11)]
        assert a == b

    def test_logs_hasse_weil_bound(self, caplog) -> None:
        """Each pair logs the Hasse-Weil lower bound on the point count at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="search"):
            list(run_search(2, 2, 12, 1, rng=0))
        assert "GF(13): genus-2 curves have at least -0.42 points" in caplog.text
        assert "searching d=6 over GF(13)" in caplog.text

    def test_nothing_to_search(self) -> None:
        """Genus 1 yields no records."""
        assert list(run_search(2, 1, 2, 10, rng=0)) == []

    @pytest.mark.parametrize("n,g,q_start,max_trials", [
        (1, 2, 2, 5),
        (2, 0, 2, 5),
        (2, 2, 1, 5),
        (2, 2, 2, 0),
    ])
    def test_invalid_parameters(self, n: int, g: int, q_start: int, max_trials: int) -> None:
        """Validation happens when iteration starts."""
        with pytest.raises(ValueError):
            next(run_search(n, g, q_start, max_trials))
