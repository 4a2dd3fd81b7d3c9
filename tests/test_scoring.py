"""
Tests for score aggregation.

Validates:
  - Practice series are excluded, unscored series count as 0
  - Totals are exact for one-decimal scores (no float drift)
  - Totals do not depend on series order
  - Malformed values are treated as absent, never raise
"""

import itertools
from decimal import Decimal

import pytest

from shotstats.models.series import SeriesResult
from shotstats.scoring import (
    average,
    parse_score,
    parse_shot,
    resolve_series_shot_count,
    sum_from_shots,
    total_score,
)


def _serie(position, score, practice=False):
    return SeriesResult(position=position, score_total=score, is_practice=practice)


class TestTotalScore:
    """Tests for total_score()."""

    def test_unscored_series_counts_as_zero(self):
        series = [_serie(1, 94), _serie(2, None), _serie(3, 91)]
        assert total_score(series) == 185

    def test_practice_excluded_even_when_first(self):
        series = [_serie(1, 50, practice=True), _serie(2, 94), _serie(3, 91)]
        assert total_score(series) == 185

    def test_tenth_scores_sum_exactly(self):
        """94.7 + 95.3 must give exactly 190.0."""
        series = [_serie(1, 94.7), _serie(2, 95.3)]
        assert total_score(series) == 190.0

    def test_no_float_drift(self):
        series = [_serie(1, 0.1), _serie(2, 0.2)]
        assert total_score(series) == 0.3

    def test_decimal_strings_and_decimals(self):
        series = [_serie(1, "102.4"), _serie(2, Decimal("101.9")), _serie(3, 99)]
        assert total_score(series) == 303.3

    def test_order_invariant(self):
        series = [
            _serie(1, 98.6),
            _serie(2, 50, practice=True),
            _serie(3, None),
            _serie(4, "101.3"),
            _serie(5, 99.9),
        ]
        totals = {total_score(list(p)) for p in itertools.permutations(series)}
        assert totals == {299.8}

    def test_only_practice_is_zero(self):
        series = [_serie(1, 88, practice=True), _serie(2, 92, practice=True)]
        assert total_score(series) == 0

    def test_empty_is_zero(self):
        assert total_score([]) == 0

    def test_unparseable_score_ignored(self):
        series = [_serie(1, "abc"), _serie(2, 90), _serie(3, "")]
        assert total_score(series) == 90


class TestAverage:
    """Tests for average()."""

    def test_skips_none(self):
        assert average([90, None, 100]) == 95

    def test_empty(self):
        assert average([]) is None

    def test_only_none(self):
        assert average([None, None]) is None

    def test_mixed_decimal_and_float(self):
        assert average([parse_score("94.7"), 95.3]) == 95.0

    def test_nan_is_absent(self):
        assert average([float("nan"), 90.0]) == 90.0

    def test_exact_mean(self):
        assert average(["94.7", "94.8", "94.9"]) == 94.8


class TestSumFromShots:
    """Tests for sum_from_shots()."""

    def test_skips_empty_and_garbage(self):
        assert sum_from_shots(["10.1", "9.8", "", "x", "10.4"]) == 30.3

    def test_rounds_once_at_the_end(self):
        assert sum_from_shots(["0.1", "0.1", "0.1"]) == 0.3

    def test_whole_rings(self):
        assert sum_from_shots(["10", "9", "9", "8", "10"]) == 46.0

    def test_no_shots(self):
        assert sum_from_shots([]) == 0.0

    def test_huge_shot_does_not_raise(self):
        assert sum_from_shots(["9e99"]) == 9e99

    def test_shot_beyond_float_range_ignored(self):
        assert sum_from_shots(["1e400", "9.5"]) == 9.5


class TestParsing:
    """Tests for the lenient value parsers."""

    @pytest.mark.parametrize("value", [None, "", "  ", "abc", "nan", "inf", True])
    def test_unreadable_scores(self, value):
        assert parse_score(value) is None

    def test_score_keeps_decimal_value(self):
        assert parse_score(94.7) == Decimal("94.7")

    def test_shot_strips_whitespace(self):
        assert parse_shot(" 9.5 ") == 9.5

    def test_shot_garbage(self):
        assert parse_shot("9,5") is None


class TestResolveSeriesShotCount:
    """Tests for resolve_series_shot_count()."""

    def test_recorded_shots_are_exact(self):
        assert resolve_series_shot_count(["9", "10", "8"], 10) == 3

    def test_falls_back_without_shots(self):
        assert resolve_series_shot_count(None, 10) == 10

    def test_falls_back_on_empty_list(self):
        assert resolve_series_shot_count([], 5) == 5
