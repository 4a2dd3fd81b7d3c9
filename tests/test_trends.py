"""
Tests for the moving-average trend line.

Validates:
  - Symmetric windows truncated at the edges
  - None values excluded from the window average
  - Confidence floor of ceil(window / 2) real values
  - Output length equals input length
"""

import pytest

from shotstats.trends import moving_average


class TestMovingAverage:
    """Tests for moving_average()."""

    def test_three_wide(self):
        result = moving_average([90, 95, 100, 95, 90], 3)
        assert result == [92.5, 95.0, 96.7, 95.0, 92.5]

    def test_insufficient_neighbours(self):
        """A 5-wide window needs 3 values."""
        assert moving_average([90, 95], 5) == [None, None]

    def test_none_excluded_from_window(self):
        result = moving_average([90, None, 100], 3)
        assert result[1] == 95.0
        # Edges only see one real value
        assert result[0] is None
        assert result[2] is None

    def test_same_length(self):
        values = [9.1, 9.4, None, 9.8, 10.0, 9.7, None]
        assert len(moving_average(values, 5)) == len(values)

    def test_five_wide_edges(self):
        result = moving_average([9.0, 9.2, 9.4, 9.6, 9.8], 5)
        assert result[0] == 9.2   # window [0, 2]
        assert result[2] == 9.4   # full window
        assert result[4] == 9.6   # window [2, 4]

    def test_window_of_one_is_identity(self):
        assert moving_average([1, None, 2], 1) == [1.0, None, 2.0]

    def test_rounds_half_up(self):
        assert moving_average([1.25], 1) == [1.3]

    def test_large_values(self):
        assert moving_average([1e27], 1) == [1e27]
        assert moving_average([1e30, 3e30], 3) == [2e30, 2e30]

    def test_even_window(self):
        # half = 2, at least 2 values
        assert moving_average([10, 20, 30], 4) == [20.0, 20.0, 20.0]

    @pytest.mark.parametrize("values,window", [
        ([], 3),
        ([90, 95], 0),
        ([90, 95], -2),
    ])
    def test_empty_output(self, values, window):
        assert moving_average(values, window) == []
