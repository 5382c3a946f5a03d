"""
PURPOSE: Unit tests for histogram.py.

Tests cover:
1. Bin counts always sum to the number of samples
2. The maximum sample lands in the last bin
3. Display labels are rounded, binning boundaries are not
4. Identical samples collapse into the first bin
5. Error handling for invalid bin counts and sample sets
"""

import numpy as np
import pytest

from simulator_internal.monte_carlo.errors import InvalidBinCount, MonteCarloError
from simulator_internal.monte_carlo.histogram import HistogramBin, build_histogram


class TestBinCountInvariant:

    @pytest.mark.parametrize("bin_count", [1, 2, 3, 7, 10, 64])
    def test_counts_sum_to_sample_size(self, bin_count):
        samples = np.random.default_rng(11).triangular(800, 1000, 2000, size=997)
        bins = build_histogram(samples, bin_count)
        assert len(bins) == bin_count
        assert sum(b.count for b in bins) == 997

    def test_awkward_float_ranges(self):
        samples = [0.1, 0.2, 0.3, 0.7, 0.1 + 0.2]
        bins = build_histogram(samples, 3)
        assert sum(b.count for b in bins) == len(samples)

    def test_max_lands_in_last_bin(self):
        bins = build_histogram([0.0, 10.0], 10)
        assert bins[0].count == 1
        assert bins[-1].count == 1
        assert sum(b.count for b in bins[1:-1]) == 0

    def test_accepts_plain_list(self):
        bins = build_histogram([1.0, 2.0, 3.0, 4.0], 2)
        assert [b.count for b in bins] == [2, 2]


class TestLabels:

    def test_equal_width_labels(self):
        bins = build_histogram([0.0, 100.0], 4)
        assert [b.label for b in bins] == ["0 - 25", "25 - 50", "50 - 75", "75 - 100"]

    def test_bins_are_ascending(self):
        samples = np.random.default_rng(5).random(500) * 1000
        bins = build_histogram(samples, 10)
        lows = [b.low for b in bins]
        assert lows == sorted(lows)
        assert bins[0].low == pytest.approx(samples.min())
        assert bins[-1].high == pytest.approx(samples.max())

    def test_labels_round_half_up(self):
        bins = build_histogram([0.5, 1.5], 1)
        assert bins[0].low_label == 1
        assert bins[0].high_label == 2
        assert bins[0].label == "1 - 2"

    def test_binning_uses_unrounded_boundaries(self):
        # width 0.5: 0.4 belongs to the first bin even though its label rounds to 0 - 1
        bins = build_histogram([0.0, 0.4, 1.0], 2)
        assert [b.count for b in bins] == [2, 1]
        assert bins[0].high == pytest.approx(0.5)
        assert [b.label for b in bins] == ["0 - 1", "1 - 1"]

    def test_to_dict_shape(self):
        hist_bin = HistogramBin(low=799.6, high=920.2, low_label=800, high_label=920, count=42)
        assert hist_bin.to_dict() == {"bin": "800 - 920", "count": 42}


class TestDegenerateRange:

    def test_identical_samples_go_to_first_bin(self):
        bins = build_histogram([7.0, 7.0, 7.0], 10)
        assert len(bins) == 10
        assert bins[0].count == 3
        assert all(b.count == 0 for b in bins[1:])
        assert all(b.label == "7 - 7" for b in bins)

    def test_single_sample(self):
        bins = build_histogram([1234.4], 10)
        assert sum(b.count for b in bins) == 1
        assert bins[0].count == 1
        assert bins[0].low == bins[0].high == 1234.4
        assert bins[0].label == "1234 - 1234"

    def test_single_bin(self):
        bins = build_histogram([3.0, 9.0, 4.0], 1)
        assert len(bins) == 1
        assert bins[0].count == 3


class TestExtremeRanges:

    def test_subnormal_range(self):
        # range / bin_count underflows to 0; the ratio still places the maximum in the last bin
        bins = build_histogram([0.0, 5e-324, 5e-324], 10)
        assert [b.count for b in bins] == [1] + [0] * 8 + [2]

    def test_range_beyond_float_max(self):
        bins = build_histogram([-1e308, 0.0, 1e308], 10)
        assert [b.count for b in bins] == [1, 0, 0, 0, 0, 1, 0, 0, 0, 1]
        assert bins[0].low == -1e308
        assert bins[-1].high == 1e308
        assert all(np.isfinite(b.low) and np.isfinite(b.high) for b in bins)

    @pytest.mark.parametrize("samples", [[0.0, 5e-324], [-1e308, 1e308], [1e-310, 3e-310, 2e-310]])
    def test_extreme_counts_sum_to_sample_size(self, samples):
        bins = build_histogram(samples, 7)
        assert sum(b.count for b in bins) == len(samples)


class TestErrors:

    @pytest.mark.parametrize("bin_count", [0, -1, 2.5, True, "10"])
    def test_invalid_bin_count(self, bin_count):
        with pytest.raises(InvalidBinCount):
            build_histogram([1.0, 2.0], bin_count)

    def test_empty_samples(self):
        with pytest.raises(InvalidBinCount):
            build_histogram([], 10)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_samples(self, bad):
        with pytest.raises(MonteCarloError):
            build_histogram([1.0, bad, 2.0], 10)
