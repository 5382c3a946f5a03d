"""
PURPOSE: Summarize a completed sample series as an equal-width histogram.

SINGLE RESPONSIBILITY:
- Partition samples into bin_count equal-width bins over [min, max]
- Count occupancy; every sample lands in exactly one bin
- Produce display labels (rounded) separate from the binning boundaries (unrounded)
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np

from simulator_internal.monte_carlo.config import HISTOGRAM_BINS
from simulator_internal.monte_carlo.errors import InvalidBinCount, MonteCarloError


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _boundary(min_val: float, max_val: float, fraction: float) -> float:
    """Point at fraction of the way from min_val to max_val, without computing max_val - min_val."""
    return min_val * (1.0 - fraction) + max_val * fraction


@dataclass
class HistogramBin:
    """One equal-width range of a histogram.

    Attributes:
        low (float): Lower boundary used for binning.
        high (float): Upper boundary used for binning.
        low_label (int): low rounded for display.
        high_label (int): high rounded for display.
        count (int): Number of samples that fell in this bin.
    """
    low: float
    high: float
    low_label: int
    high_label: int
    count: int = 0

    @property
    def label(self) -> str:
        return f"{self.low_label} - {self.high_label}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the {bin, count} shape used by chart consumers."""
        return {"bin": self.label, "count": self.count}


def validate_bin_count(bin_count) -> None:
    if isinstance(bin_count, bool) or not isinstance(bin_count, (int, np.integer)) or bin_count < 1:
        raise InvalidBinCount(f"bin_count must be an integer >= 1, got {bin_count!r}")


def build_histogram(samples, bin_count: int = HISTOGRAM_BINS) -> List[HistogramBin]:
    """
    Build an ordered, equal-width histogram over samples.

    Args:
        samples: Sequence or numpy array of finite floats (at least one).
        bin_count: Number of bins (default 10).

    Returns:
        List of bin_count HistogramBin objects in ascending order. The counts
        sum to len(samples).

    Raises:
        InvalidBinCount: if bin_count < 1 or samples is empty.
        MonteCarloError: if samples contains NaN or infinite values.
    """
    validate_bin_count(bin_count)

    values = np.asarray(samples, dtype=float).ravel()
    if values.size == 0:
        raise InvalidBinCount("cannot build a histogram over zero samples")
    if not np.all(np.isfinite(values)):
        raise MonteCarloError("samples must be finite")

    min_val = float(values.min())
    max_val = float(values.max())
    value_range = max_val - min_val

    if value_range == 0:
        # All samples identical: no width to divide by, everything goes in the first bin.
        label = _round_half_up(min_val)
        bins = [HistogramBin(min_val, max_val, label, label) for _ in range(bin_count)]
        bins[0].count = int(values.size)
        return bins

    bins = []
    for i in range(bin_count):
        low = _boundary(min_val, max_val, i / bin_count)
        high = _boundary(min_val, max_val, (i + 1) / bin_count)
        bins.append(HistogramBin(low, high, _round_half_up(low), _round_half_up(high)))

    # Ratio first: range / bin_count can underflow to 0 for a subnormal range.
    if math.isfinite(value_range):
        positions = (values - min_val) / value_range * bin_count
    else:
        # max - min overflows; halved values keep every difference finite.
        half_range = max_val / 2 - min_val / 2
        positions = (values / 2 - min_val / 2) / half_range * bin_count
    if not np.all(np.isfinite(positions)):
        raise MonteCarloError(f"cannot bin samples over [{min_val}, {max_val}]")

    # Clamp so that max_val (and float rounding near it) lands in the last bin.
    indices = np.clip(np.floor(positions), 0, bin_count - 1).astype(np.int64)
    counts = np.bincount(indices, minlength=bin_count)
    for hist_bin, count in zip(bins, counts):
        hist_bin.count = int(count)

    return bins
