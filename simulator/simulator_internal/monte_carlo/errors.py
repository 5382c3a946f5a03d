"""
Error taxonomy for the Monte Carlo engine.

Every error is a ValueError subclass, so callers that only care about
"bad input" can keep catching ValueError. All of them are raised before any
sampling starts; the engine never returns a partial result.
"""


class MonteCarloError(ValueError):
    """Base class for simulation input errors."""


class InvalidIterations(MonteCarloError):
    """iterations is not a positive integer."""


class InvalidBaseline(MonteCarloError):
    """base cost or base time is not a positive finite number."""


class InvalidRiskFactor(MonteCarloError):
    """risk factor is negative or not finite."""


class InvalidDistributionParameters(MonteCarloError):
    """Triangular parameters violate min <= mode <= max, or u is outside [0, 1)."""


class InvalidBinCount(MonteCarloError):
    """Histogram requested with fewer than one bin, or over no samples."""
