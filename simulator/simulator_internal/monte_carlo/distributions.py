"""
PURPOSE: Triangular distribution sampler for cost and duration uncertainty.

RESPONSIBILITIES:
- Map uniform draws to triangular variates by inverse-transform sampling
- Derive (min, mode, max) from a baseline and a risk factor
- Single responsibility: only sampling, no I/O or aggregation

The uniform draws are supplied by the caller. Nothing here owns a random
generator, which keeps every sample reproducible from its inputs.
"""

import math

import numpy as np

from simulator_internal.monte_carlo.config import get_distribution_shape
from simulator_internal.monte_carlo.errors import InvalidDistributionParameters


def _validate_triangular(min_val, mode_val, max_val):
    for name, value in (("min", min_val), ("mode", mode_val), ("max", max_val)):
        if not math.isfinite(value):
            raise InvalidDistributionParameters(f"{name} must be finite, got {value}")
    if not (min_val <= mode_val <= max_val):
        raise InvalidDistributionParameters(
            f"Invalid triangular params: min={min_val}, mode={mode_val}, max={max_val}"
        )


def sample_triangular(min_val, mode_val, max_val, u):
    """
    Sample from a triangular distribution given uniform draw(s).

    Inverse CDF of the triangular distribution:
        f = (mode - min) / (max - min)
        u <  f: min + sqrt(u * (max - min) * (mode - min))
        u >= f: max - sqrt((1 - u) * (max - min) * (max - mode))

    Args:
        min_val: Minimum value (left bound)
        mode_val: Most likely value (peak)
        max_val: Maximum value (right bound)
        u: Uniform draw in [0, 1), or an array of them

    Returns:
        float for a scalar u, numpy array for an array of u.
        Every value lies in [min_val, max_val].

    Raises:
        InvalidDistributionParameters: if min > mode, mode > max, a parameter
            is not finite, or u is outside [0, 1).
    """
    _validate_triangular(min_val, mode_val, max_val)

    u_arr = np.asarray(u, dtype=float)
    if not np.all((u_arr >= 0.0) & (u_arr < 1.0)):
        raise InvalidDistributionParameters("u must be in [0, 1)")

    width = max_val - min_val
    if width == 0:
        # Zero-width distribution: every draw is the single point.
        samples = np.full(u_arr.shape, float(min_val))
    else:
        f = (mode_val - min_val) / width
        # Both radicands are non-negative for min <= mode <= max and u in [0, 1).
        lower = min_val + np.sqrt(u_arr * width * (mode_val - min_val))
        upper = max_val - np.sqrt((1.0 - u_arr) * width * (max_val - mode_val))
        samples = np.where(u_arr < f, lower, upper)
        samples = np.clip(samples, min_val, max_val)

    if samples.ndim == 0:
        return float(samples)
    return samples


def triangular_params_from_baseline(base, risk_factor):
    """
    Shape a triangular distribution around a baseline estimate.

    Returns:
        tuple: (min, mode, max) = (base * 0.8, base, base * (1 + risk_factor / 50))
    """
    shape = get_distribution_shape(risk_factor)
    return base * shape["min_multiplier"], base, base * shape["max_multiplier"]
