"""
PURPOSE: Simulation configuration and threshold parameters for the Monte Carlo engine.

RESPONSIBILITIES:
- Define simulation hyperparameters (number of runs, random seed)
- Triangular distribution shaping (min multiplier, risk factor scaling)
- Success threshold definition
- Single responsibility: configuration only, no simulation logic
"""

# Simulation Parameters
NUM_RUNS = 5000  # Default number of iterations per simulation
RANDOM_SEED = None  # Set to int for reproducibility, None for random

# Distribution Shaping
# min = base * MIN_MULTIPLIER, mode = base, max = base * (1 + risk_factor / RISK_FACTOR_DIVISOR)
MIN_MULTIPLIER = 0.8
RISK_FACTOR_DIVISOR = 50.0

# Success Threshold
# A scenario is successful if BOTH cost and time stay within base * SUCCESS_TOLERANCE
SUCCESS_TOLERANCE = 1.2

# Histogram Output
HISTOGRAM_BINS = 10

# Roadmap Inputs
DEFAULT_TIME_HORIZON_DAYS = 90.0  # Stand-in horizon used when a roadmap has no derived duration


def get_distribution_shape(risk_factor):
    """Return the (min, max) multipliers applied to a baseline for the given risk factor."""
    return {
        "min_multiplier": MIN_MULTIPLIER,
        "max_multiplier": 1.0 + risk_factor / RISK_FACTOR_DIVISOR,
    }


def get_success_thresholds():
    """Return threshold configuration for success determination."""
    return {
        "cost_tolerance": SUCCESS_TOLERANCE,
        "time_tolerance": SUCCESS_TOLERANCE,
    }
