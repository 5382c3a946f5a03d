"""
Monte Carlo simulation module for strategy success probability estimation.

PURPOSE:
    Estimate how likely a roadmap is to finish close to its cost and time
    estimates by sampling thousands of (cost, time) outcomes from triangular
    distributions and summarizing them.

RESPONSIBILITIES:
    - Sample triangular variates from explicit uniform draws
    - Aggregate N iterations into success probability and expected values
    - Summarize cost and time draws as equal-width histograms
    - Derive inputs from a strategy scenario's roadmap

SRP/DRY CHECK:
    Each submodule has a single responsibility:
    - distributions.py: Triangular sampling only
    - random_source.py: Seedable uniform source only
    - simulation.py: Validation and N-iteration aggregation only
    - histogram.py: Binning only
    - outputs.py: Result container and serialization only
    - scenario.py: Roadmap to engine input only
"""

from .distributions import sample_triangular, triangular_params_from_baseline
from .errors import (
    InvalidBaseline,
    InvalidBinCount,
    InvalidDistributionParameters,
    InvalidIterations,
    InvalidRiskFactor,
    MonteCarloError,
)
from .histogram import HistogramBin, build_histogram
from .outputs import SimulationResult
from .random_source import RandomSource, make_random_source
from .scenario import simulate_scenario, to_result_model
from .simulation import (
    IterationOutcome,
    MonteCarloSimulation,
    SimulationInput,
    run_iterations,
    run_monte_carlo,
    simulate,
)

__version__ = "0.1.0"

__all__ = [
    "sample_triangular",
    "triangular_params_from_baseline",
    "MonteCarloError",
    "InvalidIterations",
    "InvalidBaseline",
    "InvalidRiskFactor",
    "InvalidDistributionParameters",
    "InvalidBinCount",
    "HistogramBin",
    "build_histogram",
    "SimulationResult",
    "RandomSource",
    "make_random_source",
    "simulate_scenario",
    "to_result_model",
    "IterationOutcome",
    "MonteCarloSimulation",
    "SimulationInput",
    "run_iterations",
    "run_monte_carlo",
    "simulate",
]
