"""
PURPOSE: Core Monte Carlo engine for project success probability estimation.

Runs N independent (cost, time) draws around a baseline estimate and computes
the success probability, expected values and histograms of both series.

SINGLE RESPONSIBILITY:
- Validate the simulation input before any sampling
- Drive N iterations, two independent triangular draws each
- Count successes and accumulate means
- Assemble histograms into a SimulationResult (no I/O, no persistence)

CONSTRAINTS:
- Uses an explicit random source per run, never numpy's global state
- Does NOT handle file I/O, database queries, or rendering
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from simulator_internal.monte_carlo.config import (
    HISTOGRAM_BINS,
    NUM_RUNS,
    RANDOM_SEED,
    get_success_thresholds,
)
from simulator_internal.monte_carlo.distributions import (
    sample_triangular,
    triangular_params_from_baseline,
)
from simulator_internal.monte_carlo.errors import (
    InvalidBaseline,
    InvalidIterations,
    InvalidRiskFactor,
)
from simulator_internal.monte_carlo.histogram import build_histogram, validate_bin_count
from simulator_internal.monte_carlo.outputs import SimulationResult
from simulator_internal.monte_carlo.random_source import make_random_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationInput:
    """Immutable per-request input of the engine."""
    base_cost: float
    base_time_days: float
    risk_factor: float
    iterations: int = NUM_RUNS

    def validate(self) -> None:
        validate_inputs(self.base_cost, self.base_time_days, self.risk_factor, self.iterations)


@dataclass
class IterationOutcome:
    """Raw aggregation of one run, before histogramming."""
    success_count: int
    cost_samples: np.ndarray
    time_samples: np.ndarray
    avg_cost: float
    avg_time: float

    @property
    def iterations(self) -> int:
        return int(self.cost_samples.size)

    @property
    def probability_of_success(self) -> float:
        return self.success_count / self.iterations


def _is_number(value) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)


def validate_inputs(base_cost, base_time_days, risk_factor, iterations) -> None:
    """
    Check the simulation input.

    Raises:
        InvalidIterations: iterations is not an integer >= 1
        InvalidBaseline: base_cost or base_time_days is not a positive finite number
        InvalidRiskFactor: risk_factor is negative, not finite, or overflows the distribution maximum
    """
    if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)) or iterations < 1:
        raise InvalidIterations(f"iterations must be an integer >= 1, got {iterations!r}")

    for name, value in (("base_cost", base_cost), ("base_time_days", base_time_days)):
        if not _is_number(value) or not math.isfinite(value) or value <= 0:
            raise InvalidBaseline(f"{name} must be a positive finite number, got {value!r}")

    if not _is_number(risk_factor) or not math.isfinite(risk_factor) or risk_factor < 0:
        raise InvalidRiskFactor(f"risk_factor must be a finite number >= 0, got {risk_factor!r}")

    for name, base in (("base_cost", base_cost), ("base_time_days", base_time_days)):
        _, _, max_val = triangular_params_from_baseline(base, risk_factor)
        if not math.isfinite(max_val):
            raise InvalidRiskFactor(
                f"risk_factor {risk_factor!r} pushes the maximum {name} past the float range"
            )


def run_iterations(base_cost, base_time_days, risk_factor, iterations=NUM_RUNS, random_source=None) -> IterationOutcome:
    """
    Draw iterations independent (cost, time) pairs and aggregate them.

    Each iteration consumes two uniforms from the random source, cost first
    then time. A draw is a success when cost <= base_cost * 1.2 AND
    time <= base_time_days * 1.2.

    Args:
        base_cost: Baseline cost estimate (> 0)
        base_time_days: Baseline duration in days (> 0)
        risk_factor: Risk score (>= 0, conventionally 0-100)
        iterations: Number of iterations (>= 1)
        random_source: Seed, numpy Generator or object with random(size)

    Returns:
        IterationOutcome with the success count, both sample arrays and their means
    """
    validate_inputs(base_cost, base_time_days, risk_factor, iterations)
    rng = make_random_source(random_source)

    cost_min, cost_mode, cost_max = triangular_params_from_baseline(base_cost, risk_factor)
    time_min, time_mode, time_max = triangular_params_from_baseline(base_time_days, risk_factor)

    uniforms = np.asarray(rng.random((iterations, 2)), dtype=float)
    if uniforms.shape != (iterations, 2):
        raise ValueError(f"random source returned shape {uniforms.shape}, expected {(iterations, 2)}")

    cost_samples = sample_triangular(cost_min, cost_mode, cost_max, uniforms[:, 0])
    time_samples = sample_triangular(time_min, time_mode, time_max, uniforms[:, 1])

    thresholds = get_success_thresholds()
    successes = (cost_samples <= base_cost * thresholds["cost_tolerance"]) & (
        time_samples <= base_time_days * thresholds["time_tolerance"]
    )
    success_count = int(np.count_nonzero(successes))

    return IterationOutcome(
        success_count=success_count,
        cost_samples=cost_samples,
        time_samples=time_samples,
        avg_cost=float(np.mean(cost_samples)),
        avg_time=float(np.mean(time_samples)),
    )


def run_monte_carlo(
    base_cost,
    base_time_days,
    risk_factor,
    iterations=NUM_RUNS,
    random_source=None,
    bin_count=HISTOGRAM_BINS,
) -> SimulationResult:
    """
    Run a full simulation and assemble the result.

    Returns:
        SimulationResult with success probability, expected cost/time, a
        cost histogram and a time histogram (bin_count bins each) and an
        empty risk heatmap.
    """
    validate_inputs(base_cost, base_time_days, risk_factor, iterations)
    validate_bin_count(bin_count)

    logger.info(
        "Running Monte Carlo: base_cost=%s base_time_days=%s risk_factor=%s iterations=%s",
        base_cost,
        base_time_days,
        risk_factor,
        iterations,
    )
    outcome = run_iterations(base_cost, base_time_days, risk_factor, iterations, random_source)

    result = SimulationResult(
        probability_of_success=outcome.probability_of_success,
        expected_cost=outcome.avg_cost,
        expected_time=outcome.avg_time,
        cost_distribution=build_histogram(outcome.cost_samples, bin_count),
        time_distribution=build_histogram(outcome.time_samples, bin_count),
        risk_heatmap=[],
        iterations=outcome.iterations,
        success_count=outcome.success_count,
    )
    logger.info(
        "Monte Carlo complete: %s/%s successes (p=%.3f), expected_cost=%.2f, expected_time=%.1f",
        result.success_count,
        result.iterations,
        result.probability_of_success,
        result.expected_cost,
        result.expected_time,
    )
    return result


def simulate(simulation_input: SimulationInput, random_source=None, bin_count=HISTOGRAM_BINS) -> SimulationResult:
    """Run the engine for a SimulationInput."""
    return run_monte_carlo(
        simulation_input.base_cost,
        simulation_input.base_time_days,
        simulation_input.risk_factor,
        simulation_input.iterations,
        random_source=random_source,
        bin_count=bin_count,
    )


class MonteCarloSimulation:
    """
    Monte Carlo engine bound to an iteration count and a random source.

    Every call to run() draws from the engine's own generator, so a seeded
    engine replays the same stream only when re-created with the same seed.
    """

    def __init__(self, num_runs=NUM_RUNS, random_seed=RANDOM_SEED, bin_count=HISTOGRAM_BINS):
        """
        Initialize simulation engine.

        Args:
            num_runs: Number of iterations per run (default 5000)
            random_seed: Seed, numpy Generator or random source (None = random)
            bin_count: Number of histogram bins per series (default 10)
        """
        if isinstance(num_runs, bool) or not isinstance(num_runs, (int, np.integer)) or num_runs < 1:
            raise InvalidIterations(f"num_runs must be an integer >= 1, got {num_runs!r}")
        self.num_runs = num_runs
        self.bin_count = bin_count
        self.random_source = make_random_source(random_seed)

    def run(self, base_cost, base_time_days, risk_factor, num_runs: Optional[int] = None) -> SimulationResult:
        """Execute the simulation for one baseline estimate."""
        return run_monte_carlo(
            base_cost,
            base_time_days,
            risk_factor,
            iterations=self.num_runs if num_runs is None else num_runs,
            random_source=self.random_source,
            bin_count=self.bin_count,
        )
