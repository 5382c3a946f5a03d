"""
PURPOSE: Run the Monte Carlo engine for a strategy scenario.

Derives the engine inputs the way the strategy dashboard does:
- base cost = sum of the roadmap's itemized cost estimates
- base time = a fixed horizon (90 days) until durations are derived from the roadmap
- risk factor = the scenario's risk score (0 when missing)
"""

import logging
from typing import Any, Dict, Union

from simulator_api.models import Scenario, SimulationResultModel
from simulator_internal.monte_carlo.config import DEFAULT_TIME_HORIZON_DAYS, NUM_RUNS
from simulator_internal.monte_carlo.outputs import SimulationResult
from simulator_internal.monte_carlo.simulation import run_monte_carlo

logger = logging.getLogger(__name__)


def simulate_scenario(
    scenario: Union[Scenario, Dict[str, Any]],
    random_source=None,
    iterations: int = NUM_RUNS,
    time_horizon_days: float = DEFAULT_TIME_HORIZON_DAYS,
) -> SimulationResult:
    """
    Simulate a scenario's roadmap.

    Args:
        scenario: Scenario model, or a dict in the stored camelCase shape
        random_source: Seed, numpy Generator or random source
        iterations: Number of iterations (default 5000)
        time_horizon_days: Baseline duration used for every scenario

    Returns:
        SimulationResult

    Raises:
        pydantic.ValidationError: if the dict does not describe a scenario
        InvalidBaseline: if the roadmap's total cost is not positive
    """
    if not isinstance(scenario, Scenario):
        scenario = Scenario.model_validate(scenario)

    base_cost = scenario.total_cost()
    logger.debug(
        "Scenario %r: %s roadmap steps, total cost %s, risk %s",
        scenario.name,
        len(scenario.roadmap),
        base_cost,
        scenario.risk,
    )
    return run_monte_carlo(
        base_cost,
        time_horizon_days,
        scenario.risk,
        iterations=iterations,
        random_source=random_source,
    )


def to_result_model(result: SimulationResult) -> SimulationResultModel:
    """Validate a SimulationResult into its wire model."""
    return SimulationResultModel.from_result(result)
