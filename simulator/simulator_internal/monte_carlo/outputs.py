"""
PURPOSE: Structured result of a Monte Carlo run and its JSON-compatible form.

SRP/DRY: Single responsibility = result container and serialization.
         No simulation, no histogram computation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from simulator_internal.monte_carlo.histogram import HistogramBin


@dataclass
class SimulationResult:
    """Structured output of one Monte Carlo run.

    Attributes:
        probability_of_success (float): Fraction of iterations within tolerance (0-1).
        expected_cost (float): Mean of all cost draws.
        expected_time (float): Mean of all time draws (days).
        cost_distribution (list): HistogramBin list over the cost draws.
        time_distribution (list): HistogramBin list over the time draws.
        risk_heatmap (list): Reserved for a two-factor sweep; always empty.
        iterations (int): Number of iterations that were run.
        success_count (int): Number of successful iterations.
    """
    probability_of_success: float
    expected_cost: float
    expected_time: float
    cost_distribution: List[HistogramBin]
    time_distribution: List[HistogramBin]
    risk_heatmap: List[Dict[str, float]] = field(default_factory=list)
    iterations: int = 0
    success_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to the camelCase dictionary consumed by the UI and the strategy store."""
        return {
            "probabilityOfSuccess": self.probability_of_success,
            "expectedCost": self.expected_cost,
            "expectedTime": self.expected_time,
            "costDistribution": [b.to_dict() for b in self.cost_distribution],
            "timeDistribution": [b.to_dict() for b in self.time_distribution],
            "riskHeatmap": list(self.risk_heatmap),
        }
