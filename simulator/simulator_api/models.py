"""
Wire models shared between the simulation worker and the frontend.

Field names are snake_case in Python and camelCase on the wire, matching the
JSON stored with each strategy.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubGoal(WireModel):
    id: str = ""
    title: str = ""
    description: str = ""
    estimated_time: str = ""
    estimated_cost: float = 0.0
    dependencies: list[str] = Field(default_factory=list)

    @field_validator("estimated_cost", mode="before")
    @classmethod
    def missing_cost_is_zero(cls, value):
        return 0.0 if value is None else value


class Scenario(WireModel):
    id: Optional[int] = None
    name: str = ""
    description: str = ""
    roadmap: list[SubGoal] = Field(default_factory=list)
    trade_offs: list[str] = Field(default_factory=list)
    score: float = 0.0
    risk: float = 0.0
    probability_of_success: Optional[float] = None

    @field_validator("roadmap", mode="before")
    @classmethod
    def missing_roadmap_is_empty(cls, value):
        return [] if value is None else value

    @field_validator("risk", mode="before")
    @classmethod
    def missing_risk_is_zero(cls, value):
        return 0.0 if value is None else value

    def total_cost(self) -> float:
        """Sum of the itemized cost estimates of the roadmap."""
        return float(sum(step.estimated_cost for step in self.roadmap))


class HistogramBinModel(BaseModel):
    bin: str
    count: int = Field(ge=0)


class RiskHeatmapCell(BaseModel):
    x: float
    y: float
    value: float


class SimulationResultModel(WireModel):
    probability_of_success: float = Field(ge=0.0, le=1.0)
    expected_cost: float
    expected_time: float
    cost_distribution: list[HistogramBinModel]
    time_distribution: list[HistogramBinModel]
    risk_heatmap: list[RiskHeatmapCell] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result) -> "SimulationResultModel":
        """Validate an engine result (anything with to_dict() in the camelCase shape)."""
        return cls.model_validate(result.to_dict())
