import pytest
from pydantic import ValidationError

from simulator_api.models import HistogramBinModel, Scenario, SimulationResultModel, SubGoal
from simulator_internal.monte_carlo.simulation import run_monte_carlo


def test_subgoal_reads_camel_case():
    step = SubGoal.model_validate({"title": "Hire", "estimatedCost": 1200, "estimatedTime": "2 weeks"})
    assert step.estimated_cost == 1200.0
    assert step.estimated_time == "2 weeks"


def test_subgoal_missing_cost_is_zero():
    assert SubGoal.model_validate({"estimatedCost": None}).estimated_cost == 0.0
    assert SubGoal().estimated_cost == 0.0


def test_scenario_total_cost():
    scenario = Scenario.model_validate(
        {"roadmap": [{"estimatedCost": 100.5}, {"estimatedCost": 899.5}, {}], "risk": None}
    )
    assert scenario.total_cost() == 1000.0
    assert scenario.risk == 0.0


def test_scenario_dump_uses_camel_case():
    dumped = Scenario(name="A", trade_offs=["x"]).model_dump(by_alias=True)
    assert dumped["tradeOffs"] == ["x"]
    assert "probabilityOfSuccess" in dumped


def test_result_model_rejects_probability_out_of_range():
    with pytest.raises(ValidationError):
        SimulationResultModel(
            probability_of_success=1.5,
            expected_cost=1.0,
            expected_time=1.0,
            cost_distribution=[],
            time_distribution=[],
        )


def test_histogram_bin_rejects_negative_count():
    with pytest.raises(ValidationError):
        HistogramBinModel(bin="0 - 1", count=-1)


def test_result_model_from_result():
    result = run_monte_carlo(1000.0, 30.0, 50.0, iterations=200, random_source=4)
    model = SimulationResultModel.from_result(result)
    assert model.model_dump(by_alias=True) == result.to_dict()
    assert model.expected_cost == result.expected_cost
    assert [b.count for b in model.time_distribution] == [b.count for b in result.time_distribution]
