"""Shared fixtures."""

import pytest

from policy_space.models import GridSpec, Party
from policy_space.repositories import PartyTable
from policy_space.services import CoalitionAggregator, CoalitionModel, OverlapSampler, PivotCalculator, ReportService


@pytest.fixture
def table() -> PartyTable:
    return PartyTable.default()


@pytest.fixture
def calculator() -> PivotCalculator:
    return PivotCalculator()


@pytest.fixture
def aggregator() -> CoalitionAggregator:
    return CoalitionAggregator()


@pytest.fixture
def model() -> CoalitionModel:
    return CoalitionModel(
        pivot_calculator=PivotCalculator(),
        aggregator=CoalitionAggregator(),
        report=ReportService(),
    )


@pytest.fixture
def default_sampler(table, calculator):
    """Default legislature on a coarse grid around the parties."""

    def make(step: float = 0.5, workers: int = 1) -> OverlapSampler:
        parties = calculator.with_radii(table)
        return OverlapSampler(parties, table.majority_threshold, GridSpec.around(parties, step), workers=workers)

    return make


@pytest.fixture
def twin_parties() -> list[Party]:
    """Two equal parties mirrored around the origin, plus one far off the grid."""
    return [
        Party("A", -3.0, 0.0, 10, radius=1.0),
        Party("B", 3.0, 0.0, 10, radius=1.0),
        Party("C", 0.0, 5.0, 1, radius=0.5),
    ]


@pytest.fixture
def twin_grid() -> GridSpec:
    return GridSpec(xmin=-4, xmax=4, ymin=-1, ymax=1, step=1)
