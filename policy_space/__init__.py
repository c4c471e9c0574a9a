"""Policy Space - spatial model of coalition formation."""

from policy_space.errors import ValidationError
from policy_space.repositories import PartyTable
from policy_space.services import (
    CoalitionAggregator,
    CoalitionModel,
    OverlapSampler,
    PivotCalculator,
    ReportService,
)

__all__ = [
    "ValidationError",
    "PartyTable",
    "PivotCalculator",
    "OverlapSampler",
    "CoalitionAggregator",
    "ReportService",
    "CoalitionModel",
]
