"""Services package - pipeline stages."""

from policy_space.services.coalitions import CoalitionAggregator
from policy_space.services.model import CoalitionModel, ModelResult
from policy_space.services.overlap import OverlapSample, OverlapSampler, coalition_label
from policy_space.services.pivot import PivotCalculator
from policy_space.services.report import ReportService

__all__ = [
    "PivotCalculator",
    "OverlapSampler",
    "OverlapSample",
    "coalition_label",
    "CoalitionAggregator",
    "ReportService",
    "CoalitionModel",
    "ModelResult",
]
