"""Models package - entities for parties, grid samples and coalitions."""

from policy_space.models.common import BaseEntity
from policy_space.models.grid import CoalitionBucket, GridPoint, GridSpec
from policy_space.models.party import Party, PivotPoint

__all__ = [
    "BaseEntity",
    "Party",
    "PivotPoint",
    "GridSpec",
    "GridPoint",
    "CoalitionBucket",
]
