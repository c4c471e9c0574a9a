"""Party and pivot entities."""

from dataclasses import dataclass

from policy_space.models.common import BaseEntity


@dataclass(frozen=True)
class Party(BaseEntity):
    """A party's fixed position in policy space and its seats.

    `radius` is the indifference radius, filled in by the pivot stage.
    """

    id: str
    lr: float
    conlib: float
    seats: int
    radius: float | None = None


@dataclass(frozen=True)
class PivotPoint(BaseEntity):
    """Seat-weighted median on each axis, computed independently."""

    x: float
    y: float
