"""Grid sampling entities."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from helpers import formulas
from policy_space.errors import ValidationError
from policy_space.models.common import BaseEntity
from policy_space.models.party import Party


@dataclass(frozen=True)
class GridSpec(BaseEntity):
    """Bounding box and spacing of the sampled lattice."""

    xmin: float
    xmax: float
    ymin: float
    ymax: float
    step: float

    @classmethod
    def around(cls, parties: Sequence[Party], step: float) -> "GridSpec":
        """Box spanning all party positions, snapped outward to the step lattice."""
        if not step > 0:
            raise ValidationError(f"Grid step must be positive, got {step}", field="step")
        lrs = [p.lr for p in parties]
        conlibs = [p.conlib for p in parties]
        return cls(
            xmin=formulas.snap_down(min(lrs), step),
            xmax=formulas.snap_up(max(lrs), step),
            ymin=formulas.snap_down(min(conlibs), step),
            ymax=formulas.snap_up(max(conlibs), step),
            step=step,
        )

    def xs(self) -> np.ndarray:
        return formulas.grid_axis(self.xmin, self.xmax, self.step)

    def ys(self) -> np.ndarray:
        return formulas.grid_axis(self.ymin, self.ymax, self.step)


@dataclass(frozen=True)
class GridPoint(BaseEntity):
    """One sampled point and the parties whose indifference disks cover it."""

    x: float
    y: float
    members: tuple[str, ...]
    seats: int
    majority: bool
    label: str


@dataclass(frozen=True)
class CoalitionBucket(BaseEntity):
    """All grid points sharing one covering set."""

    members: tuple[str, ...]
    label: str
    seats: int
    majority: bool
    points: int
    percent: float

    @property
    def key(self) -> frozenset[str]:
        """Identity of the bucket: the member set, independent of seats."""
        return frozenset(self.members)
