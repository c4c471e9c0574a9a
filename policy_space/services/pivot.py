"""Pivot point and indifference radii."""

from collections.abc import Iterable
from dataclasses import replace

from loguru import logger

from helpers import formulas
from policy_space.errors import ValidationError
from policy_space.models import Party, PivotPoint


class PivotCalculator:
    """Seat-weighted median pivot and each party's distance to it.

    The pivot is the weighted median of each axis taken separately, not a
    bivariate median. This mirrors the usual per-axis treatment of the model
    and is kept deliberately.
    """

    def __init__(self):
        logger.debug("PivotCalculator initialized")

    def pivot(self, parties: Iterable[Party]) -> PivotPoint:
        """Weighted median of lr and of conlib, seats as weights."""
        parties = list(parties)
        if not parties:
            raise ValidationError("No parties to compute a pivot from", field="parties")

        seats = [p.seats for p in parties]
        if sum(seats) == 0:
            raise ValidationError("Parties hold no seats", field="seats")

        point = PivotPoint(
            x=formulas.weighted_median([p.lr for p in parties], seats),
            y=formulas.weighted_median([p.conlib for p in parties], seats),
        )
        logger.info("Pivot point at ({:.3f}, {:.3f})", point.x, point.y)
        return point

    def with_radii(self, parties: Iterable[Party], pivot: PivotPoint | None = None) -> list[Party]:
        """Copies of the parties with their indifference radius set."""
        parties = list(parties)
        pivot = pivot or self.pivot(parties)

        result = [
            replace(p, radius=float(formulas.distance(p.lr, p.conlib, pivot.x, pivot.y)))
            for p in parties
        ]
        logger.debug("Radii: {}", {p.id: round(p.radius, 3) for p in result})
        return result

    def pivot_parties(self, parties: Iterable[Party], pivot: PivotPoint) -> dict[str, str]:
        """Party at or nearest the median on each axis.

        Ties go to the larger party, then to table order.
        """
        parties = list(parties)
        if not parties:
            raise ValidationError("No parties to pick a pivot party from", field="parties")

        return {
            "lr": min(parties, key=lambda p: (abs(p.lr - pivot.x), -p.seats)).id,
            "conlib": min(parties, key=lambda p: (abs(p.conlib - pivot.y), -p.seats)).id,
        }
