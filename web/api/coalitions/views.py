"""Coalition API views - thin layer over the model."""

from policy_space.container import container
from policy_space.models import CoalitionBucket
from web.api.errors import validate_step

from .schemas import (
    CoalitionItem,
    CoalitionsResponse,
    GridResponse,
    PartiesResponse,
    PartyItem,
    ReportResponse,
)


def _item(bucket: CoalitionBucket) -> CoalitionItem:
    return CoalitionItem(
        label=bucket.label,
        parties=list(bucket.members),
        seats=bucket.seats,
        majority=bucket.majority,
        points=bucket.points,
        percent=round(bucket.percent, 2),
    )


def get_parties(step: float | None = None) -> PartiesResponse:
    """Get parties with radii and the pivot point."""
    validate_step(step)
    result = container.result(step)

    items = [
        PartyItem(id=p.id, lr=p.lr, conlib=p.conlib, seats=p.seats, radius=round(p.radius, 4))
        for p in result.parties
    ]

    return PartiesResponse(
        items=items,
        total_seats=result.table.total_seats,
        threshold=result.threshold,
        pivot_x=result.pivot.x,
        pivot_y=result.pivot.y,
        pivot_parties=result.pivot_parties,
    )


def get_grid(step: float | None = None) -> GridResponse:
    """Get sampled grid points with covering seats and majority flag."""
    validate_step(step)
    result = container.result(step)
    frame = result.sample.frame

    return GridResponse(
        step=result.sample.grid.step,
        num_x=result.sample.num_x,
        num_y=result.sample.num_y,
        x=frame["x"].to_list(),
        y=frame["y"].to_list(),
        seats=frame["seats"].to_list(),
        majority=frame["majority"].to_list(),
    )


def get_coalitions(step: float | None = None, majority_only: bool = True) -> CoalitionsResponse:
    """Get coalitions ranked by area share."""
    validate_step(step)
    result = container.result(step)
    buckets = result.ranking if majority_only else result.buckets

    return CoalitionsResponse(
        step=result.sample.grid.step,
        threshold=result.threshold,
        grid_points=result.sample.size,
        items=[_item(b) for b in buckets],
    )


def get_report(step: float | None = None) -> ReportResponse:
    """Get the narrative report with the two leading coalitions."""
    validate_step(step)
    result = container.result(step)
    ranking = result.ranking

    return ReportResponse(
        text=result.report,
        top=_item(ranking[0]) if ranking else None,
        runner_up=_item(ranking[1]) if len(ranking) > 1 else None,
    )
