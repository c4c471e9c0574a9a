"""Coalition area shares."""

import polars as pl
from loguru import logger

from helpers import formulas
from policy_space.models import CoalitionBucket
from policy_space.services.overlap import OverlapSample, coalition_label


class CoalitionAggregator:
    """Group grid points by covering set and rank majority coalitions by area."""

    def __init__(self):
        logger.debug("CoalitionAggregator initialized")

    def buckets(self, sample: OverlapSample) -> list[CoalitionBucket]:
        """Every covering set seen on the grid, largest area first.

        Percents are relative to all grid points, so they sum to 100.
        """
        total = sample.num_x * sample.num_y
        grouped = (
            sample.frame.group_by("mask")
            .agg(
                pl.len().alias("points"),
                pl.col("seats").first(),
                pl.col("majority").first(),
            )
            .sort("mask")
        )

        result = []
        for mask, points, seats, majority in grouped.select("mask", "points", "seats", "majority").iter_rows():
            members = sample.members(mask)
            result.append(
                CoalitionBucket(
                    members=members,
                    label=coalition_label(members, seats),
                    seats=seats,
                    majority=majority,
                    points=points,
                    percent=formulas.share(points, total),
                )
            )

        logger.info("Found {} covering sets over {} grid points", len(result), total)
        return sorted(result, key=lambda b: (-b.percent, b.label))

    def rank(self, sample: OverlapSample) -> list[CoalitionBucket]:
        """Majority covering sets by area share, ties broken by label."""
        result = [b for b in self.buckets(sample) if b.majority]
        if result:
            logger.info("Top coalition: {} ({:.2f}%)", result[0].label, result[0].percent)
        else:
            logger.warning("No majority coalition anywhere on the grid")
        return result

    @staticmethod
    def to_frame(buckets: list[CoalitionBucket]) -> pl.DataFrame:
        """Buckets as a table for display and export."""
        return pl.DataFrame(
            {
                "label": [b.label for b in buckets],
                "parties": [list(b.members) for b in buckets],
                "seats": [b.seats for b in buckets],
                "majority": [b.majority for b in buckets],
                "points": [b.points for b in buckets],
                "percent": [round(b.percent, 2) for b in buckets],
            },
            schema={
                "label": pl.String,
                "parties": pl.List(pl.String),
                "seats": pl.Int64,
                "majority": pl.Boolean,
                "points": pl.Int64,
                "percent": pl.Float64,
            },
        )
