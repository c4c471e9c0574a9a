"""Full model run: parties -> pivot -> grid scan -> coalition ranking."""

from dataclasses import dataclass

from loguru import logger

from policy_space.models import CoalitionBucket, GridSpec, Party, PivotPoint
from policy_space.repositories import PartyTable
from policy_space.services.coalitions import CoalitionAggregator
from policy_space.services.overlap import OverlapSample, OverlapSampler
from policy_space.services.pivot import PivotCalculator
from policy_space.services.report import ReportService


@dataclass(frozen=True)
class ModelResult:
    """Everything one run produces."""

    table: PartyTable
    parties: tuple[Party, ...]
    pivot: PivotPoint
    pivot_parties: dict[str, str]
    sample: OverlapSample
    buckets: list[CoalitionBucket]
    ranking: list[CoalitionBucket]
    report: str

    @property
    def threshold(self) -> int:
        return self.table.majority_threshold


class CoalitionModel:
    """Runs the pipeline stages in order."""

    def __init__(
        self,
        pivot_calculator: PivotCalculator,
        aggregator: CoalitionAggregator,
        report: ReportService,
    ):
        self._pivot = pivot_calculator
        self._aggregator = aggregator
        self._report = report
        logger.debug("CoalitionModel initialized")

    def run(self, table: PartyTable, grid: GridSpec | None = None, step: float = 0.1, workers: int = 1) -> ModelResult:
        """Run once. Without a grid, the box around the parties at `step` is used."""
        pivot = self._pivot.pivot(table)
        parties = tuple(self._pivot.with_radii(table, pivot))
        grid = grid or GridSpec.around(parties, step)

        sampler = OverlapSampler(parties, table.majority_threshold, grid, workers=workers)
        sample = sampler.sample()

        buckets = self._aggregator.buckets(sample)
        ranking = [b for b in buckets if b.majority]

        result = ModelResult(
            table=table,
            parties=parties,
            pivot=pivot,
            pivot_parties=self._pivot.pivot_parties(parties, pivot),
            sample=sample,
            buckets=buckets,
            ranking=ranking,
            report=self._report.narrative(ranking, table.majority_threshold),
        )
        logger.info("Model run complete: {} majority coalitions", len(ranking))
        return result
