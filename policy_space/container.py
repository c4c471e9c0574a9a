"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from policy_space.models import GridSpec
from policy_space.repositories import PartyTable
from policy_space.services import (
    CoalitionAggregator,
    CoalitionModel,
    ModelResult,
    PivotCalculator,
    ReportService,
)
from settings import GRID_BOUNDS, GRID_STEP, PARTIES_PATH, WORKERS

# Each result holds a full grid sample; oldest steps are dropped past this
MAX_CACHED_RESULTS = 8


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Data
        self.party_table = PartyTable.from_csv(PARTIES_PATH) if PARTIES_PATH else PartyTable.default()

        # Services
        self.pivot = PivotCalculator()
        self.aggregator = CoalitionAggregator()
        self.report = ReportService()
        self.model = CoalitionModel(
            pivot_calculator=self.pivot,
            aggregator=self.aggregator,
            report=self.report,
        )

        self._results: dict[float, ModelResult] = {}
        self._initialized = True

    def result(self, step: float | None = None) -> ModelResult:
        """Model result for the configured parties at `step`, cached per step (LRU)."""
        self.init()
        step = GRID_STEP if step is None else step

        if step in self._results:
            self._results[step] = self._results.pop(step)
            return self._results[step]

        grid = GridSpec(*GRID_BOUNDS, step=step) if GRID_BOUNDS else None
        self._results[step] = self.model.run(self.party_table, grid=grid, step=step, workers=WORKERS)
        logger.debug("Cache miss: result at step {}", step)

        while len(self._results) > MAX_CACHED_RESULTS:
            evicted = next(iter(self._results))
            del self._results[evicted]
            logger.debug("Evicted result at step {}", evicted)
        return self._results[step]

    @property
    def cached_steps(self) -> list[float]:
        """Steps with a cached result, least recently used first."""
        return list(self._results) if self._initialized else []


# Global container instance
container = Container()
