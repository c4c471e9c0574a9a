"""Grid scan of overlapping indifference disks."""

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np
import polars as pl
from loguru import logger

from helpers import formulas
from policy_space.errors import ValidationError
from policy_space.models import GridPoint, GridSpec, Party
from policy_space.repositories.schemas import EMPTY_LABEL

# Covering sets are int64 bitmasks over table order
MAX_PARTIES = 62


def coalition_label(members: Sequence[str], seats: int) -> str:
    """Display label: member ids joined with '+', then the seat sum."""
    names = "+".join(members) if members else EMPTY_LABEL
    return f"{names} ({seats})"


@dataclass(frozen=True)
class OverlapSample:
    """One scan of the grid.

    `frame` holds a row per grid point, x-major then y: ``x``, ``y``,
    ``in_<party id>`` for each party, ``seats``, ``mask``, ``majority`` and
    ``label``.
    """

    parties: tuple[Party, ...]
    threshold: int
    grid: GridSpec
    num_x: int
    num_y: int
    frame: pl.DataFrame

    @property
    def size(self) -> int:
        return self.frame.height

    def members(self, mask: int) -> tuple[str, ...]:
        """Party ids encoded in a covering-set mask, in table order."""
        return tuple(p.id for i, p in enumerate(self.parties) if mask >> i & 1)

    def points(self) -> Iterator[GridPoint]:
        for x, y, mask, seats, majority, label in self.frame.select(
            "x", "y", "mask", "seats", "majority", "label"
        ).iter_rows():
            yield GridPoint(x, y, self.members(mask), seats, majority, label)


class OverlapSampler:
    """Which parties find each point of a regular grid acceptable.

    A point belongs to a party's indifference region when its distance to the
    party is at most the party's radius (closed disk). Each point is computed
    independently, so the x axis can be sharded across worker threads.
    """

    def __init__(self, parties: Sequence[Party], threshold: int, grid: GridSpec, workers: int = 1):
        parties = tuple(parties)

        if not grid.step > 0:
            raise ValidationError(f"Grid step must be positive, got {grid.step}", field="step")
        if grid.xmin > grid.xmax or grid.ymin > grid.ymax:
            raise ValidationError(f"Grid bounds are inverted: {grid}", field="bounds")
        if not parties:
            raise ValidationError("No parties to sample", field="parties")
        if len(parties) > MAX_PARTIES:
            raise ValidationError(f"At most {MAX_PARTIES} parties supported, got {len(parties)}", field="parties")
        missing = [p.id for p in parties if p.radius is None]
        if missing:
            raise ValidationError(f"Parties without indifference radius: {missing}", field="radius")
        if workers < 1:
            raise ValidationError(f"Workers must be at least 1, got {workers}", field="workers")

        self._parties = parties
        self._threshold = threshold
        self._grid = grid
        self._workers = workers

        self._x = np.array([p.lr for p in parties], dtype=float)
        self._y = np.array([p.conlib for p in parties], dtype=float)
        self._r = np.array([p.radius for p in parties], dtype=float)
        self._seats = np.array([p.seats for p in parties], dtype=np.int64)
        self._bits = 1 << np.arange(len(parties), dtype=np.int64)

        self._xs = grid.xs()
        self._ys = grid.ys()
        logger.debug("OverlapSampler initialized: {}x{} grid, {} parties", len(self._xs), len(self._ys), len(parties))

    @property
    def num_x(self) -> int:
        return len(self._xs)

    @property
    def num_y(self) -> int:
        return len(self._ys)

    @property
    def size(self) -> int:
        return self.num_x * self.num_y

    def contains(self, party_id: str, x: float, y: float) -> bool:
        """Whether (x, y) lies in the party's indifference disk."""
        for p in self._parties:
            if p.id == party_id:
                return bool(formulas.distance(x, y, p.lr, p.conlib) <= p.radius)
        raise KeyError(party_id)

    def sample_point(self, x: float, y: float) -> GridPoint:
        """Covering set of a single point."""
        inside = formulas.distance(x, y, self._x, self._y) <= self._r
        members = tuple(p.id for p, hit in zip(self._parties, inside) if hit)
        seats = int(self._seats[inside].sum())
        return GridPoint(float(x), float(y), members, seats, seats >= self._threshold, coalition_label(members, seats))

    def sample(self) -> OverlapSample:
        """Scan the whole grid."""
        if self._workers == 1 or self.num_x < 2:
            frame = self._scan(self._xs)
        else:
            shards = np.array_split(self._xs, min(self._workers, self.num_x))
            with ThreadPoolExecutor(max_workers=self._workers) as pool:
                frame = pl.concat(list(pool.map(self._scan, shards)))

        majority = int(frame["majority"].sum())
        logger.info(
            "Sampled {} grid points, {} ({:.1f}%) under a majority",
            frame.height,
            majority,
            formulas.share(majority, frame.height),
        )
        return OverlapSample(
            parties=self._parties,
            threshold=self._threshold,
            grid=self._grid,
            num_x=self.num_x,
            num_y=self.num_y,
            frame=frame,
        )

    def _members(self, mask: int) -> tuple[str, ...]:
        return tuple(p.id for i, p in enumerate(self._parties) if mask >> i & 1)

    def _scan(self, xs: np.ndarray) -> pl.DataFrame:
        """Covering sets for every (x, y) with x in xs."""
        gx, gy = np.meshgrid(xs, self._ys, indexing="ij")
        gx, gy = gx.ravel(), gy.ravel()

        dist = formulas.distance(gx[:, None], gy[:, None], self._x[None, :], self._y[None, :])
        inside = dist <= self._r[None, :]
        hits = inside.astype(np.int64)
        seats = hits @ self._seats
        mask = hits @ self._bits

        # one label per distinct covering set, then spread back over the points
        uniq, first, inverse = np.unique(mask, return_index=True, return_inverse=True)
        names = [coalition_label(self._members(int(m)), int(seats[i])) for m, i in zip(uniq, first)]

        columns = {"x": gx, "y": gy}
        columns.update({f"in_{p.id}": inside[:, i] for i, p in enumerate(self._parties)})
        columns.update({"seats": seats, "mask": mask, "majority": seats >= self._threshold})
        columns["label"] = [names[j] for j in inverse.ravel()]
        return pl.DataFrame(columns)
