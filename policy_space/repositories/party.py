"""Party table - read-only access to the legislature being modelled."""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import polars as pl
import pydantic
from loguru import logger

from helpers import formulas
from policy_space.errors import ValidationError
from policy_space.models import Party
from policy_space.repositories.schemas import PartyRow

COLUMNS = ("id", "lr", "conlib", "seats")

# Illustrative six-party legislature of 101 seats
DEFAULT_PARTIES = [
    ("SDP", -4.0, 3.0, 27),
    ("GRN", -7.0, 7.0, 15),
    ("LIB", 3.0, 8.0, 7),
    ("AGR", 1.0, -5.0, 8),
    ("CON", 5.0, -3.0, 30),
    ("NAT", 8.0, -8.0, 14),
]


def _parse_row(index: int, row: Any) -> Party:
    """Validate one row (tuple, dict or Party) into a Party."""
    if isinstance(row, Party):
        data = {c: getattr(row, c) for c in COLUMNS}
    elif isinstance(row, dict):
        data = row
    else:
        data = dict(zip(COLUMNS, row))

    try:
        parsed = PartyRow.model_validate(data)
    except pydantic.ValidationError as e:
        err = e.errors()[0]
        field = str(err["loc"][0]) if err["loc"] else None
        raise ValidationError(f"Party #{index} ({data.get('id')!r}): {field}: {err['msg']}", field=field) from e

    return Party(id=parsed.id, lr=parsed.lr, conlib=parsed.conlib, seats=parsed.seats)


class PartyTable:
    """Immutable, ordered table of parties.

    Table order is the canonical party order used for coalition labels.
    """

    def __init__(self, rows: Iterable[Any], legislature_size: int | None = None):
        parties = tuple(_parse_row(i, row) for i, row in enumerate(rows))

        if not parties:
            raise ValidationError("Party table is empty", field="parties")

        seen: set[str] = set()
        for p in parties:
            if p.id in seen:
                raise ValidationError(f"Duplicate party id: {p.id!r}", field="id")
            seen.add(p.id)

        total = sum(p.seats for p in parties)
        if total == 0:
            raise ValidationError("Parties hold no seats", field="seats")
        if legislature_size is not None and legislature_size != total:
            raise ValidationError(
                f"Seats sum to {total}, legislature has {legislature_size}",
                field="legislature_size",
            )

        self._parties = parties
        self._index = {p.id: i for i, p in enumerate(parties)}
        logger.debug("PartyTable loaded: {} parties, {} seats", len(parties), total)

    @classmethod
    def default(cls) -> "PartyTable":
        """Built-in illustrative legislature."""
        return cls(DEFAULT_PARTIES)

    @classmethod
    def from_csv(cls, path: str | Path, legislature_size: int | None = None) -> "PartyTable":
        """Load parties from a CSV file with columns id, lr, conlib, seats."""
        df = pl.read_csv(path, schema_overrides={"id": pl.String})
        missing = [c for c in COLUMNS if c not in df.columns]
        if missing:
            raise ValidationError(f"{path}: missing columns {missing}", field=missing[0])

        logger.info("Loaded {} party rows from {}", df.height, path)
        return cls(df.select(COLUMNS).iter_rows(named=True), legislature_size=legislature_size)

    @property
    def parties(self) -> tuple[Party, ...]:
        return self._parties

    @property
    def ids(self) -> list[str]:
        return [p.id for p in self._parties]

    @property
    def total_seats(self) -> int:
        return sum(p.seats for p in self._parties)

    @property
    def majority_threshold(self) -> int:
        return formulas.majority_threshold(self.total_seats)

    def get(self, party_id: str) -> Party:
        """Party by id; KeyError if unknown."""
        return self._parties[self._index[party_id]]

    def index(self, party_id: str) -> int:
        """Canonical position of a party."""
        return self._index[party_id]

    def to_frame(self) -> pl.DataFrame:
        """Parties as a polars frame."""
        return pl.DataFrame([p.to_dict() for p in self._parties]).select(COLUMNS)

    def __len__(self) -> int:
        return len(self._parties)

    def __iter__(self) -> Iterator[Party]:
        return iter(self._parties)

    def __contains__(self, party_id: object) -> bool:
        return party_id in self._index
