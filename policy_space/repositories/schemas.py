"""Input schemas for party rows."""

from pydantic import BaseModel, Field, field_validator

# Position axes run from -10 (left / conservative) to 10 (right / liberal)
MIN_POSITION = -10.0
MAX_POSITION = 10.0

# Label of the empty covering set; '+' joins member ids in coalition labels
EMPTY_LABEL = "none"


class PartyRow(BaseModel):
    """One party row as entered or read from a file."""

    id: str = Field(min_length=1, pattern=r"^[^+]+$")
    lr: float = Field(ge=MIN_POSITION, le=MAX_POSITION)
    conlib: float = Field(ge=MIN_POSITION, le=MAX_POSITION)
    seats: int = Field(ge=0)

    @field_validator("id")
    @classmethod
    def not_reserved(cls, v: str) -> str:
        if v == EMPTY_LABEL:
            raise ValueError(f"{EMPTY_LABEL!r} is reserved for the empty coalition")
        return v
