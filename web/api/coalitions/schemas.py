"""Coalition API response schemas."""

from pydantic import BaseModel


class PartyItem(BaseModel):
    """Party with its indifference radius."""

    id: str
    lr: float
    conlib: float
    seats: int
    radius: float


class PartiesResponse(BaseModel):
    """Parties, pivot and majority threshold."""

    items: list[PartyItem]
    total_seats: int
    threshold: int
    pivot_x: float
    pivot_y: float
    pivot_parties: dict[str, str]


class GridResponse(BaseModel):
    """Sampled grid, one entry per point in every list."""

    step: float
    num_x: int
    num_y: int
    x: list[float]
    y: list[float]
    seats: list[int]
    majority: list[bool]


class CoalitionItem(BaseModel):
    """Covering set and its share of the policy space."""

    label: str
    parties: list[str]
    seats: int
    majority: bool
    points: int
    percent: float


class CoalitionsResponse(BaseModel):
    """Ranked coalitions."""

    step: float
    threshold: int
    grid_points: int
    items: list[CoalitionItem]


class ReportResponse(BaseModel):
    """Narrative summary."""

    text: str
    top: CoalitionItem | None = None
    runner_up: CoalitionItem | None = None
