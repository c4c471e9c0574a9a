"""Coalitions API."""

from web.api.coalitions.views import (
    get_coalitions,
    get_grid,
    get_parties,
    get_report,
)

__all__ = [
    "get_parties",
    "get_grid",
    "get_coalitions",
    "get_report",
]
