"""Repositories package - access to party data."""

from policy_space.repositories.party import DEFAULT_PARTIES, PartyTable
from policy_space.repositories.schemas import PartyRow

__all__ = [
    "DEFAULT_PARTIES",
    "PartyRow",
    "PartyTable",
]
