"""Common models - base classes."""

from policy_space.models.common.base import BaseEntity

__all__ = [
    "BaseEntity",
]
