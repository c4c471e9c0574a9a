"""API errors and validation helpers."""

from policy_space.errors import ValidationError

# Coarser grids than this say nothing about a 20x20 policy space
MAX_STEP = 5.0


def validate_step(step: float | None) -> None:
    """Validate a requested grid step (None means the configured default)."""
    if step is None:
        return
    if not 0 < step <= MAX_STEP:
        raise ValidationError(f"Invalid step: {step}. Must be in (0, {MAX_STEP}]", field="step")


__all__ = ["ValidationError", "validate_step"]
