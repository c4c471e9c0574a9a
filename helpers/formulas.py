"""Pure math formulas - numpy only, easily testable."""

import math

import numpy as np

# Grid coordinates are rounded to this many decimals so that lattice points
# compare equal to the values a user would type (e.g. -6.3, not -6.300000000000001).
GRID_DECIMALS = 10


def majority_threshold(total_seats: int) -> int:
    """Seats needed to govern: strict majority of the legislature."""
    return total_seats // 2 + 1


def weighted_median(values, weights) -> float:
    """Median of the sample where each value appears `weight` times.

    Equal to ``np.median(np.repeat(values, weights))`` without building the
    expanded sample: for an even sample size it is the mean of the two middle
    values.
    """
    v = np.asarray(values, dtype=float)
    w = np.asarray(weights, dtype=np.int64)
    if v.shape != w.shape:
        raise ValueError(f"values and weights differ in length: {v.shape} vs {w.shape}")

    order = np.argsort(v, kind="stable")
    v, cum = v[order], np.cumsum(w[order])
    n = int(cum[-1]) if len(cum) else 0
    if n <= 0:
        raise ValueError("weighted median of an empty sample")

    def nth(k: int) -> float:
        # first position whose cumulative count exceeds k holds the k-th value (0-based)
        return float(v[np.searchsorted(cum, k, side="right")])

    if n % 2:
        return nth(n // 2)
    return (nth(n // 2 - 1) + nth(n // 2)) / 2


def distance(x1, y1, x2, y2):
    """Euclidean distance; works on scalars and numpy arrays alike."""
    return np.hypot(np.subtract(x1, x2), np.subtract(y1, y2))


def grid_axis(start: float, stop: float, step: float) -> np.ndarray:
    """Lattice start, start+step, ... up to stop.

    `stop` is included when it lies on the lattice (within float noise),
    otherwise the axis ends at the last lattice point below it.
    """
    count = math.floor((stop - start) / step + 1e-9) + 1
    return np.round(start + np.arange(max(count, 0)) * step, GRID_DECIMALS)


def snap_down(value: float, step: float) -> float:
    """Largest lattice multiple of step not above value."""
    return round(math.floor(value / step + 1e-9) * step, GRID_DECIMALS)


def snap_up(value: float, step: float) -> float:
    """Smallest lattice multiple of step not below value."""
    return round(math.ceil(value / step - 1e-9) * step, GRID_DECIMALS)


def share(count: int, total: int) -> float:
    """Percentage of total (0-100)."""
    return count / total * 100 if total else 0.0
