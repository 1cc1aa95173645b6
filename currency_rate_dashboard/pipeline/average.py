"""Period average shown next to the chart."""

import math
from collections.abc import Sequence


def compute_average(values: Sequence[float]) -> str | None:
    """
    Mean of ``values`` rounded up to one decimal, e.g. ``"72.5"``.

    Rounding is always a ceiling, so the result is never below the true mean.
    Returns None when there are no values.
    """
    if not values:
        return None
    mean = sum(values) / len(values)
    return f"{math.ceil(mean * 10) / 10:.1f}"
