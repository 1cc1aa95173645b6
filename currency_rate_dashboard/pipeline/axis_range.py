"""Value-axis bounds heuristic."""

import math
from collections.abc import Sequence

from currency_rate_dashboard.models import AxisRange


STEP_DIVISOR = 5  # padding is a fifth of the data span, floored
TICK_COUNT = 4  # intervals between the five gridlines


def compute_axis_range(values: Sequence[float]) -> AxisRange:
    """
    Pick y-axis bounds that give the line some room without implying a trend.

    Both sides are padded by ``step`` unless an extreme sits at an edge of
    the series:

    - the maximum is the second-to-last value: the top is pinned to it
    - otherwise, the minimum is the first value: the bottom is pinned to it

    Args:
        values: raw filtered values in series order, duplicates included

    Raises:
        ValueError: if ``values`` is empty
    """
    if not values:
        raise ValueError("Cannot compute an axis range for an empty series")

    min_value = min(values)
    max_value = max(values)
    step = math.floor((max_value - min_value) / STEP_DIVISOR)

    if len(values) >= 2 and values[-2] == max_value:
        y_max = max_value
        y_min = math.floor(min_value - step)
    elif values[0] == min_value:
        y_max = math.ceil(max_value + step)
        y_min = min_value
    else:
        y_max = math.ceil(max_value + step)
        y_min = math.floor(min_value - step)

    return AxisRange(
        min=y_min,
        max=y_max,
        tick_interval=(y_max - y_min) / TICK_COUNT,
    )
