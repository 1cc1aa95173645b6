"""Build the period axis and its aligned value series."""

from collections.abc import Sequence

from currency_rate_dashboard.models import Observation


def build_period_axis(filtered: Sequence[Observation]) -> list[str]:
    """Distinct periods in first-occurrence order."""
    seen: set[str] = set()
    periods: list[str] = []
    for obs in filtered:
        if obs.period not in seen:
            seen.add(obs.period)
            periods.append(obs.period)
    return periods


def first_value_for(filtered: Sequence[Observation], period: str) -> float | None:
    """Value of the first observation for ``period``, or None if there is none."""
    for obs in filtered:
        if obs.period == period:
            return obs.value
    return None


def build_series(
    filtered: Sequence[Observation],
) -> tuple[list[str], list[float | None]]:
    """
    Derive the x-axis periods and the value plotted at each one.

    When several observations share a period only the first is used; later
    ones are ignored.

    Returns:
        (period_axis, value_series), equal length, both empty for empty input
    """
    periods = build_period_axis(filtered)
    values = [first_value_for(filtered, period) for period in periods]
    return periods, values
