"""Compose the pipeline stages into one view per (records, currency)."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from currency_rate_dashboard.models import AxisRange, Currency, Observation
from currency_rate_dashboard.pipeline.average import compute_average
from currency_rate_dashboard.pipeline.axis_range import compute_axis_range
from currency_rate_dashboard.pipeline.chart_spec import (
    EMPTY_CHART_SPEC,
    ChartSpec,
    ChartStyle,
    assemble_chart_spec,
)
from currency_rate_dashboard.pipeline.selection import filter_by_currency
from currency_rate_dashboard.pipeline.series import build_series


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewModel:
    """Everything the dashboard shows for one currency."""

    currency: Currency
    title: str
    filtered: tuple[Observation, ...]
    period_axis: tuple[str, ...]
    value_series: tuple[float | None, ...]
    axis_range: AxisRange | None
    average: str | None
    chart: ChartSpec

    @property
    def has_data(self) -> bool:
        return bool(self.filtered)


def compute_view(
    records: Iterable[Observation], currency: Currency, style: ChartStyle
) -> ViewModel:
    """
    Run filter, series, range, average and chart assembly from scratch.

    An empty selection is a normal outcome: average is None and the chart is
    EMPTY_CHART_SPEC.
    """
    filtered = filter_by_currency(records, currency)
    if not filtered:
        logger.debug(f"No observations for {currency.indicator_name}")
        return ViewModel(
            currency=currency,
            title=currency.title,
            filtered=(),
            period_axis=(),
            value_series=(),
            axis_range=None,
            average=None,
            chart=EMPTY_CHART_SPEC,
        )

    values = [obs.value for obs in filtered]
    period_axis, value_series = build_series(filtered)
    axis_range = compute_axis_range(values)

    return ViewModel(
        currency=currency,
        title=currency.title,
        filtered=tuple(filtered),
        period_axis=tuple(period_axis),
        value_series=tuple(value_series),
        axis_range=axis_range,
        average=compute_average(values),
        chart=assemble_chart_spec(period_axis, value_series, axis_range, currency, style),
    )


class ViewCache:
    """Memoizes compute_view on (records version, currency, style)."""

    def __init__(self) -> None:
        self._views: dict[tuple[int, Currency, ChartStyle], ViewModel] = {}
        self.hits = 0
        self.misses = 0

    def get(
        self,
        version: int,
        records: Iterable[Observation],
        currency: Currency,
        style: ChartStyle,
    ) -> ViewModel:
        key = (version, currency, style)
        view = self._views.get(key)
        if view is not None:
            self.hits += 1
            return view

        self.misses += 1
        # Views for older record versions can never be requested again
        self._views = {k: v for k, v in self._views.items() if k[0] == version}
        view = compute_view(records, currency, style)
        self._views[key] = view
        return view

    def clear(self) -> None:
        self._views.clear()
