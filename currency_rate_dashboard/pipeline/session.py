"""Selection lifecycle for one dashboard session."""

import logging
from collections.abc import Iterable
from enum import Enum

from currency_rate_dashboard.data.store import RecordStore
from currency_rate_dashboard.models import Currency, Observation
from currency_rate_dashboard.pipeline.chart_spec import ChartStyle
from currency_rate_dashboard.pipeline.view import ViewCache, ViewModel, compute_view


logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    FILTERED = "filtered"
    RENDERED = "rendered"


class DashboardSession:
    """
    Tracks loaded records and the selected currency.

    Uninitialized -> Loaded -> Filtered -> Rendered, then back to Filtered on
    every new selection. There is no terminal state.
    """

    def __init__(
        self,
        style: ChartStyle,
        store: RecordStore | None = None,
        currency: Currency = Currency.USD,
        cache: ViewCache | None = None,
    ) -> None:
        self.style = style
        self.store = store if store is not None else RecordStore()
        self.currency = currency
        self.cache = cache
        self.state = SessionState.LOADED if self.store else SessionState.UNINITIALIZED

    def load(self, records: Iterable[Observation]) -> None:
        """Store a fetched record set; every later view is recomputed from it."""
        self.store.replace(records)
        self.state = SessionState.LOADED
        logger.info(f"Loaded {len(self.store)} observations")

    def select(self, currency: Currency) -> ViewModel:
        """Switch currency and compute its view."""
        if self.state is SessionState.UNINITIALIZED:
            raise RuntimeError("No records loaded yet; call load() first")
        self.currency = currency
        view = self._compute()
        self.state = SessionState.FILTERED
        return view

    def current_view(self) -> ViewModel:
        """View for the current currency; a no-data view before any load."""
        if self.state is SessionState.UNINITIALIZED:
            return compute_view((), self.currency, self.style)
        return self._compute()

    def mark_rendered(self) -> None:
        if self.state is not SessionState.FILTERED:
            raise RuntimeError(f"Cannot mark rendered from state {self.state.value}")
        self.state = SessionState.RENDERED

    def _compute(self) -> ViewModel:
        if self.cache is None:
            return compute_view(self.store, self.currency, self.style)
        return self.cache.get(self.store.version, self.store, self.currency, self.style)
