import pytest

from currency_rate_dashboard.data import RecordStore
from currency_rate_dashboard.models import Currency
from currency_rate_dashboard.pipeline import ViewCache
from currency_rate_dashboard.pipeline.chart_spec import EMPTY_CHART_SPEC
from currency_rate_dashboard.pipeline.session import DashboardSession, SessionState


def test_starts_uninitialized_with_no_data_view(style):
    session = DashboardSession(style)
    assert session.state is SessionState.UNINITIALIZED

    view = session.current_view()
    assert view.currency is Currency.USD
    assert view.average is None
    assert view.chart is EMPTY_CHART_SPEC

    with pytest.raises(RuntimeError):
        session.select(Currency.EUR)


def test_full_lifecycle(style, mixed_records):
    session = DashboardSession(style)
    session.load(mixed_records)
    assert session.state is SessionState.LOADED

    view = session.select(Currency.EUR)
    assert session.state is SessionState.FILTERED
    assert view.currency is Currency.EUR
    assert view.value_series == (75.0, 80.5)

    session.mark_rendered()
    assert session.state is SessionState.RENDERED

    view = session.select(Currency.USD)
    assert session.state is SessionState.FILTERED
    assert view.period_axis == ("Jan 2023", "Feb 2023", "Mar 2023")


def test_mark_rendered_requires_filtered(style, mixed_records):
    session = DashboardSession(style)
    session.load(mixed_records)
    with pytest.raises(RuntimeError):
        session.mark_rendered()


def test_reload_recomputes_views(style, mixed_records):
    cache = ViewCache()
    session = DashboardSession(style, cache=cache)
    session.load(mixed_records)

    first = session.select(Currency.USD)
    assert session.select(Currency.USD) is first
    assert cache.hits == 1

    session.load(mixed_records[:1])
    reloaded = session.select(Currency.USD)
    assert reloaded.period_axis == ("Jan 2023",)
    assert session.store.version == 2


def test_prefilled_store_starts_loaded(style, mixed_records):
    session = DashboardSession(style, store=RecordStore(mixed_records))
    assert session.state is SessionState.LOADED


def test_empty_store_is_kept(style):
    store = RecordStore()
    session = DashboardSession(style, store=store)
    assert session.store is store
    assert session.state is SessionState.UNINITIALIZED
