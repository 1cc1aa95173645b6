"""Streamlit dashboard for exchange-rate visualization.

One page: currency selector, monthly rate chart and the period average.
"""

import logging

import streamlit as st

from currency_rate_dashboard.config import Settings
from currency_rate_dashboard.data import RatesFetcher, RecordStore
from currency_rate_dashboard.models import Currency
from currency_rate_dashboard.pipeline import ViewCache, ViewModel
from currency_rate_dashboard.pipeline.session import DashboardSession, SessionState
from currency_rate_dashboard.ui.figure import build_figure


logger = logging.getLogger(__name__)

NO_DATA_TEXT = "Нет данных"
AVERAGE_LABEL = "Среднее за период:"


def load_session(settings: Settings) -> DashboardSession:
    """Create the session and fetch records once per browser session."""
    if "session" in st.session_state:
        return st.session_state["session"]

    session = DashboardSession(settings.chart_style(), cache=ViewCache())
    try:
        with RatesFetcher(settings) as fetcher:
            store = RecordStore()
            if fetcher.load_into(store):
                session.load(store)
    except ValueError as e:
        logger.error(f"Configuration error: {e}")

    st.session_state["session"] = session
    return session


def render_average(view: ViewModel) -> None:
    """Render the period average block."""
    if view.average is None:
        number = NO_DATA_TEXT
    else:
        number = f'{view.average}<span style="margin-left: 0.25rem;">₽</span>'

    st.markdown(
        f"""<div style="padding: 1rem 0;">
            <div style="color: #00203399; font-size: 1.25rem;">{AVERAGE_LABEL}</div>
            <div style="color: #002033; font-size: 3rem; font-weight: 500;">{number}</div>
        </div>""",
        unsafe_allow_html=True,
    )


def render_chart(view: ViewModel) -> None:
    """Render the rate chart, or a no-data notice."""
    fig = build_figure(view.chart)
    if fig is None:
        st.info(NO_DATA_TEXT)
        return
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="Курсы валют",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    settings = Settings()
    session = load_session(settings)

    col_title, col_choice = st.columns([4, 1])
    with col_choice:
        currency = st.radio(
            "Валюта",
            options=list(Currency),
            index=list(Currency).index(session.currency),
            format_func=lambda c: c.value,
            horizontal=True,
            label_visibility="collapsed",
        )

    if session.state is SessionState.UNINITIALIZED:
        st.warning("Не удалось загрузить данные о курсах валют.")
        session.currency = currency
        view = session.current_view()
    else:
        view = session.select(currency)

    with col_title:
        st.markdown(f"## {view.title}")

    col_chart, col_avg = st.columns([3, 1])
    with col_chart:
        render_chart(view)
    with col_avg:
        render_average(view)

    if session.state is SessionState.FILTERED:
        session.mark_rendered()


if __name__ == "__main__":
    main()
