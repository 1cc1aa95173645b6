"""
Pytest configuration and shared fixtures for the dashboard tests.

Usage:
    @pytest.fixture functions are automatically available to all tests.
    Import helpers from conftest when needed.
"""
from datetime import date

import httpx
import pytest

from currency_rate_dashboard.config import Settings
from currency_rate_dashboard.models import Currency, Observation
from currency_rate_dashboard.pipeline.chart_spec import ChartStyle


API_URL = "http://rates.test/api/currencies"


# =============================================================================
# Test Data Helpers
# =============================================================================

def make_obs(
    period: str,
    value: float,
    currency: Currency = Currency.USD,
    day: date = date(2023, 1, 1),
) -> Observation:
    """
    Create an Observation for the given currency.

    Usage:
        obs = make_obs("Feb 2023", 75.0, Currency.EUR)
    """
    return Observation(
        date=day,
        period=period,
        indicator_name=currency.indicator_name,
        value=value,
    )


def make_client(handler) -> httpx.Client:
    """httpx client whose requests are answered by ``handler``."""
    return httpx.Client(transport=httpx.MockTransport(handler))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def style() -> ChartStyle:
    return ChartStyle(line_color="#F38B00")


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fake endpoint."""
    return Settings(api_url=API_URL, export_dir=tmp_path)


@pytest.fixture
def mixed_records() -> list[Observation]:
    """Three currencies interleaved, in arrival order."""
    return [
        make_obs("Jan 2023", 70.0, Currency.USD, date(2023, 1, 1)),
        make_obs("Jan 2023", 75.0, Currency.EUR, date(2023, 1, 1)),
        make_obs("Jan 2023", 10.2, Currency.CNY, date(2023, 1, 1)),
        make_obs("Feb 2023", 75.0, Currency.USD, date(2023, 2, 1)),
        make_obs("Feb 2023", 80.5, Currency.EUR, date(2023, 2, 1)),
        make_obs("Mar 2023", 72.0, Currency.USD, date(2023, 3, 1)),
    ]


@pytest.fixture
def raw_payload() -> list[dict]:
    """API body as served by the rates endpoint."""
    return [
        {"date": "2023-01-01", "month": "Jan 2023", "indicator": "Курс доллара", "value": 70},
        {"date": "2023-01-01", "month": "Jan 2023", "indicator": "Курс евро", "value": 75.5},
        {"date": "2023-02-01", "month": "Feb 2023", "indicator": "Курс доллара", "value": 75},
        {"date": "2023-02-01", "month": "Feb 2023", "indicator": "Курс евро", "value": 80.25},
    ]
