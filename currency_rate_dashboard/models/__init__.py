"""Data models for exchange-rate observations."""

from currency_rate_dashboard.models.rates import AxisRange, Currency, Observation

__all__ = ["AxisRange", "Currency", "Observation"]
