"""Configuration."""

from currency_rate_dashboard.config.settings import Settings

__all__ = ["Settings"]
