"""Data fetching and storage."""

from .rates_fetcher import RatesFetcher
from .store import RecordStore

__all__ = ["RatesFetcher", "RecordStore"]
