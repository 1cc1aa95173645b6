"""Data models for exchange-rate data."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


@dataclass(frozen=True)
class Observation:
    """Single monthly exchange-rate observation."""

    date: date
    period: str  # e.g. "Feb 2023"
    indicator_name: str
    value: float


class Currency(str, Enum):
    """The three tracked currencies, keyed by display symbol."""

    USD = "$"
    EUR = "€"
    CNY = "¥"

    @property
    def indicator_name(self) -> str:
        """Indicator tag used by the upstream data for this currency."""
        return INDICATOR_NAMES[self]

    @property
    def title(self) -> str:
        return TITLES[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Currency":
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(
                f"Unknown currency symbol {symbol!r}; "
                f"expected one of {', '.join(c.value for c in cls)}"
            ) from None


INDICATOR_NAMES: dict[Currency, str] = {
    Currency.USD: "Курс доллара",
    Currency.EUR: "Курс евро",
    Currency.CNY: "Курс юаня",
}

TITLES: dict[Currency, str] = {
    Currency.USD: "КУРС ДОЛЛАРА, $/₽",
    Currency.EUR: "КУРС ЕВРО, €/₽",
    Currency.CNY: "КУРС ЮАНЯ, ¥/₽",
}


@dataclass(frozen=True)
class AxisRange:
    """Value-axis bounds and gridline spacing."""

    min: float
    max: float
    tick_interval: float
