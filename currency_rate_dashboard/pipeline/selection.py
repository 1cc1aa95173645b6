"""Narrow raw observations down to one currency."""

from collections.abc import Iterable

from currency_rate_dashboard.models import Currency, Observation


def filter_by_currency(
    records: Iterable[Observation], currency: Currency
) -> list[Observation]:
    """
    Select the observations tagged with the currency's indicator name.

    Matching is exact string equality (no case folding or trimming), and the
    relative order of ``records`` is preserved. No match yields an empty list.
    """
    indicator = currency.indicator_name
    return [r for r in records if r.indicator_name == indicator]
