"""In-memory holder for the fetched observations."""

from collections.abc import Iterable, Iterator

import pandas as pd

from currency_rate_dashboard.models import Observation


class RecordStore:
    """
    Raw observations in arrival order.

    The store does no transformation. Each ``replace`` bumps ``version`` so
    callers caching derived views know when to recompute.
    """

    def __init__(self, records: Iterable[Observation] = ()) -> None:
        self._records: tuple[Observation, ...] = tuple(records)
        self.version = 1 if self._records else 0

    @property
    def records(self) -> tuple[Observation, ...]:
        return self._records

    def replace(self, records: Iterable[Observation]) -> None:
        """Swap in a freshly fetched record set."""
        self._records = tuple(records)
        self.version += 1

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def to_frame(self) -> pd.DataFrame:
        """Records as a DataFrame with date, period, indicator_name, value columns."""
        columns = ["date", "period", "indicator_name", "value"]
        if not self._records:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(
            [(r.date, r.period, r.indicator_name, r.value) for r in self._records],
            columns=columns,
        )

    def summary(self) -> dict[str, dict]:
        """Observation count and date span per indicator."""
        df = self.to_frame()
        if df.empty:
            return {}

        grouped = df.groupby("indicator_name", sort=True)
        stats = grouped.agg(
            observation_count=("value", "size"),
            first_date=("date", "min"),
            last_date=("date", "max"),
        )
        return {
            indicator: {
                "observation_count": int(row["observation_count"]),
                "first_date": row["first_date"],
                "last_date": row["last_date"],
            }
            for indicator, row in stats.iterrows()
        }
