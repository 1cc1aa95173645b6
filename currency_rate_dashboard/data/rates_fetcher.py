"""Exchange-rate API fetcher."""

import logging
from typing import Any

import httpx
import pandas as pd

from currency_rate_dashboard.config import Settings
from currency_rate_dashboard.data.store import RecordStore
from currency_rate_dashboard.models import Currency, Observation


logger = logging.getLogger(__name__)


# Wire field -> Observation attribute
FIELD_MAP: dict[str, str] = {
    "date": "date",
    "month": "period",
    "indicator": "indicator_name",
    "value": "value",
}


def _is_label(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _as_scalar(value: Any) -> Any:
    # Booleans and nested JSON are never rates
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    return value


def parse_observations(payload: Any) -> list[Observation]:
    """
    Validate raw API records and convert them to observations.

    Records with a missing or unparseable field are skipped with a warning;
    the rest keep their arrival order.

    Args:
        payload: decoded JSON body, expected to be a list of objects

    Returns:
        Valid observations in payload order

    Raises:
        ValueError: if the payload is not a list
    """
    if not isinstance(payload, list):
        raise ValueError(f"Unexpected payload type {type(payload).__name__}, expected a list")

    rows = {}
    for idx, item in enumerate(payload):
        if isinstance(item, dict):
            rows[idx] = item
        else:
            logger.warning(f"Skipping record #{idx}: not an object ({item!r})")

    if not rows:
        return []

    df = pd.DataFrame.from_dict(rows, orient="index")
    for column in FIELD_MAP:
        if column not in df.columns:
            df[column] = None

    # Calendar date only; any time or offset part is ignored
    df["date"] = pd.to_datetime(
        df["date"].astype(str).str[:10], format="%Y-%m-%d", errors="coerce"
    )
    df["value"] = pd.to_numeric(df["value"].map(_as_scalar), errors="coerce")

    invalid = (
        df["date"].isna()
        | df["value"].isna()
        | df["value"].isin([float("inf"), float("-inf")])
        | ~df["month"].map(_is_label).astype(bool)
        | ~df["indicator"].map(_is_label).astype(bool)
    )
    for idx in df.index[invalid]:
        logger.warning(f"Skipping malformed record #{idx}: {payload[idx]!r}")

    valid = df[~invalid]
    return [
        Observation(
            date=row.date.date(),
            period=row.month,
            indicator_name=row.indicator,
            value=float(row.value),
        )
        for row in valid.itertuples()
    ]


class RatesFetcher:
    """Fetches exchange-rate observations from the configured endpoint."""

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.request_timeout)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RatesFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch_records(self) -> list[Observation]:
        """
        Fetch and validate all observations.

        Raises:
            httpx.HTTPError: on transport failure or a non-2xx response
            httpx.InvalidURL: if the configured URL cannot be parsed
            ValueError: if the body is not JSON or not a list
        """
        logger.info(f"Fetching rates from {self.settings.api_url}...")
        response = self.client.get(self.settings.api_url)
        response.raise_for_status()

        payload = response.json()
        records = parse_observations(payload)
        skipped = len(payload) - len(records)
        if skipped:
            logger.warning(f"  Skipped {skipped} malformed records")
        logger.info(f"  Received {len(records)} observations")
        return records

    def load_into(self, store: RecordStore) -> bool:
        """
        Fill ``store`` with fetched records.

        A failed fetch is logged and leaves the store untouched; there is no
        retry.

        Returns:
            True if the store was populated
        """
        try:
            records = self.fetch_records()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error fetching rates: {e.response.status_code}")
            return False
        except httpx.HTTPError as e:
            logger.error(f"Error fetching rates: {e}")
            return False
        except httpx.InvalidURL as e:
            logger.error(f"Invalid rates URL {self.settings.api_url!r}: {e}")
            return False
        except ValueError as e:
            logger.error(f"Could not parse rates response: {e}")
            return False

        store.replace(records)
        return True


def main() -> None:
    """CLI entry point for fetching data."""
    import argparse
    import sys

    from currency_rate_dashboard.pipeline import compute_view

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Fetch exchange-rate observations")
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show per-indicator summary and exit",
    )
    parser.add_argument(
        "--currency",
        type=str,
        choices=[c.value for c in Currency],
        help="Show the chart view for one currency",
    )
    args = parser.parse_args()

    try:
        settings = Settings()
        with RatesFetcher(settings) as fetcher:
            store = RecordStore()
            if not fetcher.load_into(store):
                print("No data available.")
                sys.exit(1)

        if args.status or not args.currency:
            print("\nIndicator Summary:")
            print("-" * 70)
            for indicator, info in store.summary().items():
                print(
                    f"{indicator:20} | {info['observation_count']:6} obs | "
                    f"{info['first_date']} .. {info['last_date']}"
                )
            return

        view = compute_view(store, Currency.from_symbol(args.currency), settings.chart_style())
        print(f"\n{view.title}")
        if not view.has_data:
            print("  Нет данных")
            return
        print(f"  Periods: {len(view.period_axis)} ({view.period_axis[0]} .. {view.period_axis[-1]})")
        print(f"  Average: {view.average}₽")
        rng = view.axis_range
        print(f"  Axis:    {rng.min} .. {rng.max} (tick {rng.tick_interval})")

    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
