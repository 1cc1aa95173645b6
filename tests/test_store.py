from datetime import date

from currency_rate_dashboard.data import RecordStore


def test_empty_store():
    store = RecordStore()
    assert len(store) == 0
    assert not store
    assert store.version == 0
    assert store.to_frame().empty
    assert store.summary() == {}


def test_replace_bumps_version_and_keeps_order(mixed_records):
    store = RecordStore()
    store.replace(mixed_records)
    assert store.version == 1
    assert list(store) == mixed_records

    store.replace(reversed(mixed_records))
    assert store.version == 2
    assert store.records[0] == mixed_records[-1]


def test_summary_per_indicator(mixed_records):
    summary = RecordStore(mixed_records).summary()

    assert set(summary) == {"Курс доллара", "Курс евро", "Курс юаня"}
    usd = summary["Курс доллара"]
    assert usd["observation_count"] == 3
    assert usd["first_date"] == date(2023, 1, 1)
    assert usd["last_date"] == date(2023, 3, 1)
    assert summary["Курс юаня"]["observation_count"] == 1
