from currency_rate_dashboard.pipeline.average import compute_average


def test_average_exact_one_decimal():
    assert compute_average([70, 75]) == "72.5"


def test_average_rounds_up():
    assert compute_average([70.01, 70.02]) == "70.1"
    assert compute_average([72.31]) == "72.4"


def test_average_integral_mean_keeps_one_decimal():
    assert compute_average([70, 70]) == "70.0"


def test_average_never_below_mean():
    values = [81.37, 79.92, 80.05, 82.6]
    mean = sum(values) / len(values)
    assert float(compute_average(values)) >= mean


def test_average_empty_is_none():
    assert compute_average([]) is None
