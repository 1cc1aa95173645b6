"""Hover text for the rate chart."""

PERIOD_SUFFIX = "год"
VALUE_SUFFIX = "₽"
SWATCH = "●"
MISSING = "—"


def _format_value(value: float | None) -> str:
    if value is None:
        return MISSING
    if float(value).is_integer():
        return f"{int(value)}{VALUE_SUFFIX}"
    return f"{value}{VALUE_SUFFIX}"


def format_tooltip(period: str, value: float | None, series_name: str, color: str) -> str:
    """Render one hover label in plotly's hover markup."""
    return (
        f"{period} {PERIOD_SUFFIX}<br>"
        f'<span style="color:{color}">{SWATCH}</span> '
        f"{series_name} <b>{_format_value(value)}</b>"
    )
