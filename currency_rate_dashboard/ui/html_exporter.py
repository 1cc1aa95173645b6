"""Export one currency view as a self-contained HTML page."""

import logging
from datetime import datetime
from pathlib import Path

from currency_rate_dashboard.config import Settings
from currency_rate_dashboard.data import RatesFetcher, RecordStore
from currency_rate_dashboard.models import Currency
from currency_rate_dashboard.pipeline import ViewModel, compute_view
from currency_rate_dashboard.ui.figure import build_figure


logger = logging.getLogger(__name__)

NO_DATA_TEXT = "Нет данных"


def render_html(view: ViewModel, include_plotlyjs: bool | str = True) -> str:
    """
    Build the page markup for a view.

    Args:
        view: computed view for one currency
        include_plotlyjs: passed to plotly; True inlines the library,
            "cdn" links it instead

    Returns:
        Complete HTML document
    """
    fig = build_figure(view.chart)
    if fig is None:
        chart_html = f'<div class="no-data">{NO_DATA_TEXT}</div>'
    else:
        chart_html = fig.to_html(
            full_html=False,
            include_plotlyjs=include_plotlyjs,
            config={"displayModeBar": False},
        )

    if view.average is None:
        average_html = NO_DATA_TEXT
    else:
        average_html = f'{view.average}<span class="ruble">₽</span>'

    return f"""<!DOCTYPE html>
<html lang="ru">
<head>
    <meta charset="utf-8">
    <title>{view.title}</title>
    <style>
        body {{ font-family: 'Inter', sans-serif; color: #002033; margin: 2rem; }}
        .header {{ display: flex; justify-content: space-between; align-items: baseline; }}
        .block {{ display: flex; gap: 2rem; align-items: flex-start; }}
        .chart {{ flex: 3; }}
        .avg {{ flex: 1; }}
        .avg-label {{ color: #00203399; font-size: 1.25rem; }}
        .avg-number {{ font-size: 3rem; }}
        .ruble {{ margin-left: 0.25rem; }}
        .no-data {{ color: #00203399; padding: 4rem 0; }}
        .footer {{ color: #64748b; font-size: 0.7rem; margin-top: 1rem; }}
    </style>
</head>
<body>
    <div class="header"><h1>{view.title}</h1></div>
    <div class="block">
        <div class="chart">{chart_html}</div>
        <div class="avg">
            <div class="avg-label">Среднее за период:</div>
            <div class="avg-number">{average_html}</div>
        </div>
    </div>
    <div class="footer">Generated {datetime.now().strftime('%Y-%m-%d %H:%M')}</div>
</body>
</html>
"""


def export_html(view: ViewModel, output_path: Path | str) -> Path:
    """Write the page for ``view`` to ``output_path`` and return the path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_html(view), encoding="utf-8")
    logger.info(f"Exported {view.currency.value} view to {output_path}")
    return output_path


def main() -> None:
    """CLI entry point for HTML export."""
    import argparse
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Export the rate chart as HTML")
    parser.add_argument(
        "--currency",
        type=str,
        default=Currency.USD.value,
        choices=[c.value for c in Currency],
        help="Currency to export",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file (default: <export_dir>/index.html)",
    )
    args = parser.parse_args()

    try:
        settings = Settings()
        store = RecordStore()
        with RatesFetcher(settings) as fetcher:
            if not fetcher.load_into(store):
                print("No data available.")
                sys.exit(1)
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    view = compute_view(store, Currency.from_symbol(args.currency), settings.chart_style())
    path = export_html(view, args.output or settings.export_dir / "index.html")
    print(f"Saved {view.title} to {path}")


if __name__ == "__main__":
    main()
