from currency_rate_dashboard.models import Currency
from currency_rate_dashboard.pipeline import compute_view
from currency_rate_dashboard.pipeline.chart_spec import EMPTY_CHART_SPEC
from currency_rate_dashboard.ui.figure import build_figure
from currency_rate_dashboard.ui.html_exporter import export_html, render_html
from tests.conftest import make_obs


def test_build_figure_from_view(style):
    view = compute_view([make_obs("Jan", 70), make_obs("Feb", 75)], Currency.USD, style)
    fig = build_figure(view.chart)

    assert len(fig.data) == 1
    trace = fig.data[0]
    assert trace.mode == "lines"
    assert list(trace.x) == ["Jan", "Feb"]
    assert list(trace.y) == [70, 75]
    assert trace.name == "Курс доллара"
    assert trace.hoverinfo == "text"
    assert "Jan год" in trace.hovertext[0]

    yaxis = fig.layout.yaxis
    assert list(yaxis.range) == [70, 76]
    assert list(yaxis.tickvals) == [70, 71.5, 73, 74.5, 76]
    assert yaxis.ticktext[0] == ""
    assert fig.layout.xaxis.type == "category"


def test_build_figure_empty_spec():
    assert build_figure(EMPTY_CHART_SPEC) is None


def test_export_html(tmp_path, style):
    view = compute_view([make_obs("Jan", 70), make_obs("Feb", 75)], Currency.USD, style)
    path = export_html(view, tmp_path / "out" / "index.html")

    html = path.read_text(encoding="utf-8")
    assert "КУРС ДОЛЛАРА, $/₽" in html
    assert "72.5" in html
    assert "plotly" in html.lower()


def test_render_html_without_data(style):
    view = compute_view([], Currency.EUR, style)
    html = render_html(view)
    assert "Нет данных" in html
    assert "КУРС ЕВРО, €/₽" in html
