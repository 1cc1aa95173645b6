"""Turn a ChartSpec into a plotly figure."""

import plotly.graph_objects as go

from currency_rate_dashboard.pipeline.chart_spec import ChartSpec


def build_figure(spec: ChartSpec, height: int = 400) -> go.Figure | None:
    """
    Render the rate chart.

    Returns None for an empty spec so callers can show a no-data state.
    """
    if spec.is_empty:
        return None

    fig = go.Figure()
    categories = list(spec.x_axis.categories)

    for line, hover in zip(spec.series, spec.hover_texts()):
        fig.add_trace(go.Scatter(
            x=categories, y=list(line.values),
            mode="lines+markers" if line.show_markers else "lines",
            line=dict(color=line.color, width=line.width),
            name=line.name,
            hovertext=hover or None,
            hoverinfo="text" if hover else "x+y",
            connectgaps=False,
        ))

    y_axis = spec.y_axis
    tick_values = y_axis.tick_values()

    fig.update_layout(
        height=height, margin=dict(l=30, r=30, t=40, b=40),
        paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
        hovermode="x",
        hoverlabel=dict(bgcolor="white", font=dict(color="#002033")),
        xaxis=dict(
            type="category", showline=False, ticks="", showgrid=False,
            range=[0, max(len(categories) - 1, 1)],
        ),
        yaxis=dict(
            range=[y_axis.min, y_axis.max],
            tickmode="array",
            tickvals=tick_values,
            ticktext=[y_axis.tick_label(v) for v in tick_values],
            showline=False, zeroline=False,
            gridcolor=y_axis.grid_color, griddash="dash",
        ),
    )
    return fig
