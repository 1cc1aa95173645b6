"""Rendering: plotly figures, the streamlit app and HTML export."""
