"""Transformation pipeline from raw observations to a renderable view."""

from currency_rate_dashboard.pipeline.view import ViewCache, ViewModel, compute_view

__all__ = ["ViewCache", "ViewModel", "compute_view"]
