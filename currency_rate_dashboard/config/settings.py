"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
from pathlib import Path
import os

from dotenv import load_dotenv

from currency_rate_dashboard.pipeline.chart_spec import ChartStyle


load_dotenv()


DEFAULT_LINE_COLOR = "#F38B00"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class Settings:
    """Application settings."""

    api_url: str = field(default_factory=lambda: os.getenv("CURRENCY_API_URL", ""))
    request_timeout: float = field(
        default_factory=lambda: _env_float("CURRENCY_API_TIMEOUT", 30.0)
    )
    line_color: str = field(
        default_factory=lambda: os.getenv("CURRENCY_LINE_COLOR", DEFAULT_LINE_COLOR)
    )
    export_dir: Path = field(
        default_factory=lambda: Path(__file__).parent.parent.parent / "dist"
    )

    def validate(self) -> None:
        """Validate required settings."""
        if not self.api_url:
            raise ValueError(
                "CURRENCY_API_URL not set. Point it at the endpoint serving "
                "the exchange-rate observations."
            )

    def chart_style(self) -> ChartStyle:
        """Line styling handed to the chart assembler."""
        return ChartStyle(line_color=self.line_color)
