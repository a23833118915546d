"""Configuration and series catalog."""

from econ_series.config.settings import (
    CREDENTIALS,
    RATES_BUNDLE,
    RATES_BUNDLE_NAME,
    SERIES_LABELS,
    Settings,
)

__all__ = [
    "CREDENTIALS",
    "RATES_BUNDLE",
    "RATES_BUNDLE_NAME",
    "SERIES_LABELS",
    "Settings",
]
