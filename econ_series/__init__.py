"""Economic time series clients with flat-file caching."""

from econ_series.data import get_rates_bundle
from econ_series.errors import (
    CacheCorruptionError,
    ConfigurationError,
    EconSeriesError,
    RemoteServiceError,
)

__version__ = "0.1.0"

__all__ = [
    "CacheCorruptionError",
    "ConfigurationError",
    "EconSeriesError",
    "RemoteServiceError",
    "get_rates_bundle",
]
