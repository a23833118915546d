"""Data fetching, caching and cleaning."""

from .bea_fetcher import BeaFetcher
from .bls_fetcher import BlsFetcher
from .cache import CacheHit, CacheMiss, SnapshotCache, read_snapshot, write_snapshot
from .fred_fetcher import FredFetcher
from .normalize import clean_rates
from .rates import get_rates_bundle

__all__ = [
    "BeaFetcher",
    "BlsFetcher",
    "CacheHit",
    "CacheMiss",
    "FredFetcher",
    "SnapshotCache",
    "clean_rates",
    "get_rates_bundle",
    "read_snapshot",
    "write_snapshot",
]
