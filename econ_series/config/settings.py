"""Configuration settings for the series clients."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
import os

from dotenv import load_dotenv

from econ_series.errors import ConfigurationError


load_dotenv()


# Display labels keyed by series ID
SERIES_LABELS: Mapping[str, str] = MappingProxyType({
    "DFF": "Effective Fed Funds Rate",
    "DGS2": "2Y Treasury",
    "DGS10": "10Y Treasury",
})

# Fixed rates bundle, fetched and cached as one unit
RATES_BUNDLE: tuple[str, ...] = ("DFF", "DGS2", "DGS10")
RATES_BUNDLE_NAME = "fred_rates"

# Where each API family reads its key from, and where to get one
CREDENTIALS: dict[str, tuple[str, str]] = {
    "fred": ("FRED_API_KEY", "https://fred.stlouisfed.org/docs/api/api_key.html"),
    "bls": ("BLS_API_KEY", "https://data.bls.gov/registrationEngine/"),
    "bea": ("BEA_API_KEY", "https://apps.bea.gov/API/signup/"),
}


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Defaults come from the environment (and a local ``.env``). Passing values
    explicitly bypasses the environment entirely.
    """

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    bls_api_key: str = field(default_factory=lambda: os.getenv("BLS_API_KEY", ""))
    bea_api_key: str = field(default_factory=lambda: os.getenv("BEA_API_KEY", ""))
    cache_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("ECON_SERIES_CACHE_DIR", str(Path("data") / "cache"))
        )
    )
    http_timeout: float = field(
        default_factory=lambda: os.getenv("ECON_SERIES_HTTP_TIMEOUT", "30")
    )
    catalog: Mapping[str, str] = field(default_factory=lambda: SERIES_LABELS)

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__
        object.__setattr__(self, "cache_dir", Path(self.cache_dir))
        object.__setattr__(self, "catalog", MappingProxyType(dict(self.catalog)))
        try:
            timeout = float(self.http_timeout)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"ECON_SERIES_HTTP_TIMEOUT must be a number of seconds, got {self.http_timeout!r}"
            ) from e
        object.__setattr__(self, "http_timeout", timeout)

    def require(self, api: str) -> str:
        """Return the API key for ``api`` or raise if it is not configured."""
        if api not in CREDENTIALS:
            raise KeyError(f"Unknown API family: {api}")
        env_var, signup_url = CREDENTIALS[api]
        key = getattr(self, f"{api}_api_key")
        if not key:
            raise ConfigurationError(f"{env_var} not set. Get one at: {signup_url}")
        return key

    def label_for(self, series_id: str) -> str:
        """Display label for a series, falling back to the raw ID."""
        return self.catalog.get(series_id, series_id)
