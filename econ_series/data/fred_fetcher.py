"""FRED API data fetcher."""

import logging
from collections.abc import Iterable
from datetime import date

import pandas as pd

from econ_series.data.base import BaseFetcher
from econ_series.errors import RemoteServiceError
from econ_series.models import OBSERVATION_COLUMNS, empty_observations


logger = logging.getLogger(__name__)


class FredFetcher(BaseFetcher):
    """Fetches series observations from the FRED API."""

    API = "fred"
    BASE_URL = "https://api.stlouisfed.org/fred"

    def fetch_series_info(self, series_id: str) -> dict:
        """Fetch metadata for a series from FRED."""
        data = self._request_json(
            "GET",
            f"{self.BASE_URL}/series",
            params={
                "series_id": series_id,
                "api_key": self.api_key,
                "file_type": "json",
            },
        )

        if not data.get("seriess"):
            raise RemoteServiceError(f"Series {series_id} not found")

        return data["seriess"][0]

    def fetch_observations(
        self, series_id: str, observation_start: str | date | None = None
    ) -> pd.DataFrame:
        """
        Fetch observations for one series.

        Args:
            series_id: FRED series ID
            observation_start: Earliest date to request (ISO string or date)

        Returns:
            DataFrame with series_id, date and value columns in API order.
            Non-numeric values such as "." come back as NaN.
        """
        logger.info(f"Fetching {series_id}...")

        params = {
            "series_id": series_id,
            "api_key": self.api_key,
            "file_type": "json",
        }
        if observation_start is not None:
            if isinstance(observation_start, date):
                observation_start = observation_start.strftime("%Y-%m-%d")
            params["observation_start"] = observation_start

        data = self._request_json(
            "GET", f"{self.BASE_URL}/series/observations", params=params
        )

        df = self._parse_observations(series_id, data)
        logger.info(f"  Received {len(df)} observations for {series_id}")
        return df

    @staticmethod
    def _parse_observations(series_id: str, data: dict) -> pd.DataFrame:
        observations = data.get("observations")
        if not isinstance(observations, list):
            raise RemoteServiceError(
                f"Response for {series_id} has no observations array"
            )
        if not observations:
            return empty_observations()

        try:
            df = pd.DataFrame(
                {
                    "date": [ob["date"] for ob in observations],
                    "value": [ob["value"] for ob in observations],
                }
            )
            df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d")
            df["value"] = pd.to_numeric(df["value"], errors="coerce").astype("float64")
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteServiceError(
                f"Malformed observation in response for {series_id}: {e}"
            ) from e

        df.insert(0, "series_id", series_id)
        return df[OBSERVATION_COLUMNS]

    def fetch_bundle(
        self, series_ids: Iterable[str], observation_start: str | date | None = None
    ) -> pd.DataFrame:
        """
        Fetch several series one at a time and concatenate them.

        The first failing series aborts the whole bundle.
        """
        frames = [
            self.fetch_observations(series_id, observation_start)
            for series_id in series_ids
        ]
        frames = [df for df in frames if not df.empty]
        if not frames:
            return empty_observations()
        return pd.concat(frames, ignore_index=True)
