"""BLS public API v2 fetcher.

One POST per call; the API accepts several series IDs and a year range in a
single request. Registered keys allow up to 50 series and 20 years per call.
"""

import logging
from collections.abc import Iterable

import pandas as pd

from econ_series.data.base import BaseFetcher
from econ_series.errors import RemoteServiceError
from econ_series.models import OBSERVATION_COLUMNS, empty_observations


logger = logging.getLogger(__name__)


class BlsFetcher(BaseFetcher):
    """Fetches time series from the BLS public data API."""

    API = "bls"
    BASE_URL = "https://api.bls.gov/publicAPI/v2/timeseries/data/"
    SUCCESS = "REQUEST_SUCCEEDED"

    def fetch_raw(
        self, series_ids: Iterable[str], start_year: int | str, end_year: int | str
    ) -> dict:
        """
        POST a timeseries request and return the decoded JSON.

        Args:
            series_ids: BLS series IDs, e.g. "LNS14000000"
            start_year: First year (inclusive)
            end_year: Last year (inclusive)
        """
        series_ids = list(series_ids)
        logger.info(f"Fetching {len(series_ids)} BLS series for {start_year}-{end_year}...")

        data = self._request_json(
            "POST",
            self.BASE_URL,
            json={
                "seriesid": series_ids,
                "startyear": str(start_year),
                "endyear": str(end_year),
                "registrationkey": self.api_key,
            },
        )

        for message in data.get("message") or []:
            logger.warning(f"BLS API message: {message}")

        status = data.get("status")
        if status != self.SUCCESS:
            detail = "; ".join(data.get("message") or []) or "no details"
            raise RemoteServiceError(f"BLS request failed with status {status}: {detail}")

        return data

    def fetch_observations(
        self, series_ids: Iterable[str], start_year: int | str, end_year: int | str
    ) -> pd.DataFrame:
        """Fetch monthly series as an observation frame, oldest first per series."""
        return self.parse_observations(self.fetch_raw(series_ids, start_year, end_year))

    @staticmethod
    def parse_observations(data: dict) -> pd.DataFrame:
        """
        Flatten a BLS response into series_id / date / value rows.

        Monthly periods M01-M12 map to the first of the month. The annual
        average (M13) and non-monthly periods are skipped. Values that are not
        numeric (BLS uses "-" for unavailable) become NaN.
        """
        try:
            series_list = data["Results"]["series"]
            rows = []
            for series in series_list:
                series_id = series["seriesID"]
                for point in series["data"]:
                    period = point["period"]
                    if not period.startswith("M") or period == "M13":
                        continue
                    rows.append({
                        "series_id": series_id,
                        "date": f"{point['year']}-{period[1:]}-01",
                        "value": point["value"],
                    })
        except (KeyError, TypeError) as e:
            raise RemoteServiceError(f"Unexpected BLS response layout: {e}") from e

        if not rows:
            return empty_observations()

        df = pd.DataFrame(rows, columns=OBSERVATION_COLUMNS)
        try:
            df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d")
        except ValueError as e:
            raise RemoteServiceError(f"Unexpected BLS period: {e}") from e
        df["value"] = pd.to_numeric(
            df["value"].astype(str).str.replace(",", "", regex=False), errors="coerce"
        ).astype("float64")

        # BLS returns newest first
        df = df.sort_values(["series_id", "date"], kind="mergesort")
        return df.reset_index(drop=True)
