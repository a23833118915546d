"""BEA data API fetcher."""

import logging

from econ_series.data.base import BaseFetcher
from econ_series.errors import RemoteServiceError


logger = logging.getLogger(__name__)


class BeaFetcher(BaseFetcher):
    """Thin wrapper around https://apps.bea.gov/api/data."""

    API = "bea"
    BASE_URL = "https://apps.bea.gov/api/data"

    def get(self, params: dict) -> dict:
        """
        Issue one request with arbitrary BEA parameters.

        Args:
            params: Named query parameters, e.g. {"method": "GETDATASETLIST"}

        Returns:
            The ``BEAAPI.Results`` object
        """
        query = {"UserID": self.api_key, "ResultFormat": "JSON", **params}
        logger.info(f"BEA request method={params.get('method', '?')}")

        data = self._request_json("GET", self.BASE_URL, params=query)

        api = data.get("BEAAPI")
        if not isinstance(api, dict):
            raise RemoteServiceError("BEA response has no BEAAPI object")

        results = api.get("Results")
        error = api.get("Error")
        if error is None and isinstance(results, dict):
            error = results.get("Error")
        if error is not None:
            raise RemoteServiceError(f"BEA API error: {_describe(error)}")

        if not isinstance(results, dict):
            raise RemoteServiceError("BEA response has no Results object")
        return results

    def dataset_list(self) -> list[dict]:
        """List the datasets BEA exposes."""
        results = self.get({"method": "GETDATASETLIST"})
        return results.get("Dataset", [])


def _describe(error) -> str:
    if isinstance(error, dict):
        return error.get("APIErrorDescription") or error.get("ErrorDetail", {}).get(
            "Description", str(error)
        )
    return str(error)
