"""BLS and BEA clients."""

import json

import httpx
import pandas as pd
import pytest

from econ_series.config import Settings
from econ_series.data.bea_fetcher import BeaFetcher
from econ_series.data.bls_fetcher import BlsFetcher
from econ_series.errors import ConfigurationError, RemoteServiceError


BLS_RESPONSE = {
    "status": "REQUEST_SUCCEEDED",
    "responseTime": 120,
    "message": [],
    "Results": {
        "series": [
            {
                "seriesID": "LNS14000000",
                "data": [
                    {"year": "2024", "period": "M13", "periodName": "Annual", "value": "4.0"},
                    {"year": "2024", "period": "M02", "periodName": "February", "value": "3.9"},
                    {"year": "2024", "period": "M01", "periodName": "January", "value": "3.7"},
                ],
            },
            {
                "seriesID": "CUUR0000SA0",
                "data": [
                    {"year": "2024", "period": "M02", "periodName": "February", "value": "-"},
                    {"year": "2024", "period": "M01", "periodName": "January", "value": "308.417"},
                ],
            },
        ]
    },
}


class TestBlsFetcher:

    def test_missing_key(self, tmp_path):
        with pytest.raises(ConfigurationError, match="BLS_API_KEY"):
            BlsFetcher(Settings(bls_api_key="", cache_dir=tmp_path))

    def test_post_body(self, settings, make_client):
        client, transport = make_client(lambda request: httpx.Response(200, json=BLS_RESPONSE))

        BlsFetcher(settings, client=client).fetch_raw(["LNS14000000"], 2023, 2024)

        request = transport.requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {
            "seriesid": ["LNS14000000"],
            "startyear": "2023",
            "endyear": "2024",
            "registrationkey": "bls-test-key",
        }

    def test_parse_monthly_observations(self, settings, make_client):
        client, _ = make_client(lambda request: httpx.Response(200, json=BLS_RESPONSE))

        df = BlsFetcher(settings, client=client).fetch_observations(
            ["LNS14000000", "CUUR0000SA0"], 2024, 2024
        )

        unrate = df[df["series_id"] == "LNS14000000"]
        assert unrate["date"].tolist() == [pd.Timestamp("2024-01-01"), pd.Timestamp("2024-02-01")]
        assert unrate["value"].tolist() == [3.7, 3.9]

        cpi = df[df["series_id"] == "CUUR0000SA0"]
        assert cpi["value"].iloc[0] == pytest.approx(308.417)
        assert pd.isna(cpi["value"].iloc[1])

    def test_failed_status(self, settings, make_client):
        payload = {"status": "REQUEST_NOT_PROCESSED", "message": ["daily threshold reached"]}
        client, _ = make_client(lambda request: httpx.Response(200, json=payload))

        with pytest.raises(RemoteServiceError, match="daily threshold"):
            BlsFetcher(settings, client=client).fetch_raw(["LNS14000000"], 2024, 2024)

    def test_unexpected_layout(self):
        with pytest.raises(RemoteServiceError):
            BlsFetcher.parse_observations({"status": "REQUEST_SUCCEEDED", "Results": {}})

    def test_no_monthly_rows(self):
        df = BlsFetcher.parse_observations({"Results": {"series": []}})

        assert df.empty


class TestBeaFetcher:

    def test_missing_key(self, tmp_path):
        with pytest.raises(ConfigurationError, match="BEA_API_KEY"):
            BeaFetcher(Settings(bea_api_key="", cache_dir=tmp_path))

    def test_query_and_results(self, settings, make_client):
        payload = {
            "BEAAPI": {
                "Request": {},
                "Results": {"Dataset": [{"DatasetName": "NIPA", "DatasetDescription": "Standard NIPA tables"}]},
            }
        }
        client, transport = make_client(lambda request: httpx.Response(200, json=payload))

        datasets = BeaFetcher(settings, client=client).dataset_list()

        params = transport.requests[0].url.params
        assert params["UserID"] == "bea-test-key"
        assert params["method"] == "GETDATASETLIST"
        assert params["ResultFormat"] == "JSON"
        assert datasets[0]["DatasetName"] == "NIPA"

    @pytest.mark.parametrize(
        "payload",
        [
            {"BEAAPI": {"Error": {"APIErrorCode": "3", "APIErrorDescription": "Invalid API UserId"}}},
            {"BEAAPI": {"Results": {"Error": {"APIErrorDescription": "Invalid TableName"}}}},
            {"unexpected": True},
        ],
        ids=["top-level-error", "results-error", "no-beaapi"],
    )
    def test_errors(self, settings, make_client, payload):
        client, _ = make_client(lambda request: httpx.Response(200, json=payload))

        with pytest.raises(RemoteServiceError):
            BeaFetcher(settings, client=client).get({"method": "GetData"})
