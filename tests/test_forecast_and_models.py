"""Forecast helper and observation records."""

from datetime import date

import numpy as np
import pandas as pd
import pytest

from econ_series.indicators.forecast import forecast_next_quarter, to_monthly
from econ_series.models import Observation, frame_to_observations, observations_to_frame


@pytest.fixture
def daily_rates():
    """Four years of business-day rates with a gentle trend and noise"""
    rng = np.random.default_rng(123)
    dates = pd.bdate_range("2020-01-01", "2023-12-29")
    values = 1.5 + np.linspace(0, 3.5, len(dates)) + rng.normal(0, 0.05, len(dates))
    return pd.DataFrame({"series_id": "DGS10", "date": dates, "value": values})


class TestToMonthly:

    def test_month_start_means(self):
        df = pd.DataFrame({
            "date": pd.to_datetime(["2020-01-02", "2020-01-31", "2020-03-15"]),
            "value": [1.0, 3.0, 5.0],
        })

        monthly = to_monthly(df)

        # February has no data and is dropped
        assert monthly.index.tolist() == [pd.Timestamp("2020-01-01"), pd.Timestamp("2020-03-01")]
        assert monthly.tolist() == [2.0, 5.0]


class TestForecastNextQuarter:

    def test_band_layout(self, daily_rates):
        fc = forecast_next_quarter(daily_rates)

        assert list(fc.columns) == ["date", "mean", "lo80", "hi80", "lo95", "hi95"]
        assert fc["date"].tolist() == [
            pd.Timestamp("2024-01-01"),
            pd.Timestamp("2024-02-01"),
            pd.Timestamp("2024-03-01"),
        ]
        assert (fc["lo95"] <= fc["lo80"]).all()
        assert (fc["lo80"] <= fc["mean"]).all()
        assert (fc["mean"] <= fc["hi80"]).all()
        assert (fc["hi80"] <= fc["hi95"]).all()

    def test_custom_horizon_and_level(self, daily_rates):
        fc = forecast_next_quarter(daily_rates, horizon=2, levels=[90])

        assert len(fc) == 2
        assert list(fc.columns) == ["date", "mean", "lo90", "hi90"]

    def test_too_short(self):
        df = pd.DataFrame({"date": pd.to_datetime(["2020-01-02", "2020-02-03"]), "value": [1.0, 1.1]})

        with pytest.raises(ValueError, match="at least"):
            forecast_next_quarter(df)


class TestObservation:

    def test_frame_round_trip(self):
        observations = [
            Observation("DFF", date(2020, 1, 2), 1.55),
            Observation("DFF", date(2020, 1, 3), None),
        ]

        df = observations_to_frame(observations)

        assert df["value"].isna().tolist() == [False, True]
        assert frame_to_observations(df) == observations

    def test_immutable(self):
        obs = Observation("DFF", date(2020, 1, 2), 1.55)

        with pytest.raises(AttributeError):
            obs.value = 2.0

    def test_empty_frame(self):
        df = observations_to_frame([])

        assert df.empty
        assert list(df.columns) == ["series_id", "date", "value"]
