"""Data models for series observations.

The package passes observation frames between modules; ``Observation`` is the
record-level view handed to callers that want one typed row at a time (the
CLI uses it for the latest value of each series).
"""

import math
from dataclasses import dataclass
from datetime import date

import pandas as pd


# Column layout shared by fetchers, the cache and the normalizer
OBSERVATION_COLUMNS: list[str] = ["series_id", "date", "value"]


@dataclass(frozen=True)
class Observation:
    """Single observation of one series. ``value`` is None when missing."""

    series_id: str
    date: date
    value: float | None

    @classmethod
    def from_row(cls, row: dict) -> "Observation":
        value = row["value"]
        if value is None or (isinstance(value, float) and math.isnan(value)):
            value = None
        obs_date = pd.Timestamp(row["date"]).date()
        return cls(series_id=str(row["series_id"]), date=obs_date, value=value)

    def to_row(self) -> dict:
        return {
            "series_id": self.series_id,
            "date": pd.Timestamp(self.date),
            "value": math.nan if self.value is None else float(self.value),
        }


def empty_observations() -> pd.DataFrame:
    """Empty observation frame with the standard dtypes."""
    return pd.DataFrame({
        "series_id": pd.Series(dtype=object),
        "date": pd.Series(dtype="datetime64[ns]"),
        "value": pd.Series(dtype="float64"),
    })


def observations_to_frame(observations: list[Observation]) -> pd.DataFrame:
    """Build an observation frame from Observation records."""
    if not observations:
        return empty_observations()
    df = pd.DataFrame([obs.to_row() for obs in observations], columns=OBSERVATION_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    df["value"] = df["value"].astype("float64")
    return df


def frame_to_observations(df: pd.DataFrame) -> list[Observation]:
    """Inverse of :func:`observations_to_frame`. Rows with no date are skipped."""
    return [
        Observation.from_row(row)
        for row in df[OBSERVATION_COLUMNS].to_dict("records")
        if pd.notna(row["date"])
    ]
