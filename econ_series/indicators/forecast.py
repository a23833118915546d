"""
Next-quarter forecast bands for a single series.

The series is averaged to monthly values and handed to statsforecast's
AutoARIMA; model selection is entirely up to that library. The result is a
point forecast plus lower/upper bands for each requested confidence level.
"""

import logging
from collections.abc import Sequence

import pandas as pd


logger = logging.getLogger(__name__)

MIN_MONTHS = 3
SEASON_LENGTH = 12


def to_monthly(df: pd.DataFrame) -> pd.Series:
    """Month-start averages of ``value``; months with no data are dropped."""
    clean = df.dropna(subset=["date", "value"])
    monthly = (
        clean.set_index(pd.DatetimeIndex(clean["date"]))["value"]
        .sort_index()
        .resample("MS")
        .mean()
        .dropna()
    )
    monthly.index.name = "date"
    return monthly


def forecast_next_quarter(
    df: pd.DataFrame,
    horizon: int = 3,
    levels: Sequence[int] = (80, 95),
) -> pd.DataFrame:
    """
    Forecast the next ``horizon`` months of one series.

    Args:
        df: Frame with date and value columns for a single series
        horizon: Number of months ahead
        levels: Confidence levels for the bands, in percent

    Returns:
        DataFrame with date, mean and lo{L}/hi{L} columns per level
    """
    from statsforecast import StatsForecast
    from statsforecast.models import AutoARIMA

    monthly = to_monthly(df)
    if len(monthly) < MIN_MONTHS:
        raise ValueError(
            f"Need at least {MIN_MONTHS} months of data to forecast, got {len(monthly)}"
        )

    levels = sorted(int(level) for level in levels)
    train = pd.DataFrame({
        "unique_id": "series",
        "ds": monthly.index,
        "y": monthly.to_numpy(dtype="float64"),
    })

    logger.info(f"Fitting AutoARIMA on {len(train)} monthly points, h={horizon}")
    sf = StatsForecast(models=[AutoARIMA(season_length=SEASON_LENGTH)], freq="MS")
    fc = sf.forecast(df=train, h=horizon, level=levels)
    if "ds" not in fc.columns:
        # Older statsforecast releases return unique_id as the index
        fc = fc.reset_index()

    future_dates = pd.date_range(
        monthly.index.max() + pd.offsets.MonthBegin(1), periods=horizon, freq="MS"
    )

    result = pd.DataFrame({"date": future_dates, "mean": fc["AutoARIMA"].to_numpy()})
    for level in levels:
        result[f"lo{level}"] = fc[f"AutoARIMA-lo-{level}"].to_numpy()
        result[f"hi{level}"] = fc[f"AutoARIMA-hi-{level}"].to_numpy()
    return result
