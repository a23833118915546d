"""Forecast helpers built on the observation frames."""

from econ_series.indicators.forecast import forecast_next_quarter, to_monthly

__all__ = ["forecast_next_quarter", "to_monthly"]
