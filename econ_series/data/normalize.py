"""Cleaning of raw observation frames."""

from collections.abc import Mapping

import pandas as pd

from econ_series.config import SERIES_LABELS


def clean_rates(df: pd.DataFrame, catalog: Mapping[str, str] = SERIES_LABELS) -> pd.DataFrame:
    """
    Filter, sort and label a raw observation frame.

    Rows missing a date or value are dropped, then rows are stable-sorted by
    date and repeated (series_id, date) pairs collapse to their first
    occurrence. Each row gets a ``label`` from ``catalog``, falling back to
    the series ID. The input frame is not modified.
    """
    out = df.dropna(subset=["date", "value"])
    out = out.sort_values("date", kind="mergesort")
    out = out.drop_duplicates(subset=["series_id", "date"], keep="first")
    out = out.reset_index(drop=True)
    out["label"] = [catalog.get(sid, sid) for sid in out["series_id"]]
    return out
