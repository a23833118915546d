"""Flat-file CSV snapshots of fetched bundles."""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import pandas as pd

from econ_series.errors import CacheCorruptionError
from econ_series.models import OBSERVATION_COLUMNS


logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class CacheHit:
    """A snapshot was found and parsed."""

    path: Path
    data: pd.DataFrame


@dataclass(frozen=True)
class CacheMiss:
    """No usable snapshot; the caller has to fetch."""

    path: Path
    reason: str


def read_snapshot(path: Path, enabled: bool = True) -> pd.DataFrame | None:
    """
    Read a snapshot written by :func:`write_snapshot`.

    Returns None when reading is disabled or the file does not exist. A file
    that exists but cannot be parsed raises CacheCorruptionError.
    """
    if not enabled:
        return None
    path = Path(path)
    if not path.exists():
        return None

    try:
        df = pd.read_csv(
            path, dtype={"series_id": str, "date": str}, float_precision="round_trip"
        )
    except pd.errors.EmptyDataError as e:
        raise CacheCorruptionError(path, "file is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as e:
        raise CacheCorruptionError(path, str(e)) from e

    missing = [col for col in OBSERVATION_COLUMNS if col not in df.columns]
    if missing:
        raise CacheCorruptionError(path, f"missing columns {missing}")

    try:
        df["date"] = pd.to_datetime(df["date"], format=DATE_FORMAT)
    except (TypeError, ValueError) as e:
        raise CacheCorruptionError(path, f"bad date: {e}") from e
    try:
        df["value"] = pd.to_numeric(df["value"]).astype("float64")
    except (TypeError, ValueError) as e:
        raise CacheCorruptionError(path, f"bad value: {e}") from e

    return df


def write_snapshot(df: pd.DataFrame, path: Path, enabled: bool = True) -> bool:
    """
    Overwrite the snapshot at ``path`` with ``df``.

    Writes to a temp file beside the target and renames it into place, so a
    reader sees either the old or the new snapshot. Returns False when
    writing is disabled.
    """
    if not enabled:
        return False
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    extra = [col for col in df.columns if col not in OBSERVATION_COLUMNS]
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        df[OBSERVATION_COLUMNS + extra].to_csv(tmp, index=False, date_format=DATE_FORMAT)
        os.replace(tmp, path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise

    logger.info(f"Wrote {len(df)} rows to {path}")
    return True


def lookup(path: Path, enabled: bool = True) -> CacheHit | CacheMiss:
    """Decide between a cache hit and a miss for ``path``."""
    path = Path(path)
    if not enabled:
        return CacheMiss(path, "disabled")
    data = read_snapshot(path, enabled=True)
    if data is None:
        return CacheMiss(path, "not found")
    return CacheHit(path, data)


class SnapshotCache:
    """Directory of named bundle snapshots."""

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = Path(cache_dir)

    def path_for(self, bundle: str) -> Path:
        return self.cache_dir / f"{bundle}.csv"

    def lookup(self, bundle: str, enabled: bool = True) -> CacheHit | CacheMiss:
        result = lookup(self.path_for(bundle), enabled)
        if isinstance(result, CacheHit):
            logger.info(f"Cache hit for {bundle}: {len(result.data)} rows")
        else:
            logger.info(f"Cache miss for {bundle} ({result.reason})")
        return result

    def read(self, bundle: str, enabled: bool = True) -> pd.DataFrame | None:
        return read_snapshot(self.path_for(bundle), enabled)

    def write(self, bundle: str, df: pd.DataFrame, enabled: bool = True) -> bool:
        return write_snapshot(df, self.path_for(bundle), enabled)

    def clear(self, bundle: str) -> bool:
        """Delete a bundle's snapshot. Returns True if a file was removed."""
        path = self.path_for(bundle)
        if not path.exists():
            return False
        path.unlink()
        logger.info(f"Removed {path}")
        return True

    def get_cache_status(self) -> dict[str, dict]:
        """Get status of each snapshot in the cache directory.

        A snapshot that cannot be read is reported with an ``error`` entry
        instead of aborting the whole report.
        """
        if not self.cache_dir.is_dir():
            return {}

        status = {}
        for path in sorted(self.cache_dir.glob("*.csv")):
            try:
                df = read_snapshot(path)
            except CacheCorruptionError as e:
                logger.warning(f"Skipping corrupt snapshot {path}: {e.reason}")
                status[path.stem] = {"path": str(path), "error": e.reason}
                continue
            dates = df["date"].dropna()
            status[path.stem] = {
                "path": str(path),
                "row_count": len(df),
                "series": sorted(df["series_id"].dropna().unique().tolist()),
                "first_date": dates.min().strftime(DATE_FORMAT) if not dates.empty else None,
                "last_date": dates.max().strftime(DATE_FORMAT) if not dates.empty else None,
                "written_at": datetime.fromtimestamp(path.stat().st_mtime).isoformat(
                    timespec="seconds"
                ),
            }
        return status
