"""Fed funds and Treasury rates bundle: cache, fetch and clean."""

import logging
from datetime import date

import httpx
import pandas as pd

from econ_series.config import RATES_BUNDLE, RATES_BUNDLE_NAME, Settings
from econ_series.data.cache import CacheHit, SnapshotCache
from econ_series.data.fred_fetcher import FredFetcher
from econ_series.data.normalize import clean_rates


logger = logging.getLogger(__name__)


def get_rates_bundle(
    observation_start: str | date = "1990-01-01",
    use_cache: bool = True,
    cache: bool = True,
    *,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> pd.DataFrame:
    """
    Get the DFF / DGS2 / DGS10 bundle as a cleaned, labelled frame.

    Args:
        observation_start: Earliest date requested on a fresh fetch
        use_cache: Return the stored snapshot when one exists
        cache: Persist a freshly fetched bundle
        settings: Configuration; defaults to the environment
        client: Optional httpx client for the FRED requests

    A cache hit needs no credential and makes no request.
    """
    settings = settings or Settings()
    snapshots = SnapshotCache(settings.cache_dir)

    state = snapshots.lookup(RATES_BUNDLE_NAME, enabled=use_cache)
    if isinstance(state, CacheHit):
        raw = state.data
    else:
        with FredFetcher(settings, client=client) as fetcher:
            raw = fetcher.fetch_bundle(RATES_BUNDLE, observation_start)
        snapshots.write(RATES_BUNDLE_NAME, raw, enabled=cache)

    return clean_rates(raw, settings.catalog)


def main(argv: list[str] | None = None, settings: Settings | None = None) -> None:
    """CLI entry point for the rates bundle."""
    import argparse
    import sys

    from econ_series.errors import (
        CacheCorruptionError,
        ConfigurationError,
        RemoteServiceError,
    )
    from econ_series.models import frame_to_observations

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Fetch FRED rates bundle")
    parser.add_argument(
        "--start",
        type=str,
        default="1990-01-01",
        help="Earliest observation date (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Ignore any cached snapshot and fetch again",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Do not write the fetched bundle to the cache",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show cache status and exit",
    )
    parser.add_argument(
        "--forecast",
        type=str,
        metavar="SERIES_ID",
        help="Print a three-month forecast for one series in the bundle",
    )
    args = parser.parse_args(argv)

    try:
        settings = settings or Settings()

        if args.status:
            status = SnapshotCache(settings.cache_dir).get_cache_status()
            print("\nCache Status:")
            print("-" * 70)
            if not status:
                print(f"No snapshots in {settings.cache_dir}")
            for bundle, info in status.items():
                if "error" in info:
                    print(f"{bundle:20} | CORRUPT | {info['error']}")
                    continue
                last = info["last_date"] or "N/A"
                print(
                    f"{bundle:20} | {info['row_count']:6} rows | Last: {last:10} | "
                    f"{', '.join(info['series'])}"
                )
            return

        rates = get_rates_bundle(
            observation_start=args.start,
            use_cache=not args.refresh,
            cache=not args.no_cache,
            settings=settings,
        )

        print("\nDone. Latest observations:")
        for series_id, group in rates.groupby("series_id", sort=False):
            last = frame_to_observations(group.tail(1))[0]
            print(
                f"  {series_id:6} {settings.label_for(series_id):26} {last.value:6.2f} "
                f"on {last.date:%Y-%m-%d} ({len(group)} obs)"
            )

        if args.forecast:
            from econ_series.indicators.forecast import forecast_next_quarter

            one = rates[rates["series_id"] == args.forecast]
            if one.empty:
                print(f"Unknown series: {args.forecast}")
                print(f"Available: {', '.join(RATES_BUNDLE)}")
                sys.exit(1)
            print(f"\nForecast for {settings.label_for(args.forecast)}:")
            print(forecast_next_quarter(one).to_string(index=False))

    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except RemoteServiceError as e:
        print(f"API error: {e}")
        sys.exit(1)
    except CacheCorruptionError as e:
        print(f"Cache error: {e}")
        print("Delete the snapshot or run with --refresh.")
        sys.exit(1)


if __name__ == "__main__":
    main()
