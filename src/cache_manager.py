"""Parquet snapshot cache with age-based invalidation for backend tables."""

import time
from pathlib import Path

import polars as pl


def is_snapshot_fresh(cache_path: Path, max_age: float, now: float | None = None) -> bool:
    """Check if a snapshot exists and was written less than max_age seconds ago."""
    if not cache_path.exists():
        return False
    if now is None:
        now = time.time()
    return now - cache_path.stat().st_mtime < max_age


def read_parquet(cache_path: Path) -> pl.DataFrame:
    """Read a Polars DataFrame from parquet."""
    return pl.read_parquet(cache_path)


def write_parquet(df: pl.DataFrame, cache_path: Path) -> None:
    """Write a Polars DataFrame to parquet."""
    cache_path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(cache_path)


def cached_snapshot(cache_path: Path, max_age: float, builder_fn) -> pl.DataFrame:
    """Return a fresh cached DataFrame or build it using builder_fn, then cache.

    Empty frames are returned but not written, so a transient empty response
    does not pin the cache.
    """
    if is_snapshot_fresh(cache_path, max_age):
        return read_parquet(cache_path)
    df = builder_fn()
    if len(df) > 0:
        write_parquet(df, cache_path)
    return df


def clear_snapshots(cache_dir: Path) -> int:
    """Delete every parquet snapshot in cache_dir. Returns the number removed."""
    removed = 0
    for path in cache_dir.glob("*.parquet"):
        path.unlink()
        removed += 1
    return removed
