"""Tests for cache_manager module."""

import time

import polars as pl

from src.cache_manager import clear_snapshots, cached_snapshot, is_snapshot_fresh, write_parquet


def test_missing_snapshot_is_stale(tmp_path):
    assert not is_snapshot_fresh(tmp_path / "none.parquet", 900)


def test_fresh_then_stale(tmp_path):
    path = tmp_path / "t.parquet"
    write_parquet(pl.DataFrame({"a": [1]}), path)
    assert is_snapshot_fresh(path, 900)
    assert not is_snapshot_fresh(path, 900, now=time.time() + 1000)


def test_cached_snapshot_builds_once(tmp_path):
    path = tmp_path / "t.parquet"
    built = []

    def builder():
        built.append(1)
        return pl.DataFrame({"a": [1, 2]})

    first = cached_snapshot(path, 900, builder)
    second = cached_snapshot(path, 900, builder)
    assert len(built) == 1
    assert first.equals(second)


def test_empty_frame_not_cached(tmp_path):
    path = tmp_path / "t.parquet"
    df = cached_snapshot(path, 900, lambda: pl.DataFrame())
    assert df.height == 0
    assert not path.exists()


def test_clear_snapshots(tmp_path):
    write_parquet(pl.DataFrame({"a": [1]}), tmp_path / "a.parquet")
    write_parquet(pl.DataFrame({"a": [1]}), tmp_path / "b.parquet")
    (tmp_path / "keep.txt").write_text("x")
    assert clear_snapshots(tmp_path) == 2
    assert (tmp_path / "keep.txt").exists()
