"""
Key and prefix builders for date-partitioned layouts.
"""
from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from s3utils.storage.keys import (
    build_base_key,
    build_dated_folder_prefix,
    build_dated_key,
    normalize_directory,
)


@pytest.mark.parametrize(
    "directory, filename, expected",
    [
        ("raw/test", "test.json", "raw/test/test.json"),
        ("/raw/test/", "test.json", "raw/test/test.json"),
        ("//raw//", "a/b.csv", "raw/a/b.csv"),
    ],
)
def test_build_base_key(directory, filename, expected):
    assert build_base_key(directory, filename) == expected


@pytest.mark.parametrize(
    "directory, file_path, day, expected",
    [
        ("dir1", "test.txt", date(2022, 1, 1), "dir1/_year=2022/_month=01/_day=01/_date=2022-01-01/test.txt"),
        ("directory", "test.json", date(2024, 9, 30), "directory/_year=2024/_month=09/_day=30/_date=2024-09-30/test.json"),
        (
            "directory/raw",
            "local_dir/test.json",
            date(2024, 9, 30),
            "directory/raw/_year=2024/_month=09/_day=30/_date=2024-09-30/test.json",
        ),
        ("/dir1/", "test.txt", date(2022, 1, 1), "dir1/_year=2022/_month=01/_day=01/_date=2022-01-01/test.txt"),
        (
            "/directory/raw/",
            "local_dir/test.json",
            date(2024, 9, 30),
            "directory/raw/_year=2024/_month=09/_day=30/_date=2024-09-30/test.json",
        ),
    ],
)
def test_build_dated_key(directory, file_path, day, expected):
    assert build_dated_key(directory, file_path, day) == expected


@pytest.mark.parametrize(
    "directory, day, expected",
    [
        ("dir1", date(2022, 1, 1), "dir1/_year=2022/_month=01/_day=01/_date=2022-01-01"),
        ("directory", date(2024, 9, 30), "directory/_year=2024/_month=09/_day=30/_date=2024-09-30"),
        ("/dir1/", date(2022, 1, 1), "dir1/_year=2022/_month=01/_day=01/_date=2022-01-01"),
        ("/directory/", date(2024, 9, 30), "directory/_year=2024/_month=09/_day=30/_date=2024-09-30"),
    ],
)
def test_build_dated_folder_prefix(directory, day, expected):
    assert build_dated_folder_prefix(directory, day) == expected


def test_month_and_day_are_zero_padded():
    key = build_dated_key("x", "f.txt", date(2024, 1, 5))
    assert "/_month=01/" in key
    assert "/_day=05/" in key
    assert "/_date=2024-01-05/" in key


def test_partition_tokens_appear_in_order_after_directory():
    key = build_dated_key("/a/b/", "nested/dir/file.parquet", date(2023, 12, 31))
    assert key.startswith("a/b/_year=2023/")
    positions = [key.index(token) for token in ("_year=", "_month=", "_day=", "_date=")]
    assert positions == sorted(positions)
    assert key.endswith("/file.parquet")


def test_folder_prefix_is_strict_prefix_of_dated_key():
    day = date(2024, 9, 30)
    prefix = build_dated_folder_prefix("exports", day)
    key = build_dated_key("exports", "out/report.csv", day)
    assert key.startswith(prefix + "/")
    assert key != prefix


def test_datetime_uses_its_own_calendar_fields():
    moment = datetime(2024, 2, 29, 23, 59, tzinfo=timezone.utc)
    assert build_dated_folder_prefix("d", moment) == "d/_year=2024/_month=02/_day=29/_date=2024-02-29"


def test_separator_only_directory_yields_leading_slash():
    assert normalize_directory("///") == ""
    assert build_base_key("/", "file.txt") == "/file.txt"
    assert build_dated_folder_prefix("//", date(2022, 1, 1)).startswith("/_year=2022")


def test_file_path_without_separator_is_used_whole():
    assert build_dated_key("d", "plain.txt", date(2022, 1, 1)).endswith("_date=2022-01-01/plain.txt")
