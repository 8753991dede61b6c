"""
Object key and folder prefix builders for date-partitioned layouts.

Keys look like::

    <directory>/_year=2024/_month=09/_day=30/_date=2024-09-30/<file name>

The directory is stripped of leading and trailing slashes; internal
slashes are kept, so ``directory/raw`` stays multi-segment.
"""

from datetime import date


def normalize_directory(directory: str) -> str:
    return directory.strip("/")


def _partition_path(directory: str, partition_date: date) -> str:
    year = f"{partition_date.year:04d}"
    month = f"{partition_date.month:02d}"
    day = f"{partition_date.day:02d}"
    iso_date = f"{year}-{month}-{day}"
    return f"{normalize_directory(directory)}/_year={year}/_month={month}/_day={day}/_date={iso_date}"


def build_base_key(directory: str, filename: str) -> str:
    """Key for ``filename`` directly under ``directory``; filename is used as-is"""
    return f"{normalize_directory(directory)}/{filename}"


def build_dated_key(directory: str, file_path: str, partition_date: date) -> str:
    """Key for the last segment of ``file_path`` under the date partition of ``directory``"""
    file_name = file_path.split("/")[-1]
    return f"{_partition_path(directory, partition_date)}/{file_name}"


def build_dated_folder_prefix(directory: str, partition_date: date) -> str:
    """Prefix covering every object stored under the date partition"""
    return _partition_path(directory, partition_date)
