"""
s3utils - S3 helpers for date-partitioned object layouts
"""

from .storage import (
    S3Client, InMemoryProvider, ConfigError, ValidationError, ProviderError,
    build_base_key, build_dated_key, build_dated_folder_prefix
)

__version__ = "0.1.0"

__all__ = [
    'S3Client',
    'InMemoryProvider',
    'ConfigError',
    'ValidationError',
    'ProviderError',
    'build_base_key',
    'build_dated_key',
    'build_dated_folder_prefix'
]
