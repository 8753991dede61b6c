"""
Cloud storage client, key builders and error kinds
"""

from .errors import ErrorKind, StorageError, ConfigError, ValidationError, ProviderError
from .keys import normalize_directory, build_base_key, build_dated_key, build_dated_folder_prefix
from .providers import ObjectStoreProvider, Boto3Provider, InMemoryProvider
from .s3_client import S3Client

__all__ = [
    'S3Client',
    'ObjectStoreProvider',
    'Boto3Provider',
    'InMemoryProvider',
    'ErrorKind',
    'StorageError',
    'ConfigError',
    'ValidationError',
    'ProviderError',
    'normalize_directory',
    'build_base_key',
    'build_dated_key',
    'build_dated_folder_prefix'
]
