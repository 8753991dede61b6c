"""
Pytest configuration for storage client tests.

Async tests run on the asyncio backend only.
"""
from __future__ import annotations

from typing import Any

import pytest

from s3utils.config.settings import Settings
from s3utils.storage.providers import InMemoryProvider
from s3utils.storage.s3_client import S3Client


class RecordingProvider(InMemoryProvider):
    """In-memory provider that records every call by method name."""

    def __init__(self, page_size: int = 1000):
        super().__init__(page_size=page_size)
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def create_bucket(self, bucket, region):
        self.calls.append(("create_bucket", (bucket, region)))
        return super().create_bucket(bucket, region)

    def put_object(self, bucket, key, body):
        self.calls.append(("put_object", (bucket, key)))
        return super().put_object(bucket, key, body)

    def get_object(self, bucket, key):
        self.calls.append(("get_object", (bucket, key)))
        return super().get_object(bucket, key)

    def list_objects(self, bucket, prefix):
        self.calls.append(("list_objects", (bucket, prefix)))
        return super().list_objects(bucket, prefix)

    def delete_object(self, bucket, key):
        self.calls.append(("delete_object", (bucket, key)))
        return super().delete_object(bucket, key)

    def delete_objects(self, bucket, keys, quiet):
        self.calls.append(("delete_objects", (bucket, tuple(keys), quiet)))
        return super().delete_objects(bucket, keys, quiet)

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "AWS_REGION": "eu-central-1",
        "AWS_ACCESS_KEY_ID": None,
        "AWS_SECRET_ACCESS_KEY": None,
        "AWS_SESSION_TOKEN": None,
        "AWS_PROFILE": None,
        "S3_ENDPOINT_URL": None,
        "S3_DELETE_QUIET": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def provider() -> RecordingProvider:
    store = RecordingProvider()
    store.create_bucket("data-lake", "eu-central-1")
    store.calls.clear()
    return store


@pytest.fixture
def client(provider: RecordingProvider) -> S3Client:
    return S3Client(settings=make_settings(), provider=provider)
