"""
Object store providers used by the S3 client.

A provider performs exactly one blocking call per method. ``Boto3Provider``
talks to S3 (or any S3-compatible endpoint); ``InMemoryProvider`` keeps
buckets in a dict and is meant for tests and local runs.
"""

import io
import logging
import threading
from typing import Any, BinaryIO, Dict, List, Optional, Protocol, Sequence

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from s3utils.config.settings import Settings
from s3utils.storage.errors import ConfigError

logger = logging.getLogger(__name__)

# S3 returns at most this many keys from a single ListObjectsV2 call
LIST_PAGE_SIZE = 1000


class ObjectStoreProvider(Protocol):
    """Operations the S3 client needs from an object store"""

    def create_bucket(self, bucket: str, region: str) -> None: ...

    def put_object(self, bucket: str, key: str, body: BinaryIO) -> None: ...

    def get_object(self, bucket: str, key: str) -> BinaryIO: ...

    def list_objects(self, bucket: str, prefix: str) -> List[str]: ...

    def delete_object(self, bucket: str, key: str) -> None: ...

    def delete_objects(self, bucket: str, keys: Sequence[str], quiet: bool) -> List[Dict[str, str]]: ...


class Boto3Provider:
    """Provider backed by a boto3 S3 client"""

    def __init__(self, s3_client: Any):
        self.s3_client = s3_client

    @classmethod
    def from_settings(cls, settings: Settings, region: Optional[str] = None) -> "Boto3Provider":
        """
        Build a boto3 client from settings and the default credential chain

        Raises:
            ConfigError: If no credentials resolve or boto3 rejects the configuration
        """
        try:
            session = boto3.session.Session(**settings.get_boto3_session_kwargs())
            credentials = session.get_credentials()
            if credentials is None:
                raise ConfigError("unable to load SDK config", ValueError("no AWS credentials found"))
            s3_client = session.client('s3', **settings.get_client_kwargs(region))
        except ConfigError:
            logger.error("AWS credentials not found")
            raise
        except (BotoCoreError, ValueError) as e:
            logger.error(f"Failed to initialize S3 client: {e}")
            raise ConfigError("unable to load SDK config", e) from e

        return cls(s3_client)

    def create_bucket(self, bucket: str, region: str) -> None:
        params: Dict[str, Any] = {'Bucket': bucket}
        # us-east-1 is the default location and S3 rejects it as an explicit constraint
        if region and region != 'us-east-1':
            params['CreateBucketConfiguration'] = {'LocationConstraint': region}
        self.s3_client.create_bucket(**params)

    def put_object(self, bucket: str, key: str, body: BinaryIO) -> None:
        self.s3_client.put_object(Bucket=bucket, Key=key, Body=body)

    def get_object(self, bucket: str, key: str) -> BinaryIO:
        response = self.s3_client.get_object(Bucket=bucket, Key=key)
        return response['Body']

    def list_objects(self, bucket: str, prefix: str) -> List[str]:
        response = self.s3_client.list_objects_v2(Bucket=bucket, Prefix=prefix)
        return [obj['Key'] for obj in response.get('Contents', [])]

    def delete_object(self, bucket: str, key: str) -> None:
        self.s3_client.delete_object(Bucket=bucket, Key=key)

    def delete_objects(self, bucket: str, keys: Sequence[str], quiet: bool) -> List[Dict[str, str]]:
        response = self.s3_client.delete_objects(
            Bucket=bucket,
            Delete={
                'Objects': [{'Key': key} for key in keys],
                'Quiet': quiet
            }
        )
        return response.get('Errors', [])


def _client_error(code: str, message: str, operation: str) -> ClientError:
    return ClientError({'Error': {'Code': code, 'Message': message}}, operation)


class InMemoryProvider:
    """Dict-backed object store with S3-style errors and single-page listings"""

    def __init__(self, page_size: int = LIST_PAGE_SIZE):
        self.page_size = page_size
        self.buckets: Dict[str, Dict[str, bytes]] = {}
        self.regions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def _bucket(self, bucket: str, operation: str) -> Dict[str, bytes]:
        if bucket not in self.buckets:
            raise _client_error('NoSuchBucket', 'The specified bucket does not exist', operation)
        return self.buckets[bucket]

    def create_bucket(self, bucket: str, region: str) -> None:
        with self._lock:
            if bucket in self.buckets:
                raise _client_error(
                    'BucketAlreadyOwnedByYou',
                    'Your previous request to create the named bucket succeeded',
                    'CreateBucket'
                )
            self.buckets[bucket] = {}
            self.regions[bucket] = region

    def put_object(self, bucket: str, key: str, body: BinaryIO) -> None:
        with self._lock:
            self._bucket(bucket, 'PutObject')[key] = body.read()

    def get_object(self, bucket: str, key: str) -> BinaryIO:
        with self._lock:
            objects = self._bucket(bucket, 'GetObject')
            if key not in objects:
                raise _client_error('NoSuchKey', 'The specified key does not exist.', 'GetObject')
            return io.BytesIO(objects[key])

    def list_objects(self, bucket: str, prefix: str) -> List[str]:
        with self._lock:
            keys = sorted(k for k in self._bucket(bucket, 'ListObjectsV2') if k.startswith(prefix))
        return keys[:self.page_size]

    def delete_object(self, bucket: str, key: str) -> None:
        with self._lock:
            self._bucket(bucket, 'DeleteObject').pop(key, None)

    def delete_objects(self, bucket: str, keys: Sequence[str], quiet: bool) -> List[Dict[str, str]]:
        with self._lock:
            objects = self._bucket(bucket, 'DeleteObjects')
            for key in keys:
                objects.pop(key, None)
        return []
