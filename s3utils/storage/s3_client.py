"""
AWS S3 client for uploads, downloads and prefix-scoped deletes
"""

import asyncio
import functools
import logging
import os
from datetime import date
from pathlib import Path
from typing import Any, BinaryIO, Callable, List, Optional, Union

import aiofiles

from s3utils.config.settings import Settings, settings as default_settings
from s3utils.storage.errors import ProviderError, StorageError, ValidationError
from s3utils.storage.keys import build_base_key, build_dated_folder_prefix, build_dated_key
from s3utils.storage.providers import Boto3Provider, ObjectStoreProvider
from s3utils.utils.validators import require_date, require_value, to_path_str

logger = logging.getLogger(__name__)


class S3Client:
    """AWS S3 client for file operations"""

    def __init__(
        self,
        region: Optional[str] = None,
        settings: Optional[Settings] = None,
        provider: Optional[ObjectStoreProvider] = None
    ):
        """
        Args:
            region: Region for bucket creation and the boto3 client
            settings: Settings instance, defaults to the global one
            provider: Object store to use instead of a boto3 client

        Raises:
            ConfigError: If no provider is given and boto3 cannot be configured
        """
        self.settings = settings or default_settings
        self.region = region or self.settings.AWS_REGION
        self.provider = provider or Boto3Provider.from_settings(self.settings, self.region)

        logger.info(f"S3 client initialized for region {self.region}")

    async def _run(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run a blocking provider call in the default executor"""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args))

    async def _call(self, message: str, func: Callable[..., Any], *args: Any) -> Any:
        """Run a provider call and wrap its failure as ProviderError"""
        try:
            return await self._run(func, *args)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"{message}: {e}")
            raise ProviderError(message, e) from e

    def _open_local_file(self, file_path: str) -> BinaryIO:
        """Open a non-empty local file for upload; the caller closes it"""
        try:
            f = open(file_path, 'rb')
        except OSError as e:
            logger.error(f"unable to open file {file_path}: {e}")
            raise ProviderError.local("unable to open file", e) from e

        try:
            size = os.fstat(f.fileno()).st_size
        except OSError as e:
            f.close()
            logger.error(f"unable to get file info {file_path}: {e}")
            raise ProviderError.local("unable to get file info", e) from e

        if size == 0:
            f.close()
            raise ValidationError("file is empty")

        return f

    async def _upload(self, bucket_name: str, object_key: str, file_path: str) -> str:
        body = await self._run(self._open_local_file, file_path)
        try:
            await self._call("unable to upload file", self.provider.put_object, bucket_name, object_key, body)
        finally:
            body.close()

        logger.debug(f"File uploaded: s3://{bucket_name}/{object_key}")
        return object_key

    async def upload_file_base(
        self,
        bucket_name: str,
        directory: str,
        file_path: Union[str, Path],
        external_filename: str
    ) -> str:
        """
        Upload a local file as ``<directory>/<external_filename>``

        Args:
            bucket_name: Target bucket
            directory: Destination directory, leading/trailing slashes ignored
            file_path: Local file to upload
            external_filename: Object name under the directory, used verbatim

        Returns:
            Object key the file was stored under
        """
        require_value(bucket_name, "bucket name is empty")
        require_value(directory, "directory is empty")
        require_value(file_path, "file path is empty")
        require_value(external_filename, "external filename is empty")

        object_key = build_base_key(directory, external_filename)
        return await self._upload(bucket_name, object_key, to_path_str(file_path))

    async def upload_file_with_date_destination(
        self,
        bucket_name: str,
        directory: str,
        file_path: Union[str, Path],
        partition_date: date
    ) -> str:
        """
        Upload a local file under the date partition of ``directory``

        The object name is the last segment of ``file_path``.

        Returns:
            Object key the file was stored under
        """
        require_value(bucket_name, "bucket name is empty")
        require_value(directory, "directory is empty")
        require_value(file_path, "file path is empty")
        require_date(partition_date)

        path = to_path_str(file_path)
        object_key = build_dated_key(directory, path, partition_date)
        return await self._upload(bucket_name, object_key, path)

    async def _delete_prefix(self, bucket_name: str, prefix: str, quiet: Optional[bool]) -> List[str]:
        """List one page of keys under ``prefix`` and delete them in a single batch"""
        keys = await self._call("unable to list objects", self.provider.list_objects, bucket_name, prefix)

        if not keys:
            logger.debug(f"Nothing to delete under s3://{bucket_name}/{prefix}")
            return []

        if quiet is None:
            quiet = self.settings.S3_DELETE_QUIET

        errors = await self._call(
            "unable to delete objects",
            self.provider.delete_objects,
            bucket_name,
            keys,
            quiet
        )
        if errors:
            failed = ", ".join(f"{e.get('Key')} ({e.get('Code')})" for e in errors)
            logger.error(f"unable to delete objects: {failed}")
            raise ProviderError("unable to delete objects", RuntimeError(f"failed keys: {failed}"))

        logger.debug(f"Deleted {len(keys)} objects under s3://{bucket_name}/{prefix}")
        return keys

    async def delete_folder_by_date(
        self,
        bucket_name: str,
        directory: str,
        partition_date: date,
        quiet: Optional[bool] = None
    ) -> List[str]:
        """
        Delete objects stored under the date partition of ``directory``

        Only a single listing page is deleted, so partitions larger than one
        page need repeated calls.

        Args:
            quiet: Quiet flag for the batch delete, defaults to settings.S3_DELETE_QUIET

        Returns:
            Keys that were deleted, empty if nothing matched
        """
        require_value(bucket_name, "bucket name is empty")
        require_value(directory, "directory is empty")
        require_date(partition_date)

        prefix = build_dated_folder_prefix(directory, partition_date)
        return await self._delete_prefix(bucket_name, prefix, quiet)

    async def delete_folder(
        self,
        bucket_name: str,
        directory: str,
        quiet: Optional[bool] = None
    ) -> List[str]:
        """Delete objects whose key starts with ``directory`` as given"""
        require_value(bucket_name, "bucket name is empty")
        require_value(directory, "directory is empty")

        return await self._delete_prefix(bucket_name, directory, quiet)

    async def delete_object(self, bucket_name: str, key: str) -> None:
        require_value(bucket_name, "bucket name is empty")
        require_value(key, "key is empty")

        await self._call("unable to delete object", self.provider.delete_object, bucket_name, key)
        logger.debug(f"Object deleted: s3://{bucket_name}/{key}")

    async def is_object_exists(self, bucket_name: str, key: str) -> bool:
        """
        Check whether any object key starts with ``key``

        This is a prefix check: ``raw/a`` reports True when only ``raw/a.json`` exists.
        """
        require_value(bucket_name, "bucket name is empty")
        require_value(key, "key is empty")

        key = key.strip("/")
        keys = await self._call("unable to list objects", self.provider.list_objects, bucket_name, key)
        return len(keys) > 0

    async def get_object(self, bucket_name: str, key: str, local_path: Union[str, Path]) -> None:
        """
        Download an object to ``local_path``, creating or truncating the file
        """
        require_value(bucket_name, "bucket name is empty")
        require_value(key, "key is empty")
        require_value(local_path, "local path is empty")

        key = key.strip("/")
        body = await self._call("unable to get object", self.provider.get_object, bucket_name, key)

        try:
            try:
                f = await aiofiles.open(to_path_str(local_path), 'wb')
            except OSError as e:
                raise ProviderError.local("unable to create file", e) from e

            try:
                try:
                    data = await self._run(body.read)
                except Exception as e:
                    raise ProviderError.local("unable to read S3 response body", e) from e

                try:
                    await f.write(data)
                except OSError as e:
                    raise ProviderError.local("unable to write file", e) from e
            finally:
                await f.close()
        except ProviderError as e:
            logger.error(f"Download of s3://{bucket_name}/{key} failed: {e}")
            raise
        finally:
            close = getattr(body, 'close', None)
            if close is not None:
                close()

        logger.debug(f"File downloaded: s3://{bucket_name}/{key} -> {local_path}")

    async def create_bucket(self, bucket_name: str) -> None:
        require_value(bucket_name, "bucket name is empty")

        await self._call("unable to create bucket", self.provider.create_bucket, bucket_name, self.region)
        logger.info(f"Bucket created: {bucket_name} ({self.region})")
