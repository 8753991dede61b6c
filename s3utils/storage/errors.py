"""
Error kinds raised by the storage client
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIG = "config"
    VALIDATION = "validation"
    PROVIDER = "provider"


class StorageError(Exception):
    """Base error: a kind tag, a short message and an optional cause"""

    kind: ErrorKind = ErrorKind.PROVIDER

    def __init__(self, msg: str, err: Optional[BaseException] = None):
        super().__init__(msg)
        self.msg = msg
        self.err = err
        if err is not None:
            self.__cause__ = err

    def unwrap(self) -> Optional[BaseException]:
        return self.err

    def __str__(self) -> str:
        return f"storage error. msg: {self.msg}. err: {self.err}."


class ConfigError(StorageError):
    """Credentials or SDK configuration could not be loaded"""

    kind = ErrorKind.CONFIG

    def __str__(self) -> str:
        return f"sdk error. msg: {self.msg}. err: {self.err}."


class ValidationError(StorageError):
    """A required argument was empty or structurally invalid"""

    kind = ErrorKind.VALIDATION

    def __init__(self, msg: str):
        super().__init__(msg)

    def __str__(self) -> str:
        return f"validation error: {self.msg}"


class ProviderError(StorageError):
    """
    Wraps a failed S3 call or a failed local file operation.

    ``source`` is ``"s3"`` for remote faults and ``"sdk"`` for local I/O.
    """

    kind = ErrorKind.PROVIDER

    def __init__(self, msg: str, err: Optional[BaseException] = None, source: str = "s3"):
        super().__init__(msg, err)
        self.source = source

    @classmethod
    def local(cls, msg: str, err: Optional[BaseException] = None) -> "ProviderError":
        return cls(msg, err, source="sdk")

    def __str__(self) -> str:
        if self.source == "sdk":
            return f"sdk error. msg: {self.msg}. err: {self.err}."
        return f"S3 error. msg: {self.msg}. err: {self.err}."
