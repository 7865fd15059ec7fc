"""
Base storage service interface and exceptions.

A storage backend keeps whole documents as opaque bytes, one per key. The
planner stores a single document, its saved profile, so backends only need
to replace, read, test for and forget a key.
"""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Base exception for storage-related errors."""


class StorageNotFoundError(StorageError):
    """Raised when a requested key holds no document."""


class StoragePermissionError(StorageError):
    """Raised when the backend refuses access to a document."""


class StorageService(ABC):
    """Abstract base class for keyed document backends."""

    @abstractmethod
    def write(self, key: str, content: bytes) -> None:
        """
        Store a document under ``key``, replacing any previous one.

        Raises:
            StorageError: If the document cannot be written
        """

    @abstractmethod
    def read(self, key: str) -> bytes:
        """
        Read the document stored under ``key``.

        Raises:
            StorageNotFoundError: If nothing is stored under the key
            StorageError: If the document cannot be read
        """

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Whether a document is stored under ``key``."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Forget the document stored under ``key``.

        Returns:
            bool: True if a document was removed, False if there was none
        """
