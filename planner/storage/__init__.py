"""
Storage module for planner state persistence and share links.
"""

from .base import (
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageService,
)
from .factory import create_storage_service
from .local import LocalStorageService
from .profile_store import ProfileStore
from .share_codec import ShareCodecError, decode_profile, encode_profile

__all__ = [
    "StorageService",
    "StorageError",
    "StorageNotFoundError",
    "StoragePermissionError",
    "LocalStorageService",
    "ProfileStore",
    "ShareCodecError",
    "create_storage_service",
    "decode_profile",
    "encode_profile",
]
