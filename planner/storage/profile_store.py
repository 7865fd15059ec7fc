"""
Persistence of the planner's working profile under a single storage key.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from planner.models.profile import Profile

from .base import StorageService

logger = logging.getLogger(__name__)


class ProfileStore:
    """Saves, loads and clears one serialized profile."""

    def __init__(self, storage: StorageService, key: str = "financial-planner-state"):
        self.storage = storage
        self.key = key

    def save(self, profile: Profile) -> None:
        """
        Serialize and store a profile, replacing any previous one.

        Raises:
            StorageError: If the profile cannot be written
        """
        content = profile.model_dump_json(by_alias=True, exclude_none=True)
        self.storage.write(self.key, content.encode("utf-8"))
        logger.info(f"Saved planner state under {self.key!r}")

    def load(self) -> Optional[Profile]:
        """
        Load the stored profile.

        Returns:
            The stored profile, or None when nothing is stored or the stored
            state can no longer be parsed
        """
        if not self.storage.exists(self.key):
            return None

        content = self.storage.read(self.key)
        try:
            return Profile.model_validate_json(content)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable planner state {self.key!r}: {e}")
            return None

    def clear(self) -> bool:
        """Remove the stored profile. Returns False if nothing was stored."""
        deleted = self.storage.delete(self.key)
        if deleted:
            logger.info(f"Cleared planner state {self.key!r}")
        return deleted
