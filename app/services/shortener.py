from typing import Optional
import logging

from app.core.config import settings
from app.core.exceptions import AliasExistsError
from app.db.repository import URLStorage
from app.utils.alias import new_random_string

logger = logging.getLogger(__name__)


class URLService:

    @staticmethod
    def create_short_url(storage: URLStorage, original_url: str, custom_alias: Optional[str]) -> tuple[int, str]:
        """
        Save ``original_url`` under ``custom_alias``, or under a generated alias when none is given.

        A caller-chosen alias is tried once. Generated aliases are retried on
        collision up to ALIAS_MAX_ATTEMPTS times before AliasExistsError is raised.
        Returns (id, alias).
        """
        if custom_alias:
            return storage.save_url(original_url, custom_alias), custom_alias

        max_attempts = max(settings.ALIAS_MAX_ATTEMPTS, 1)
        for attempt in range(1, max_attempts + 1):
            alias = new_random_string(settings.ALIAS_LENGTH)
            try:
                return storage.save_url(original_url, alias), alias
            except AliasExistsError:
                if attempt == max_attempts:
                    raise
                logger.info(f"Generated alias collision on attempt {attempt}/{max_attempts}")
