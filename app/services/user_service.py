"""
app/services/user_service.py

Purpose: Read access to user records

- Find a user by Telegram id
- List every user sorted by a field
- Acquires the collection lazily, so nothing touches MongoDB until a query runs
"""

from typing import Optional, List, Dict, Any, Callable

from pymongo import ASCENDING, DESCENDING

from app.db.mongo import get_users_collection
from app.models.user import UserRecord, serialize_document
from app.core.logging import get_logger

logger = get_logger(__name__)


class UserRepository:
    """
    Query interface over the users collection.

    Any object exposing Motor's `find_one` and `find(...).sort(...).to_list(...)`
    can back it, which keeps the storage engine swappable.
    """

    def __init__(self, collection_getter: Callable = get_users_collection):
        self._collection_getter = collection_getter

    @property
    def collection(self):
        return self._collection_getter()

    async def find_by_telegram_id(self, telegram_id: int) -> Optional[UserRecord]:
        """
        Retrieves a user by Telegram id.

        Returns:
            UserRecord or None if not found
        """
        document = await self.collection.find_one({"telegramId": telegram_id})
        if document is None:
            return None
        return UserRecord.model_validate(document)

    async def find_all_sorted(self, field: str = "createdAt", descending: bool = True) -> List[Dict[str, Any]]:
        """
        Retrieves every user, ordered by `field`.

        Returns:
            JSON-safe user documents
        """
        direction = DESCENDING if descending else ASCENDING
        cursor = self.collection.find({}).sort(field, direction)
        documents = await cursor.to_list(length=None)

        logger.debug(f"Loaded {len(documents)} users sorted by {field}")
        return [serialize_document(document) for document in documents]


def get_user_repository() -> UserRepository:
    return UserRepository()
