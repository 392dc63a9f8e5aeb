"""
app/db/indexes.py

Purpose: Database index management

- Unique index on users.telegramId (one record per Telegram account)
- Descending index on users.createdAt for the admin listing sort
"""

from pymongo import ASCENDING, DESCENDING

from app.db.mongo import get_users_collection
from app.core.logging import get_logger

logger = get_logger(__name__)


async def create_indexes(users=None):
    """
    Creates all necessary database indexes.
    This function is idempotent - safe to run multiple times.
    """
    try:
        if users is None:
            users = get_users_collection()

        logger.info("Creating database indexes...")

        await users.create_index(
            [("telegramId", ASCENDING)],
            unique=True,
            name="telegram_id_unique"
        )
        logger.debug("Created unique index on users.telegramId")

        await users.create_index(
            [("createdAt", DESCENDING)],
            name="created_at_desc_idx"
        )
        logger.debug("Created index on users.createdAt")

        user_indexes = await users.index_information()
        logger.info(f"✅ Database indexes ready: users={len(user_indexes)}")

    except Exception as e:
        logger.error(f"Failed to create indexes: {str(e)}", exc_info=True)
        raise
