"""
Database initialization script

Creates the users indexes the gateway relies on (unique telegramId,
createdAt for the admin listing). Safe to run repeatedly:
    python scripts/init_db.py
"""

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from app.core.logging import setup_logging, get_logger
from app.db.mongo import connect_to_mongo, close_mongo_connection, get_users_collection
from app.db.indexes import create_indexes

setup_logging()
logger = get_logger(__name__)


async def main():
    await connect_to_mongo()
    try:
        await create_indexes()

        users = get_users_collection()
        indexes = await users.index_information()
        for name, spec in indexes.items():
            logger.info(f"  {name}: {spec.get('key')} unique={spec.get('unique', False)}")

        admins = await users.count_documents({"isAdmin": True})
        total = await users.count_documents({})
        logger.info(f"📊 users={total} admins={admins}")
    finally:
        await close_mongo_connection()


if __name__ == "__main__":
    asyncio.run(main())
