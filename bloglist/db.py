import logging

from motor.motor_asyncio import AsyncIOMotorClient
from .config import settings

logger = logging.getLogger(__name__)

client = AsyncIOMotorClient(settings.database_url)
# a database named in the connection string wins over DATABASE_NAME
db = client.get_default_database(settings.DATABASE_NAME)


async def get_db():
    return db


def close_client():
    logger.info("closing MongoDB connection")
    client.close()
