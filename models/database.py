"""Database models and connection setup."""

from typing import Any, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, DESCENDING

from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

EXERCISES_COLLECTION = "exerciseList"
SPLITS_COLLECTION = "workoutSplits"
LOGS_COLLECTION = "exerciseLogs"
COUNTERS_COLLECTION = "counters"


class MongoStore:
    """MongoDB connection and collection access.

    One instance is created per application and handed to request handlers
    through the ``get_store`` dependency.
    """

    def __init__(self, client: Any, database_name: str):
        self.client = client
        self.database = client[database_name]

    @classmethod
    def from_url(cls, url: str, database_name: Optional[str] = None) -> "MongoStore":
        """Create a store backed by a motor client for ``url``."""
        client = AsyncIOMotorClient(url)
        return cls(client, database_name or settings.database_name)

    @property
    def exercises(self):
        """Exercise reference catalog."""
        return self.database[EXERCISES_COLLECTION]

    @property
    def splits(self):
        """Workout splits collection."""
        return self.database[SPLITS_COLLECTION]

    @property
    def logs(self):
        """Exercise logs collection."""
        return self.database[LOGS_COLLECTION]

    @property
    def counters(self):
        """Sequence counters, one document per sequence name."""
        return self.database[COUNTERS_COLLECTION]

    async def init_indexes(self):
        """Create the indexes every collection relies on."""
        await self.exercises.create_index([("id", ASCENDING)])
        await self.splits.create_index([("splitId", ASCENDING)], unique=True)
        await self.logs.create_index([("exerciseId", ASCENDING), ("date", DESCENDING)])
        logger.info("MongoDB initialized: indexes created")

    def close(self):
        """Close the underlying client."""
        if self.client:
            self.client.close()
            logger.info("Disconnected from MongoDB")


async def connect_to_mongo(url: str, database_name: Optional[str] = None) -> MongoStore:
    """Create a store and make sure its indexes exist."""
    store = MongoStore.from_url(url, database_name)
    await store.init_indexes()
    logger.info(f"Connected to MongoDB database: {store.database.name}")
    return store


def get_store(request: Request) -> MongoStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
