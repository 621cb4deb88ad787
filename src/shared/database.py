"""
MongoDB profile store using Motor (async driver).
"""

from datetime import datetime, timezone
from typing import Any, Optional

from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, IndexModel

from .config import Settings, get_settings
from .models import Profile


class Database:
    """Async MongoDB database wrapper."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Establish database connection."""
        if self._client is not None:
            return

        logger.info(f"Connecting to MongoDB: {self.settings.mongodb_database}")
        self._client = AsyncIOMotorClient(
            self.settings.mongodb_uri,
            serverSelectionTimeoutMS=self.settings.mongodb_timeout_ms,
        )
        self._db = self._client[self.settings.mongodb_database]

        # Verify connection
        await self._client.admin.command("ping")
        logger.info("MongoDB connection established")

    async def disconnect(self) -> None:
        """Close database connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoDB connection closed")

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self._db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._db

    # -------------------------------------------------------------------------
    # Profiles Collection
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_profile(document: dict[str, Any]) -> Profile:
        document = dict(document)
        document.pop("_id", None)
        return Profile.model_validate(document)

    async def get_profile(self, profile_id: str) -> Optional[Profile]:
        """Get profile by ID, or None if it does not exist."""
        document = await self.db.profiles.find_one({"id": profile_id})
        if document is None:
            return None
        return self._to_profile(document)

    async def list_other_profiles(self, exclude_id: str) -> list[Profile]:
        """Get every profile except the one with the given ID."""
        cursor = self.db.profiles.find({"id": {"$ne": exclude_id}})
        documents = await cursor.to_list(length=None)
        return [self._to_profile(document) for document in documents]

    async def upsert_profile(self, profile: Profile) -> bool:
        """
        Upsert profile by ID. Returns True if a new profile was inserted.
        """
        document = profile.model_dump()
        document.pop("created_at", None)
        document["updated_at"] = datetime.now(timezone.utc)

        result = await self.db.profiles.update_one(
            {"id": profile.id},
            {
                "$set": document,
                "$setOnInsert": {"created_at": datetime.now(timezone.utc)},
            },
            upsert=True,
        )
        return result.upserted_id is not None

    # -------------------------------------------------------------------------
    # Index Setup
    # -------------------------------------------------------------------------

    async def ensure_indexes(self) -> None:
        """Create database indexes."""
        profile_indexes = [
            IndexModel([("id", ASCENDING)], unique=True),
            IndexModel([("major", ASCENDING)]),
        ]
        await self.db.profiles.create_indexes(profile_indexes)

        logger.info("Database indexes created")


# Global database instance
_database: Optional[Database] = None


async def get_database() -> Database:
    """Get or create database instance."""
    global _database
    if _database is None:
        _database = Database()
        await _database.connect()
    return _database


async def close_database() -> None:
    """Close the global database instance if one was opened."""
    global _database
    if _database is not None:
        await _database.disconnect()
        _database = None
