"""Database models and connection setup."""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from config.settings import Settings, settings as default_settings
from services.exceptions import PersistenceError
from utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_DATABASE = "exercise_tracker"
USERS_COLLECTION = "users"


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a path id to an ObjectId, or None if it is not a valid one."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class ExerciseStore:
    """Users and their exercise logs, kept in one MongoDB collection."""

    def __init__(self, collection, client: Optional[AsyncIOMotorClient] = None):
        self.collection = collection
        self.client = client

    @classmethod
    def connect(cls, config: Optional[Settings] = None) -> "ExerciseStore":
        """Create database connection."""
        config = config or default_settings
        client = AsyncIOMotorClient(config.mongodb_url)
        if config.mongodb_database:
            database = client[config.mongodb_database]
        else:
            database = client.get_default_database(default=DEFAULT_DATABASE)
        logger.info(f"Connected to MongoDB database: {database.name}")
        return cls(database[USERS_COLLECTION], client=client)

    async def init_indexes(self) -> None:
        """Initialize the users collection indexes."""
        try:
            await self.collection.create_index([("username", ASCENDING)])
        except PyMongoError as e:
            logger.error(f"Could not create indexes: {e}", exc_info=True)
            raise PersistenceError("Error: Could not initialize database", str(e)) from e

    def close(self) -> None:
        """Close database connection."""
        if self.client:
            self.client.close()
            logger.info("Disconnected from MongoDB")

    async def create_user(self, username: str) -> Dict[str, Any]:
        """Insert a new user with an empty log and return the stored document."""
        document = {"username": username, "count": 0, "log": []}
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Error creating user {username}: {e}", exc_info=True)
            raise PersistenceError("Error: Could not save user", str(e)) from e

        document["_id"] = result.inserted_id
        logger.info(f"New user ({username}) saved")
        return document

    async def list_users(self) -> List[Dict[str, Any]]:
        try:
            return await self.collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}", exc_info=True)
            raise PersistenceError("Error: Could not list users", str(e)) from e

    async def find_user(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """Look up a user by id. Ids that are not valid ObjectIds match nothing."""
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        try:
            return await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Error fetching user {user_id}: {e}", exc_info=True)
            raise PersistenceError("Error: Could not fetch user", str(e)) from e

    async def append_exercise(self, user_id: Any, exercise: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Put an exercise at the front of a user's log.

        The push and the count increment are a single document update, so
        concurrent appends for the same user cannot overwrite each other.

        Returns:
            The updated user document, or None if the user does not exist.
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return None

        entry = {"_id": ObjectId(), **exercise}
        try:
            return await self.collection.find_one_and_update(
                {"_id": object_id},
                {
                    "$push": {"log": {"$each": [entry], "$position": 0}},
                    "$inc": {"count": 1},
                },
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error saving exercise for user {user_id}: {e}", exc_info=True)
            raise PersistenceError("Error: Could not save user", str(e)) from e


def get_store(request: Request) -> ExerciseStore:
    """FastAPI dependency returning the store created at startup."""
    return request.app.state.store
