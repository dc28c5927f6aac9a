# Standard library imports
from typing import Any, Dict, List, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, normalize_email
from ...domain.constants import UserFields
from ...domain.exceptions import EMAIL_IN_USE_MESSAGE, ConflictException
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def save(self, user: User) -> None:
        """
        Save user (create new or replace existing)

        Args:
            user: User domain model to save

        Raises:
            ConflictException: If another user already owns the email (unique index)
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            await self.user_collection.replace_one(
                {UserFields.MONGO_ID: user.id},
                self._user_to_dict(user),
                upsert=True,
            )
        except DuplicateKeyError:
            raise ConflictException(EMAIL_IN_USE_MESSAGE)
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: user_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    async def find_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        """Find all users whose ID is in ``user_ids``"""
        if not user_ids:
            return []

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": list(user_ids)}})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error finding users by IDs: {str(e)}")

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (normalized before querying)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: normalize_email(email)})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

    async def find_all(self, limit: int = 10, offset: int = 0) -> List[User]:
        """List users, newest first"""
        try:
            cursor = (
                self.user_collection.find({})
                .sort(UserFields.CREATED_AT, DESCENDING)
                .skip(offset)
                .limit(limit)
            )
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")

    async def delete(self, user_id: str) -> None:
        """Delete user by ID"""
        try:
            await self.user_collection.delete_one({UserFields.MONGO_ID: user_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")

    async def exists_by_email(self, email: str, exclude_user_id: Optional[str] = None) -> bool:
        """Check whether a user other than ``exclude_user_id`` owns ``email``"""
        query: Dict[str, Any] = {UserFields.EMAIL: normalize_email(email)}
        if exclude_user_id:
            query[UserFields.MONGO_ID] = {"$ne": exclude_user_id}

        try:
            document = await self.user_collection.find_one(query, {UserFields.MONGO_ID: 1})
            return document is not None
        except Exception as e:
            raise RuntimeError(f"Error checking email uniqueness: {str(e)}")

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User.reconstitute(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            name=document.get(UserFields.NAME, ""),
            password=document.get(UserFields.PASSWORD, ""),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
            version=document.get(UserFields.VERSION, 0),
        )

    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.MONGO_ID: user.id,
            UserFields.EMAIL: user.email,
            UserFields.NAME: user.name,
            UserFields.PASSWORD: user.password,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
            UserFields.VERSION: user.version,
        }
