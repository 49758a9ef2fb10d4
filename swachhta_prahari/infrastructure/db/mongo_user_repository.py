# Standard library imports
from datetime import datetime
from typing import Optional, List, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.time_utils import utc_now
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import ConflictError
from .mongo_connection import get_user_collection


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (case-insensitive)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email.strip().lower()})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

    async def find_by_username(self, username: str) -> Optional[User]:
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username.strip()})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    async def find_by_roles(self, roles: Sequence[str]) -> List[User]:
        try:
            cursor = self.user_collection.find(
                {UserFields.ROLE: {"$in": list(roles)}}
            ).sort(UserFields.CREATED_AT, DESCENDING)
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error listing users by role: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If the username or email is already taken
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            user_dict = self._user_to_dict(user)
            now = utc_now()
            user_dict[UserFields.UPDATED_AT] = now

            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")

                updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
                return self._document_to_user(updated_document)

            user_dict[UserFields.CREATED_AT] = user.created_at or now
            result = await self.user_collection.insert_one(user_dict)

            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("User was created but could not be retrieved")
            return self._document_to_user(new_document)
        except DuplicateKeyError:
            raise ConflictError("User with this email or username already exists")
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def delete(self, user_id: str) -> bool:
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return False

        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
            return result.deleted_count > 0
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")

    async def set_refresh_token(
        self, user_id: str, refresh_token: Optional[str], last_login: Optional[datetime] = None
    ) -> None:
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return

        update = {UserFields.REFRESH_TOKEN: refresh_token}
        if last_login is not None:
            update[UserFields.LAST_LOGIN] = last_login
        try:
            await self.user_collection.update_one({UserFields.MONGO_ID: object_id}, {"$set": update})
        except Exception as e:
            raise RuntimeError(f"Error updating refresh token: {str(e)}")

    async def update_password(self, email: str, hashed_password: str) -> bool:
        try:
            result = await self.user_collection.update_one(
                {UserFields.EMAIL: email.strip().lower()},
                {"$set": {
                    UserFields.HASHED_PASSWORD: hashed_password,
                    UserFields.REFRESH_TOKEN: None,
                    UserFields.UPDATED_AT: utc_now(),
                }}
            )
            return result.matched_count > 0
        except Exception as e:
            raise RuntimeError(f"Error updating password: {str(e)}")

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            name=document.get(UserFields.NAME, ""),
            role=document.get(UserFields.ROLE, ""),
            department=document.get(UserFields.DEPARTMENT, "UPSIDA"),
            is_active=document.get(UserFields.IS_ACTIVE, True),
            last_login=document.get(UserFields.LAST_LOGIN),
            refresh_token=document.get(UserFields.REFRESH_TOKEN),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )

    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to MongoDB document (without _id)"""
        return {
            UserFields.USERNAME: user.username.strip(),
            UserFields.EMAIL: user.email.strip().lower(),
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.NAME: user.name.strip(),
            UserFields.ROLE: user.role,
            UserFields.DEPARTMENT: user.department,
            UserFields.IS_ACTIVE: user.is_active,
            UserFields.LAST_LOGIN: user.last_login,
            UserFields.REFRESH_TOKEN: user.refresh_token,
        }
