"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Connection management
- Document mapping (domain ↔ MongoDB)
- Error handling (unique-key violations become ConflictError)
- Logging

All concrete MongoDB repositories should inherit from MongoBaseRepository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Dict, Any, List, Tuple
from datetime import datetime, timezone
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from domain.shared.errors import ConflictError
from infrastructure.config import get_mongodb_uri, get_mongodb_database


# Type variables for generics
TEntity = TypeVar("TEntity")  # Domain entity type

logger = logging.getLogger(__name__)


def create_mongo_client() -> AsyncIOMotorClient[Dict[str, Any]]:
    """Create a motor client from MONGODB_URI.

    Raises:
        ValueError: If MONGODB_URI is not configured
    """
    uri = get_mongodb_uri()
    if not uri:
        raise ValueError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )
    return AsyncIOMotorClient(uri, tz_aware=True)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Provides common functionality:
    - Connection pooling (motor handles this automatically)
    - Document ↔ Entity mapping
    - Error handling with proper logging
    - DuplicateKeyError → ConflictError translation
    - Datetime handling (timezone-aware)

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - resource_name: Resource kind used in logs
    - conflict_error(): Domain error raised on unique-key violations
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoUserRepository(MongoBaseRepository[User]):
            collection_name = "users"
            resource_name = "user"

            def conflict_error(self, identifier: str) -> ConflictError:
                return DuplicateEmailError(identifier)

            def to_document(self, user: User) -> Dict[str, Any]:
                ...

            def from_document(self, doc: Dict[str, Any]) -> User:
                ...
    """

    collection_name: str
    resource_name: str

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
        """
        self._client = client if client is not None else create_mongo_client()

        database_name = get_mongodb_database()
        self._db = self._client[database_name]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    # ============================================================
    # Abstract Methods (must be implemented)
    # ============================================================

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """
        Convert domain entity to MongoDB document (without _id).

        Args:
            entity: Domain entity

        Returns:
            MongoDB document (dict)
        """
        pass

    @abstractmethod
    def conflict_error(self, identifier: str) -> ConflictError:
        """Domain error for a unique-key violation on this collection."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Args:
            doc: MongoDB document

        Returns:
            Domain entity

        Raises:
            ValidationError: If stored values no longer satisfy the domain rules
        """
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
        """
        Normalize a datetime read from MongoDB to timezone-aware UTC.

        BSON dates carry no zone; clients not created with tz_aware=True
        return naive values.
        """
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt

    def _log_failure(self, operation: str, resource_id: Any, error: Exception) -> None:
        logger.error(
            f"Error in {operation}: collection={self.collection_name}, "
            f"id={resource_id}, error={error}",
            extra={
                "operation": operation,
                "resource": self.resource_name,
                "resource_id": resource_id,
                "error": str(error),
            },
        )

    def _conflict(self, identifier: str, error: DuplicateKeyError) -> ConflictError:
        logger.warning(
            "Unique constraint violated",
            extra={
                "resource": self.resource_name,
                "resource_id": identifier,
                "key": getattr(error, "details", None),
            },
        )
        return self.conflict_error(identifier)

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Args:
            filter_dict: MongoDB filter
            projection: Optional projection

        Returns:
            Document dict or None if not found

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            doc = await self._collection.find_one(filter_dict, projection)
            return doc
        except Exception as e:
            self._log_failure("find_one", filter_dict.get("_id"), e)
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        projection: Optional[Dict[str, int]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents with error handling.

        Args:
            filter_dict: MongoDB filter
            sort: Sort specification [(field, direction), ...]
            limit: Max documents to return
            skip: Documents to skip
            projection: Optional projection

        Returns:
            List of document dicts

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            cursor = self._collection.find(filter_dict, projection)

            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)

            documents = await cursor.to_list(length=limit)
            return documents
        except Exception as e:
            self._log_failure("find_many", None, e)
            raise

    async def _insert_one(self, document: Dict[str, Any], identifier: str) -> None:
        """
        Insert single document with error handling.

        Args:
            document: MongoDB document to insert
            identifier: Value reported when a unique key is violated

        Raises:
            ConflictError: On unique-key violation
            Exception: If MongoDB operation fails otherwise (logged and re-raised)
        """
        try:
            await self._collection.insert_one(document)
        except DuplicateKeyError as e:
            self._log_failure("insert_one", document.get("_id"), e)
            raise self._conflict(identifier, e) from e
        except Exception as e:
            self._log_failure("insert_one", document.get("_id"), e)
            raise

    async def _find_one_and_set(
        self,
        document_id: str,
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Overwrite fields of one document and return it as stored.

        Args:
            document_id: _id of the document
            fields: Field values to $set

        Returns:
            Updated document, or None if no document has that _id

        Raises:
            ConflictError: On unique-key violation
            Exception: If MongoDB operation fails otherwise (logged and re-raised)
        """
        try:
            return await self._collection.find_one_and_update(
                {"_id": document_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            self._log_failure("find_one_and_update", document_id, e)
            raise self._conflict(document_id, e) from e
        except Exception as e:
            self._log_failure("find_one_and_update", document_id, e)
            raise

    async def _count(self, filter_dict: Dict[str, Any]) -> int:
        """
        Count documents with error handling.

        Args:
            filter_dict: MongoDB filter

        Returns:
            Number of matching documents

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            count = await self._collection.count_documents(filter_dict)
            return count
        except Exception as e:
            self._log_failure("count", None, e)
            raise

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")
