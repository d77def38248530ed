"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- tests: REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

Usage:
    from infrastructure.persistence.factory import (
        get_search_condition_repository,
        get_user_repository,
    )

    repo = get_user_repository()  # Singleton, inmemory or mongodb based on env
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient

# Protocol interfaces (Dependency Inversion)
from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_repository_backend
from infrastructure.persistence.mongodb.base import create_mongo_client

# In-memory repositories (fast, transient)
from infrastructure.search_condition.in_memory_search_condition_repository import (
    InMemorySearchConditionRepository,
)
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository

# MongoDB repositories (persistent, requires connection)
from infrastructure.search_condition.mongo_search_condition_repository import (
    MongoSearchConditionRepository,
)
from infrastructure.user.mongo_user_repository import MongoUserRepository

logger = logging.getLogger(__name__)

_BACKENDS = ("inmemory", "mongodb")


def _backend() -> str:
    mode = get_repository_backend()
    if mode not in _BACKENDS:
        raise ValueError(
            f"Invalid REPOSITORY_BACKEND value: {mode}. " "Expected 'inmemory' or 'mongodb'"
        )
    return mode


# Shared motor client, created on first MongoDB repository
_mongo_client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None


def _get_mongo_client() -> AsyncIOMotorClient[Dict[str, Any]]:
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = create_mongo_client()
    return _mongo_client


def create_user_repository() -> IUserRepository:
    """Create user repository based on REPOSITORY_BACKEND env var.

    Environment variable: REPOSITORY_BACKEND
    Values:
        - "inmemory": In-memory repository (default, fast, transient)
        - "mongodb": MongoDB repository (persistent, requires MONGODB_URI)

    Returns:
        IUserRepository: Repository instance

    Raises:
        ValueError: If the backend is unknown or mongodb lacks MONGODB_URI
    """
    if _backend() == "mongodb":
        return MongoUserRepository(client=_get_mongo_client())
    return InMemoryUserRepository()


def create_search_condition_repository() -> ISearchConditionRepository:
    """Create search condition repository based on REPOSITORY_BACKEND env var.

    Same selection rules as create_user_repository().
    """
    if _backend() == "mongodb":
        return MongoSearchConditionRepository(client=_get_mongo_client())
    return InMemorySearchConditionRepository()


# Singleton instances (lazy initialization)
_user_repository: Optional[IUserRepository] = None
_search_condition_repository: Optional[ISearchConditionRepository] = None


def get_user_repository() -> IUserRepository:
    """Get singleton user repository instance.

    Returns:
        IUserRepository: Cached repository instance
    """
    global _user_repository
    if _user_repository is None:
        _user_repository = create_user_repository()
        logger.info(
            "User repository created",
            extra={"repository": _user_repository.__class__.__name__},
        )
    return _user_repository


def get_search_condition_repository() -> ISearchConditionRepository:
    """Get singleton search condition repository instance."""
    global _search_condition_repository
    if _search_condition_repository is None:
        _search_condition_repository = create_search_condition_repository()
        logger.info(
            "Search condition repository created",
            extra={"repository": _search_condition_repository.__class__.__name__},
        )
    return _search_condition_repository


async def ensure_indexes() -> None:
    """Create unique and listing indexes when running on MongoDB.

    No-op for the in-memory backend, which enforces uniqueness itself.
    """
    for repository in (get_user_repository(), get_search_condition_repository()):
        if isinstance(repository, (MongoUserRepository, MongoSearchConditionRepository)):
            await repository.ensure_indexes()


def reset_repositories() -> None:
    """Reset singleton repository instances and the shared client.

    Useful for testing to force re-creation with different env vars.

    Example:
        # In tests:
        reset_repositories()
        os.environ["REPOSITORY_BACKEND"] = "inmemory"
        repo = get_user_repository()  # Creates new instance
    """
    global _user_repository, _search_condition_repository, _mongo_client
    _user_repository = None
    _search_condition_repository = None
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
