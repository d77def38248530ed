"""MongoDB repository support."""

from .base import MongoBaseRepository, create_mongo_client

__all__ = [
    "MongoBaseRepository",
    "create_mongo_client",
]
