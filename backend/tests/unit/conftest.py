"""Unit test configuration.

Unit tests build repositories and use cases directly and never load app.py.
"""

import pytest

from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.search_condition.in_memory_search_condition_repository import (
    InMemorySearchConditionRepository,
)


@pytest.fixture
def user_repository():
    """Create in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def search_condition_repository():
    """Create in-memory search condition repository."""
    return InMemorySearchConditionRepository()
