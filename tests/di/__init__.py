"""Mock providers for testing."""

from .persistence import (
    SEED_CATEGORIES,
    SEED_USERS,
    MockPersistenceProvider,
    seed_store,
)
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "SEED_CATEGORIES",
    "SEED_USERS",
    "build_test_container",
    "seed_store",
]
