"""Test harness for unit and integration tests.

Unit environments run against the in-memory store, which is seeded with
the category list and a few users. Integration environments expect a
migrated PostgreSQL reachable through the usual settings.
"""

import pytest_asyncio

from lens.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh container and yields a
    request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_toggle(unit_env):
            service = await unit_env.get(VoteService)
            votes = await service.toggle_vote(ref, UserId(1), VoteType.UP)
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
