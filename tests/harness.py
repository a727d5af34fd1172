"""Test harness for service-level and integration tests.

Integration runs expect PostgreSQL to be reachable at DATABASE__URL.
"""

import pytest_asyncio

from estate.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh test container and yields a request-scoped
    container for resolving services and repositories.

    Args:
        unmock: Components to use real implementations for

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_approve(unit_env):
            service = await unit_env.get(CommentService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
