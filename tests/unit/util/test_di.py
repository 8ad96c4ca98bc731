"""Unit tests for container assembly."""

import pytest

from meh.adapter.smtp import NullNotifier
from meh.domain.repository import CommentRepository, Transaction
from meh.domain.service import Notifier
from meh.persistence.repository import PostgresCommentRepository, SessionTransaction
from meh.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryTransaction,
)
from meh.util.di.container import create_container
from tests.di import RecordingNotifier, build_test_container


def test_unknown_component_is_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"mailer"})


@pytest.mark.asyncio
async def test_test_container_uses_doubles():
    container = build_test_container()

    async with container() as request_container:
        assert isinstance(
            await request_container.get(CommentRepository), InMemoryCommentRepository
        )
        assert isinstance(
            await request_container.get(Transaction), InMemoryTransaction
        )
        assert isinstance(await request_container.get(Notifier), RecordingNotifier)

    await container.close()


@pytest.mark.asyncio
async def test_production_container_wiring():
    # Building the engine does not connect, so no database is needed
    container = create_container()

    async with container() as request_container:
        assert isinstance(
            await request_container.get(CommentRepository), PostgresCommentRepository
        )
        assert isinstance(
            await request_container.get(Transaction), SessionTransaction
        )
        # Mail settings are blanked in conftest
        assert isinstance(await request_container.get(Notifier), NullNotifier)

    await container.close()
