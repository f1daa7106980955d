"""Test configuration and fixtures."""

import pytest

from collabhub.config import get_settings
from collabhub.enums import Role
from collabhub.schemas import Actor, Channel, Document, File, Task


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Give each test settings built from a clean environment."""
    monkeypatch.delenv("COLLABHUB_RESERVED_CHANNEL_NAMES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def admin() -> Actor:
    return Actor(id="admin-1", role=Role.ADMIN)


@pytest.fixture
def member() -> Actor:
    return Actor(id="member-1", role=Role.MEMBER)


@pytest.fixture
def viewer() -> Actor:
    return Actor(id="viewer-1", role=Role.VIEWER)


@pytest.fixture
def assigned_task() -> Task:
    return Task(id="task-1", creator_id="u1", assignee_id="u1")


@pytest.fixture
def unassigned_task() -> Task:
    return Task(id="task-2", creator_id="u1")


@pytest.fixture
def document() -> Document:
    return Document(id="doc-1", author_id="u1", title="Roadmap")


@pytest.fixture
def uploaded_file() -> File:
    return File(id="file-1", uploaded_by_id="u1", name="notes.pdf")


@pytest.fixture
def channel() -> Channel:
    return Channel(id="channel-1", name="design", owner_id="u1")


@pytest.fixture
def general_channel() -> Channel:
    return Channel(id="channel-0", name="general", owner_id="u1")
