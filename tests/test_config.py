"""Tests for settings and schema validation."""

import pytest
from pydantic import ValidationError

from collabhub.config import Settings, _parse_names, get_settings
from collabhub.enums import Role, Status
from collabhub.log import configure_logging
from collabhub.schemas import Actor, Channel, Document, File, Task


class TestParseNames:
    def test_parses_multiple_names(self):
        assert _parse_names("general,announcements") == {"general", "announcements"}

    def test_strips_whitespace_and_empties(self):
        assert _parse_names("  general , ,random  ") == {"general", "random"}

    def test_empty_string_returns_empty_set(self):
        assert _parse_names("") == frozenset()
        assert _parse_names("   ") == frozenset()


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.app_name == "CollabHub"
        assert settings.reserved_channels == {"general"}

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("COLLABHUB_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("COLLABHUB_RESERVED_CHANNEL_NAMES", "general,ops")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.reserved_channels == {"general", "ops"}

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_configure_logging(self, log_format):
        configure_logging(Settings(log_format=log_format, log_level="WARNING"))


class TestSchemas:
    def test_task_defaults_to_todo(self):
        task = Task(id="t1", creator_id="u1")
        assert task.status == Status.TODO
        assert task.assignee_id is None

    def test_status_outside_the_set_is_rejected(self):
        with pytest.raises(ValidationError):
            Task(id="t1", creator_id="u1", status="ARCHIVED")

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValidationError):
            Actor(id="u1", role="OWNER")

    def test_models_are_frozen(self):
        actor = Actor(id="u1", role=Role.MEMBER)
        with pytest.raises(ValidationError):
            actor.role = Role.ADMIN

    def test_owner_id_accessor(self):
        assert Task(id="t", creator_id="a").owner_id == "a"
        assert Document(id="d", author_id="b").owner_id == "b"
        assert File(id="f", uploaded_by_id="c").owner_id == "c"
        assert Channel(id="c", name="x", owner_id="d").owner_id == "d"

    def test_long_ids_are_accepted(self):
        long_id = "u" * 500
        actor = Actor(id=long_id, role=Role.MEMBER)
        task = Task(id=long_id, creator_id=long_id)
        assert task.owner_id == actor.id

    def test_empty_ids_are_rejected(self):
        with pytest.raises(ValidationError):
            Actor(id="", role=Role.MEMBER)
