"""Tests for the display preference flag."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from tigerfive.db import repo
from tigerfive.db.schema import DARK_MODE_KEY
from tigerfive.store.preferences import DisplayPreferences


class TestDisplayPreferences:
    """Test DisplayPreferences."""

    def test_stored_as_text(self, session_factory, session):
        """The flag is stored as "true"/"false"."""
        prefs = DisplayPreferences(session_factory)
        prefs.set_dark_mode(True)
        assert repo.get_value(session, DARK_MODE_KEY) == b"true"

    def test_toggle(self, session_factory):
        """Toggle flips and returns the new value."""
        prefs = DisplayPreferences(session_factory)
        assert prefs.toggle_dark_mode() is True
        assert prefs.toggle_dark_mode() is False

    def test_unrecognised_value_is_light(self, session_factory, session):
        """Anything other than "true" loads as light mode."""
        repo.put_value(session, DARK_MODE_KEY, b"yes")
        session.commit()
        assert DisplayPreferences(session_factory).load() is False

    def test_unreadable_store(self):
        """A broken store keeps the in-memory flag and does not raise."""
        broken = sessionmaker(bind=create_engine("sqlite:///:memory:"))
        prefs = DisplayPreferences(broken)
        assert prefs.load() is False
        assert prefs.set_dark_mode(True) is True
        assert prefs.dark_mode is True
