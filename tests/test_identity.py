"""Tests for identity utilities and settings."""

import json

from tigerfive.config import DEFAULT_MIRROR_URL, load_settings
from tigerfive.core import identity
from tigerfive.core.identity import canonical_json, next_round_id, today_iso


class TestNextRoundId:
    """Test time-based round ids."""

    def test_uses_clock(self, monkeypatch):
        """Id is the given millisecond timestamp when it is ahead."""
        monkeypatch.setattr(identity, "_last_id", 0)
        assert next_round_id(1_700_000_000_000) == 1_700_000_000_000

    def test_same_millisecond_still_increases(self):
        """Ids created in the same millisecond are strictly increasing."""
        now = next_round_id()
        ids = [next_round_id(now) for _ in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5
        assert ids[0] > now

    def test_clock_going_backwards(self):
        """An earlier clock reading never produces a smaller id."""
        latest = next_round_id()
        assert next_round_id(1) > latest


class TestHelpers:
    """Test small helpers."""

    def test_canonical_json_is_compact(self):
        """No whitespace between separators."""
        text = canonical_json({"id": 1, "course": "A"})
        assert text == '{"id":1,"course":"A"}'
        assert json.loads(text) == {"id": 1, "course": "A"}

    def test_today_iso_format(self):
        """YYYY-MM-DD."""
        value = today_iso()
        assert len(value) == 10
        assert value[4] == "-" and value[7] == "-"


class TestLoadSettings:
    """Test environment settings."""

    def test_defaults(self, monkeypatch):
        """Without environment overrides the builder API is used."""
        for name in (
            "TIGERFIVE_DB_PATH",
            "TIGERFIVE_MIRROR_URL",
            "TIGERFIVE_MIRROR_TOKEN",
            "TIGERFIVE_MIRROR_TIMEOUT",
            "TIGERFIVE_CORS_ORIGINS",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = load_settings()

        assert settings.mirror_url == DEFAULT_MIRROR_URL
        assert settings.mirror_token is None
        assert settings.mirror_timeout == 10.0
        assert "http://localhost:3000" in settings.cors_origins

    def test_overrides(self, monkeypatch, tmp_path):
        """Environment values are picked up."""
        monkeypatch.setenv("TIGERFIVE_DB_PATH", str(tmp_path / "rounds.db"))
        monkeypatch.setenv("TIGERFIVE_MIRROR_URL", "https://example.test/api/")
        monkeypatch.setenv("TIGERFIVE_MIRROR_TOKEN", "secret")
        monkeypatch.setenv("TIGERFIVE_MIRROR_TIMEOUT", "not-a-number")
        monkeypatch.setenv("TIGERFIVE_CORS_ORIGINS", "https://a.test, https://b.test")

        settings = load_settings()

        assert settings.db_path == tmp_path / "rounds.db"
        assert settings.mirror_url == "https://example.test/api"
        assert settings.mirror_token == "secret"
        assert settings.mirror_timeout == 10.0
        assert settings.cors_origins == ["https://a.test", "https://b.test"]

    def test_empty_url_disables_mirror(self, monkeypatch):
        """An empty mirror URL turns the mirror off."""
        from tigerfive.mirror.client import RemoteMirror

        monkeypatch.setenv("TIGERFIVE_MIRROR_URL", "")
        mirror = RemoteMirror.from_settings(load_settings())
        mirror.shutdown()
        assert mirror.enabled is False
