"""Tests for the local byte store schema and repository."""

from tigerfive.db import repo
from tigerfive.db.schema import ROUNDS_KEY, Base, KeyValueEntry
from tigerfive.db.session import init_db, session_scope


class TestSchemaCreation:
    """Test that schema can be created without errors."""

    def test_table_created(self, engine):
        """The key-value table exists after creation."""
        assert "kv_store" in Base.metadata.tables

    def test_init_db_on_file(self, tmp_path):
        """init_db creates the file, parent directories and table."""
        db_path = tmp_path / "nested" / "tigerfive.db"
        factory = init_db(db_path)

        with session_scope(factory) as session:
            repo.put_value(session, ROUNDS_KEY, b"[]")

        assert db_path.exists()
        with session_scope(factory) as session:
            assert repo.get_value(session, ROUNDS_KEY) == b"[]"


class TestKeyValueRepository:
    """Test get/put of opaque values."""

    def test_get_absent(self, session):
        """Absent keys read as None."""
        assert repo.get_value(session, ROUNDS_KEY) is None

    def test_put_replaces_whole_value(self, session):
        """A second put overwrites the first."""
        repo.put_value(session, ROUNDS_KEY, b"[1]")
        session.commit()
        repo.put_value(session, ROUNDS_KEY, b"[1,2]")
        session.commit()

        assert repo.get_value(session, ROUNDS_KEY) == b"[1,2]"
        assert session.query(KeyValueEntry).count() == 1

    def test_rollback_on_error(self, session_factory):
        """session_scope rolls back when the block raises."""
        try:
            with session_scope(session_factory) as session:
                repo.put_value(session, ROUNDS_KEY, b"[]")
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        with session_scope(session_factory) as session:
            assert repo.get_value(session, ROUNDS_KEY) is None
