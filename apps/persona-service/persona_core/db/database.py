"""
Database engine and session management.

Builds the SQLAlchemy engine from ``DATABASE_URL`` with a test fallback
(SQLite in-memory under pytest) and exposes the FastAPI session dependency.
"""
import os
import sys
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

_DEFAULT_DATABASE_URL = "sqlite:///./persona.db"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so module import
    during collection is detected through ``sys.modules`` instead.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _get_database_url() -> str:
    explicit_test_db = os.getenv("PERSONA_TEST_DB")
    if explicit_test_db:
        return explicit_test_db
    if _is_pytest_runtime():
        return "sqlite+pysqlite:///:memory:"
    return os.getenv("DATABASE_URL") or _DEFAULT_DATABASE_URL


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # StaticPool keeps one connection so the schema survives across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


DATABASE_URL = _get_database_url()
engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

_SCHEMA_INIT_DONE = False


def _ensure_sqlite_schema():  # pragma: no cover - simple guard logic
    """Create tables once for SQLite databases, which have no migrations."""
    global _SCHEMA_INIT_DONE
    if _SCHEMA_INIT_DONE:
        return
    if str(engine.url).startswith("sqlite"):
        from persona_core.db import models  # local import to avoid circular import at module load
        models.Base.metadata.create_all(bind=engine)
    _SCHEMA_INIT_DONE = True


def get_db():
    """Dependency to get a database session."""
    _ensure_sqlite_schema()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
