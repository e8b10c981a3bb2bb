import pytest
from fastapi.testclient import TestClient

from persona_core.db import models
from persona_core.db.database import SessionLocal, engine
from persona_core.storage import (
    StorageConfig,
    build_training_storage_manager,
    reset_training_storage_manager_for_tests,
)


@pytest.fixture(autouse=True)
def _isolated_training_dir(tmp_path, monkeypatch):
    """Point the process-wide storage manager at a per-test directory."""
    monkeypatch.setenv("TRAINING_DATA_DIR", str(tmp_path / "env-training-data"))
    reset_training_storage_manager_for_tests()
    yield
    reset_training_storage_manager_for_tests()


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "training-data" / "personas"


@pytest.fixture
def storage(storage_dir):
    return build_training_storage_manager(StorageConfig(base_dir=storage_dir))


@pytest.fixture(scope="session")
def _schema():
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(_schema):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        for table in reversed(models.Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        session.close()


@pytest.fixture
def client(db_session, storage):
    from persona_core.api.deps import get_training_storage
    from persona_core.api.main import app
    from persona_core.db.database import get_db

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_training_storage] = lambda: storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
