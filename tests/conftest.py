import pytest
from fastapi.testclient import TestClient

from imagehost.configuration import Settings
from imagehost.database.store import SQLModelImageStore, create_database_engine
from imagehost.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        uploads_directory=str(tmp_path / "uploads"),
        database_url=f"sqlite:///{tmp_path / 'images.db'}",
    )


@pytest.fixture
def uploads_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def metadata_store(settings):
    store = SQLModelImageStore(create_database_engine(settings.database_url))
    store.create_schema()
    return store


@pytest.fixture
def client(settings, metadata_store):
    with TestClient(create_app(settings, metadata_store)) as test_client:
        yield test_client
