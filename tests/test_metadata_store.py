import pytest
from sqlalchemy import create_engine

from imagehost.database.store import SQLModelImageStore
from imagehost.errors import PersistenceError


def test_save_assigns_id_and_upload_date(metadata_store):
    image = metadata_store.save("1700000000000-cat.png", "cat.png")

    assert image.id is not None
    assert image.filename == "1700000000000-cat.png"
    assert image.original_name == "cat.png"
    assert image.upload_date is not None


def test_saved_record_can_be_looked_up(metadata_store):
    saved = metadata_store.save("1-cat.png", "cat.png")

    found = metadata_store.get_by_filename("1-cat.png")

    assert found is not None
    assert found.id == saved.id
    assert metadata_store.get_by_filename("2-cat.png") is None


def test_original_name_is_stored_verbatim(metadata_store):
    original_name = "<b>cat</b>.png"

    image = metadata_store.save("1-x.png", original_name)

    assert metadata_store.get_by_filename(image.filename).original_name == original_name


def test_duplicate_filename_raises_persistence_error(metadata_store):
    metadata_store.save("1-cat.png", "cat.png")

    with pytest.raises(PersistenceError):
        metadata_store.save("1-cat.png", "cat.png")


def test_missing_schema_raises_persistence_error(tmp_path):
    # No create_schema() call, so the images table does not exist.
    store = SQLModelImageStore(create_engine(f"sqlite:///{tmp_path / 'empty.db'}"))

    with pytest.raises(PersistenceError) as exc_info:
        store.save("1-cat.png", "cat.png")

    assert "images" in exc_info.value.message
