import logging
from typing import Optional, Protocol

from starlette.datastructures import UploadFile

from .database.models import Image
from .errors import MissingFileError
from .storage import BaseFileStorage
from .validation import validate_image

logger = logging.getLogger(__name__)


class ImageMetadataStore(Protocol):
    def save(self, filename: str, original_name: str) -> Image:
        ...


class UploadHandler:
    """Validate, store and record a single uploaded image.

    The blob is always written before its metadata is recorded. A failed
    metadata insert leaves the written file in place.
    """

    _file_storage: BaseFileStorage
    _metadata_store: ImageMetadataStore

    def __init__(self, file_storage: BaseFileStorage, metadata_store: ImageMetadataStore):
        self._file_storage = file_storage
        self._metadata_store = metadata_store

    def handle(self, upload: Optional[UploadFile]) -> Image:
        # Browsers submit an empty file part when nothing was selected.
        if upload is None or not upload.filename:
            raise MissingFileError("No file selected")

        validate_image(upload.content_type, upload.filename)

        stored_name = self._file_storage.upload_file(upload.filename, upload.file)

        return self._metadata_store.save(stored_name, upload.filename)
