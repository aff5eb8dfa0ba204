"""Errors raised while handling a single image upload.

Each one is contained to its request: the upload route catches them and
renders an inline HTML message instead of failing the request.
"""


class UploadError(Exception):
    message: str

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(UploadError):
    """The file is not an accepted image (MIME type or extension)."""


class MissingFileError(UploadError):
    """The request carried no file in the ``image`` field."""


class StorageError(UploadError):
    """Writing the uploaded bytes to disk failed."""


class PersistenceError(UploadError):
    """Recording the image metadata failed."""
