import logging
import os
from typing import Optional

from .errors import ValidationError

logger = logging.getLogger(__name__)


ALLOWED_MIME_TYPES = frozenset({
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/jpg",
    "image/webp",
})

ALLOWED_EXTENSIONS = frozenset({".jpeg", ".jpg", ".png", ".gif", ".webp"})


def validate_image(content_type: Optional[str], file_name: str):
    """Reject anything that is not declared as an image.

    Only the declared MIME type and the file extension are checked, both
    must be allowed. The file contents are never inspected.
    """
    logger.info("Uploading file: %s %s", file_name, content_type)

    extension = os.path.splitext(file_name)[1].lower()

    if content_type not in ALLOWED_MIME_TYPES or extension not in ALLOWED_EXTENSIONS:
        logger.info(
            "Rejected %s: content type %s, extension %r", file_name, content_type, extension
        )
        raise ValidationError("Error: Images only!")
