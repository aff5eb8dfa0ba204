import pytest

from imagehost.errors import ValidationError
from imagehost.validation import validate_image


@pytest.mark.parametrize(
    "content_type, file_name",
    [
        ("image/png", "cat.png"),
        ("image/jpeg", "photo.jpg"),
        ("image/jpg", "photo.jpeg"),
        ("image/gif", "anim.gif"),
        ("image/webp", "pic.webp"),
        ("image/png", "SHOUTING.PNG"),
    ],
)
def test_accepts_allowed_pairs(content_type, file_name):
    validate_image(content_type, file_name)


@pytest.mark.parametrize(
    "content_type, file_name",
    [
        ("application/pdf", "doc.pdf"),
        ("application/pdf", "cat.png"),
        ("image/png", "doc.pdf"),
        ("image/png", "no_extension"),
        ("image/svg+xml", "vector.svg"),
        (None, "cat.png"),
    ],
)
def test_rejects_disallowed_pairs(content_type, file_name):
    with pytest.raises(ValidationError) as exc_info:
        validate_image(content_type, file_name)

    assert exc_info.value.message == "Error: Images only!"


def test_mime_and_extension_are_checked_independently():
    # Both are image types, so the mismatch itself is not rejected.
    validate_image("image/gif", "cat.png")
