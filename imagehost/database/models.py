from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Image(SQLModel, table=True):
    __tablename__ = "images"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    # Name of the file on disk, also the last segment of its public URL.
    filename: str = Field(unique=True, index=True)

    # File name as sent by the client, kept verbatim. Escape before rendering.
    original_name: str

    upload_date: datetime = Field(default_factory=utc_now)
