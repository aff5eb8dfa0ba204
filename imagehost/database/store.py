import logging
from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine, select

from ..errors import PersistenceError
from .models import Image

logger = logging.getLogger(__name__)


def create_database_engine(database_url: str) -> Engine:
    connect_args = {}

    # Requests are handled on threadpool workers, not the thread that
    # opened the connection.
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(database_url, connect_args=connect_args)


class SQLModelImageStore:
    _engine: Engine

    def __init__(self, engine: Engine):
        self._engine = engine

    def create_schema(self):
        SQLModel.metadata.create_all(self._engine)

    def save(self, filename: str, original_name: str) -> Image:
        image = Image(filename=filename, original_name=original_name)

        try:
            with Session(self._engine) as session:
                session.add(image)
                session.commit()
                session.refresh(image)
        except SQLAlchemyError as e:
            logger.error("Failed to save metadata for %s: %s", filename, e)
            raise PersistenceError(str(e)) from e

        logger.info("Saved image %s with id %s", filename, image.id)

        return image

    def get_by_filename(self, filename: str) -> Optional[Image]:
        with Session(self._engine) as session:
            return session.exec(select(Image).where(Image.filename == filename)).first()
