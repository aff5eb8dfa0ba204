import logging
from contextlib import asynccontextmanager
from typing import Optional
from urllib.parse import quote

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from .configuration import Settings, settings as default_settings
from .database.store import SQLModelImageStore, create_database_engine
from .errors import MissingFileError, PersistenceError, UploadError
from .logging_config import configure_logging
from .pages import UPLOAD_FORM, upload_failed, upload_succeeded
from .storage import LocalFileSystemStorage
from .upload import ImageMetadataStore, UploadHandler

logger = logging.getLogger(__name__)


def public_image_url(request: Request, stored_name: str) -> str:
    host = request.headers.get("host", request.url.netloc)

    return f"{request.url.scheme}://{host}/uploads/{quote(stored_name)}"


def create_app(
    settings: Optional[Settings] = None,
    metadata_store: Optional[ImageMetadataStore] = None,
) -> FastAPI:
    if settings is None:
        settings = default_settings

    if metadata_store is None:
        metadata_store = SQLModelImageStore(create_database_engine(settings.database_url))

    file_storage = LocalFileSystemStorage(settings.uploads_directory)
    upload_handler = UploadHandler(file_storage, metadata_store)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        create_schema = getattr(metadata_store, "create_schema", None)

        if create_schema is not None:
            # An unreachable database must not keep the server from listening.
            try:
                await run_in_threadpool(create_schema)
                logger.info("Metadata store ready.")
            except SQLAlchemyError as e:
                logger.error("Could not connect to the metadata store: %s", e)

        yield

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.mount(
        "/uploads",
        StaticFiles(directory=file_storage.base_directory),
        name="uploads",
    )

    @app.get("/health")
    def health_check():
        return Response(status_code=200)

    @app.get("/", response_class=HTMLResponse)
    def upload_form():
        return UPLOAD_FORM

    @app.post("/upload", response_class=HTMLResponse)
    async def upload_image(request: Request):
        form = await request.form()

        try:
            image = form.get("image")
            if not isinstance(image, UploadFile):
                image = None

            stored_image = await run_in_threadpool(upload_handler.handle, image)
        except MissingFileError as e:
            return upload_failed(e.message)
        except PersistenceError as e:
            return upload_failed(f"Error saving image info: {e.message}")
        except UploadError as e:
            logger.warning("Upload failed: %s", e.message)
            return upload_failed(f"Error uploading file: {e.message}")
        finally:
            await form.close()

        return upload_succeeded(public_image_url(request, stored_image.filename))

    return app


def run():
    configure_logging(default_settings.log_level)

    logger.info(
        "Starting HTTP server on http://localhost:%d", default_settings.port
    )
    uvicorn.run(create_app(), host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
