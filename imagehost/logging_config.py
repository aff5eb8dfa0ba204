import logging
import sys


def configure_logging(level: str = "INFO", log_format: str | None = None) -> None:
    """Configure the root logger to write to stdout.

    Uvicorn's access log stays on its own handler.
    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
