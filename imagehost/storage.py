import logging
import shutil
import time
from abc import ABCMeta, abstractmethod
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from .errors import StorageError

logger = logging.getLogger(__name__)


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class BaseFileStorage(metaclass=ABCMeta):
    @abstractmethod
    def download_file(self, name: str, writable: BinaryIO):
        return NotImplemented

    @abstractmethod
    def upload_file(self, name: str, readable: BinaryIO) -> str:
        return NotImplemented


class LocalFileSystemStorage(BaseFileStorage):
    _base_directory: Path
    _clock: Callable[[], int]

    def __init__(self, base_directory: str | Path, clock: Optional[Callable[[], int]] = None):
        super().__init__()

        self._base_directory = Path(base_directory).resolve()
        self._base_directory.mkdir(parents=True, exist_ok=True)
        self._clock = clock if clock is not None else epoch_millis

    @property
    def base_directory(self) -> Path:
        return self._base_directory

    def download_file(self, file_name: str, writable: BinaryIO):
        file_name_only = Path(file_name).name
        full_file_path: Path = self._base_directory / file_name_only

        with full_file_path.open("rb") as file:
            shutil.copyfileobj(file, writable)

    def upload_file(self, file_name: str, readable: BinaryIO) -> str:
        """Write the uploaded bytes under a new ``<millis>-<name>`` file name.

        Returns the stored file name. An existing file is never overwritten:
        when the name is taken the millisecond prefix is bumped instead.
        """
        # Only the last component of the client's file name reaches the disk.
        file_name_only = Path(file_name).name
        timestamp = self._clock()

        while True:
            stored_name = f"{timestamp}-{file_name_only}"
            full_file_path: Path = self._base_directory / stored_name

            try:
                file = full_file_path.open("xb")
            except FileExistsError:
                timestamp += 1
                continue
            except OSError as e:
                raise StorageError(str(e)) from e

            break

        try:
            with file:
                shutil.copyfileobj(readable, file)
        except OSError as e:
            full_file_path.unlink(missing_ok=True)
            raise StorageError(str(e)) from e

        logger.info("Stored %s as %s", file_name, full_file_path)

        return stored_name
