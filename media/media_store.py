import json
import os
import shutil
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List

from common.errors import StorageError
from common.utils.logging_service import logger
from common.utils.utils import time_it

NEW_FILE_MODE = 0o644  # mkstemp creates 0600


class MediaStore:
    """
    Persists the whole media collection as a single JSON array.

    Every mutation goes through transaction(), which holds a per-process lock
    around load, mutate and save. Separate processes writing the same file are
    still last-write-wins.
    """

    def __init__(self, media_file_path: Path) -> None:
        self.media_file_path = Path(media_file_path)
        self._lock = threading.Lock()

    @time_it
    def load(self) -> List[Dict]:
        try:
            with open(self.media_file_path, encoding="utf-8") as f:
                media = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Could not read {self.media_file_path}: {e}")
            raise StorageError("Media document is unreadable") from e

        if not isinstance(media, list):
            raise StorageError("Media document must hold a JSON array")
        if not all(isinstance(item, dict) for item in media):
            raise StorageError("Media document entries must be JSON objects")

        return media

    @time_it
    def save(self, media: List[Dict]) -> None:
        directory = self.media_file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=".media-", suffix=".json"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(media, f, indent=2, ensure_ascii=False)
                if self.media_file_path.exists():
                    shutil.copymode(self.media_file_path, tmp_path)
                else:
                    os.chmod(tmp_path, NEW_FILE_MODE)
                os.replace(tmp_path, self.media_file_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Could not write {self.media_file_path}: {e}")
            raise StorageError("Media document could not be written") from e

    @contextmanager
    def transaction(self) -> Iterator[List[Dict]]:
        """
        Yields the loaded collection for in-place mutation and saves it when
        the block exits cleanly. An exception inside the block discards the
        changes.
        """
        with self._lock:
            media = self.load()
            yield media
            self.save(media)
