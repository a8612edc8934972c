import os
from pathlib import Path

from werkzeug.utils import secure_filename

from common.errors import UploadError
from common.utils.logging_service import logger


def poster_file_name(media_id: str, original_name: str) -> str:
    """<media id><original extension>, e.g. ``4f2a...c1.jpg``."""
    extension = os.path.splitext(secure_filename(original_name or ""))[1].lower()
    return secure_filename(f"{media_id}{extension}")


class LocalPosterStorage:
    """Writes posters into a local image folder served under a public base URL."""

    def __init__(self, image_folder_path: Path, public_base_url: str) -> None:
        self.image_folder_path = Path(image_folder_path)
        self.public_base_url = public_base_url.rstrip("/")

    def __call__(self, media_id: str, data: bytes, filename: str) -> str:
        file_name = poster_file_name(media_id, filename)
        if not file_name:
            raise UploadError("Invalid poster file name")

        path_to_file = self.image_folder_path / file_name
        try:
            self.image_folder_path.mkdir(parents=True, exist_ok=True)
            with open(path_to_file, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.error(f"Failed to write poster {path_to_file}: {e}")
            raise UploadError("Poster could not be saved") from e

        logger.debug(f"Saved poster: {path_to_file}")
        return f"{self.public_base_url}/{file_name}"
