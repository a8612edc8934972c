from flask import current_app

from common.config import CatalogConfig
from common.errors import UploadError
from media.media_service import PosterStorage
from media.media_store import MediaStore

EXTENSION_KEY = "media_catalog"


def get_config() -> CatalogConfig:
    return current_app.extensions[EXTENSION_KEY]["config"]


def get_media_store() -> MediaStore:
    return current_app.extensions[EXTENSION_KEY]["store"]


def get_poster_storage() -> PosterStorage:
    return current_app.extensions[EXTENSION_KEY]["poster_storage"]


def get_remote_poster_storage() -> PosterStorage:
    storage = current_app.extensions[EXTENSION_KEY]["remote_poster_storage"]
    if storage is None:
        raise UploadError("Remote poster storage is not configured")
    return storage
