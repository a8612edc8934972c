import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_MEDIA_FILE_PATH = Path(__file__).resolve().parents[1] / "media" / "media.json"
DEFAULT_IMAGE_FOLDER_PATH = Path.cwd() / "public" / "img"
DEFAULT_PUBLIC_IMAGE_BASE_URL = "http://localhost:3005/media/public/img"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _split_origins(*values: Optional[str]) -> List[str]:
    origins = []
    for value in values:
        if not value:
            continue
        for origin in value.split(","):
            origin = origin.strip()
            if origin and origin not in origins:
                origins.append(origin)
    return origins


@dataclass
class CatalogConfig:
    media_file_path: Path = DEFAULT_MEDIA_FILE_PATH
    image_folder_path: Path = DEFAULT_IMAGE_FOLDER_PATH
    public_image_base_url: str = DEFAULT_PUBLIC_IMAGE_BASE_URL
    origins: List[str] = field(default_factory=list)
    azure_account_url: Optional[str] = None
    azure_container_name: Optional[str] = None
    azure_credential: Optional[str] = None
    azure_poster_folder: str = "netflixPosters"
    force_https: bool = True
    port: int = 3005

    @property
    def remote_storage_configured(self) -> bool:
        return bool(self.azure_account_url and self.azure_container_name)

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """
        Builds the configuration from environment variables, after loading
        a local .env file if one exists.
        """
        load_dotenv()

        return cls(
            media_file_path=Path(
                os.getenv("MEDIA_FILE_PATH") or DEFAULT_MEDIA_FILE_PATH
            ).resolve(),
            image_folder_path=Path(
                os.getenv("IMAGE_FOLDER_PATH") or DEFAULT_IMAGE_FOLDER_PATH
            ).resolve(),
            public_image_base_url=os.getenv(
                "PUBLIC_IMAGE_BASE_URL", DEFAULT_PUBLIC_IMAGE_BASE_URL
            ).rstrip("/"),
            origins=_split_origins(
                os.getenv("ORIGINS"),
                os.getenv("FRONT_DEV_URL"),
                os.getenv("FRONT_PROD_URL"),
            ),
            azure_account_url=os.getenv("AZURE_ACCOUNT_URL"),
            azure_container_name=os.getenv("AZURE_CONTAINER_NAME"),
            azure_credential=os.getenv("AZURE_CREDENTIAL"),
            azure_poster_folder=os.getenv("AZURE_POSTER_FOLDER", "netflixPosters"),
            force_https=_env_flag("FORCE_HTTPS", True),
            port=int(os.getenv("PORT", "3005")),
        )
