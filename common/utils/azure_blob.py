import os
from io import BytesIO
from typing import Optional

from azure.core.exceptions import AzureError
from azure.storage.blob import BlobServiceClient, ContentSettings

from common.config import CatalogConfig
from common.errors import UploadError
from common.utils.local_storage import poster_file_name
from common.utils.logging_service import logger

CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


class BlobPosterStorage:
    """
    Uploads posters to an Azure Blob Storage container and returns the URL
    of the stored blob.
    """

    def __init__(
        self,
        container_name: str,
        account_url: Optional[str] = None,
        credential: Optional[str] = None,
        folder: str = "netflixPosters",
        blob_service_client: Optional[BlobServiceClient] = None,
    ) -> None:
        self.container_name = container_name
        self.folder = folder.strip("/")
        self.blob_service_client = blob_service_client or BlobServiceClient(
            account_url=account_url,
            credential=credential,
        )

    @classmethod
    def from_config(cls, config: CatalogConfig) -> "BlobPosterStorage":
        return cls(
            container_name=config.azure_container_name,
            account_url=config.azure_account_url,
            credential=config.azure_credential,
            folder=config.azure_poster_folder,
        )

    def __call__(self, media_id: str, data: bytes, filename: str) -> str:
        file_name = poster_file_name(media_id, filename)
        blob_path = f"{self.folder}/{file_name}" if self.folder else file_name
        content_type = CONTENT_TYPES.get(
            os.path.splitext(file_name)[1], "application/octet-stream"
        )

        try:
            blob_client = self.blob_service_client.get_blob_client(
                container=self.container_name, blob=blob_path
            )
            blob_client.upload_blob(
                BytesIO(data),
                overwrite=True,
                content_settings=ContentSettings(content_type=content_type),
            )
        except AzureError as e:
            logger.error(f"Failed to upload poster {blob_path}: {e}")
            raise UploadError("Poster could not be uploaded") from e

        logger.info(f"Uploaded: {filename} → {blob_path}")
        return blob_client.url
