"""
Azure Blob Storage client.

See https://learn.microsoft.com/rest/api/storageservices/blob-service-rest-api.
"""

import logging
from pathlib import Path
from typing import Any

import requests
from azure.core import MatchConditions
from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.core.pipeline.transport import RequestsTransport
from azure.storage.blob import BlobClient, BlobServiceClient, BlobType

from azure_storage_cli.exceptions import (
    BlobExistsError,
    BlobNotFoundError,
    BlobTypeMismatchError,
    ContainerNotFoundError,
    LocalFileNotFoundError,
    StorageOperationError,
)

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT_SUFFIX = "core.windows.net"
APPEND_BLOCK_SIZE = 4 * 1024 * 1024


class BlobStorageClient:
    """
    Client for one Azure Storage account.

    Wraps the Azure SDK's BlobServiceClient, sending requests through a
    requests.Session owned by this object.

    Attributes:
        account (str): Storage account name.
        http (requests.Session): Session used for all requests.
        service (BlobServiceClient): SDK client for the account.
    """

    def __init__(
        self,
        account: str,
        master_key: str,
        endpoint_suffix: str = DEFAULT_ENDPOINT_SUFFIX,
        user_agent: str | None = None,
    ) -> None:
        self.account = account
        self.http = requests.Session()
        self.service = BlobServiceClient(
            account_url=f"https://{account}.blob.{endpoint_suffix}",
            credential={"account_name": account, "account_key": master_key},
            transport=RequestsTransport(session=self.http, session_owner=False),
            user_agent=user_agent,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Closes the HTTP session.
        """
        self.service.close()
        self.http.close()

    def _blob(self, container: str, blob: str) -> BlobClient:
        return self.service.get_blob_client(container=container, blob=blob)

    def list_containers(self) -> list[Any]:
        """
        Lists all containers in the account.

        Returns:
            list[ContainerProperties]: Container properties, in service order.
        """
        try:
            return list(self.service.list_containers())
        except AzureError as e:
            raise translate_error(e, "list") from e

    def list_blobs(self, container: str) -> list[Any]:
        """
        Lists all blobs in a container.

        Args:
            container (str): Container name.

        Returns:
            list[BlobProperties]: Blob properties, in service order.
        """
        try:
            return list(self.service.get_container_client(container).list_blobs())
        except AzureError as e:
            raise translate_error(e, "list", container) from e

    def download_blob(self, container: str, blob: str, path: str | Path) -> int:
        """
        Downloads a blob into a local file, overwriting it.

        The blob is requested before the file is opened so a failed request
        leaves any existing file untouched.

        Returns:
            int: Number of bytes written.
        """
        try:
            downloader = self._blob(container, blob).download_blob()
        except AzureError as e:
            raise translate_error(e, "get", container, blob) from e

        try:
            with open(path, "wb") as f:
                return downloader.readinto(f)
        except AzureError as e:
            raise translate_error(e, "get", container, blob) from e
        except OSError as e:
            raise StorageOperationError("get", f"cannot write '{path}': {e.strerror}") from e

    def upload_block_blob(self, container: str, blob: str, path: str | Path) -> dict[str, Any]:
        """
        Uploads a local file as a block blob, creating or overwriting it.

        Returns:
            dict[str, Any]: Blob properties reported by the service (etag, last_modified).
        """
        with _open_local(path) as f:
            try:
                return self._blob(container, blob).upload_blob(
                    f,
                    blob_type=BlobType.BLOCKBLOB,
                    overwrite=True,
                    validate_content=True,
                )
            except AzureError as e:
                raise translate_error(e, "put", container, blob) from e

    def append_file(self, container: str, blob: str, path: str | Path) -> int:
        """
        Appends a local file to an existing append blob.

        Files larger than one append block are sent as consecutive blocks.

        Returns:
            int: Number of bytes appended.
        """
        client = self._blob(container, blob)
        appended = 0

        with _open_local(path) as f:
            try:
                while chunk := f.read(APPEND_BLOCK_SIZE):
                    client.append_block(chunk, validate_content=True)
                    appended += len(chunk)
                    logger.debug(f"Appended {appended} bytes to {container}/{blob}")

                if appended == 0:
                    # Nothing to send; still check the target is an append blob.
                    properties = client.get_blob_properties()
                    if properties.blob_type != BlobType.APPENDBLOB:
                        raise BlobTypeMismatchError(
                            container, blob, f"blob type is {properties.blob_type}"
                        )
            except AzureError as e:
                raise translate_error(e, "append", container, blob) from e

        return appended

    def create_append_blob(self, container: str, blob: str) -> dict[str, Any]:
        """
        Creates a new empty append blob.

        Fails if a blob with the same name already exists.
        """
        try:
            return self._blob(container, blob).create_append_blob(
                match_condition=MatchConditions.IfMissing
            )
        except AzureError as e:
            raise translate_error(e, "put-append", container, blob) from e

    def delete_blob(self, container: str, blob: str) -> None:
        """
        Deletes a blob.
        """
        try:
            self._blob(container, blob).delete_blob()
        except AzureError as e:
            raise translate_error(e, "delete", container, blob) from e


def _open_local(path: str | Path):
    try:
        return open(path, "rb")
    except OSError as e:
        raise LocalFileNotFoundError(str(path)) from e


def translate_error(
    error: AzureError, operation: str, container: str = "", blob: str = ""
) -> Exception:
    """
    Map an Azure SDK error to the command's error types.

    The service's own message is kept in the returned error.

    Args:
        error (AzureError): Error raised by the SDK.
        operation (str): Command being run, e.g. "get".
        container (str): Container involved, if any.
        blob (str): Blob involved, if any.

    Returns:
        Exception: The error to raise.
    """
    error_code = getattr(error, "error_code", None)
    reason = getattr(error, "message", None) or str(error)
    logger.debug(f"{operation} failed with {type(error).__name__} (error code: {error_code})")

    if error_code == "InvalidBlobType":
        return BlobTypeMismatchError(container, blob, reason)
    if error_code == "ContainerNotFound":
        return ContainerNotFoundError(container)
    if isinstance(error, ResourceNotFoundError):
        if blob:
            return BlobNotFoundError(container, blob)
        if container:
            return ContainerNotFoundError(container)
    if isinstance(error, ResourceExistsError) or error_code == "BlobAlreadyExists":
        return BlobExistsError(container, blob, reason)

    return StorageOperationError(operation, reason)
