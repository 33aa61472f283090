"""
Command dispatch for azure-storage.

Example usage:
    ```python
    from azure_storage_cli import config
    from azure_storage_cli.core import CommandRunner
    from azure_storage_cli.models import Command, PartialSettings
    from azure_storage_cli.storage import BlobStorageClient

    settings = config.resolve_settings(
        Command.PUT,
        cli=PartialSettings(container="test", local="/tmp/hoge.txt"),
        config=config.load_config_file("azure-storage.json"),
        env=config.read_environment(),
    )

    with BlobStorageClient(settings.storage_account, settings.storage_master_key) as client:
        result = CommandRunner(settings, client).run()
    ```
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from azure_storage_cli import validation
from azure_storage_cli.models import Command, EffectiveSettings
from azure_storage_cli.monitoring import timer
from azure_storage_cli.storage import BlobStorageClient

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result of one storage command."""

    command: Command
    success: bool
    message: str = ""
    items: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        """Allow boolean evaluation of result."""
        return self.success

    def __repr__(self) -> str:
        status = "SUCCESS" if self.success else "FAILED"
        return f"<CommandResult {self.command}: {status}>"


class CommandRunner:
    """
    Runs one command against a storage account.

    Attributes:
        settings: Resolved and validated settings.
        client: Storage client for the account in the settings.
    """

    def __init__(self, settings: EffectiveSettings, client: BlobStorageClient):
        self.settings = settings
        self.client = client

        self._handlers: dict[Command, Callable[[], CommandResult]] = {
            Command.LIST: self.list_objects,
            Command.GET: self.get,
            Command.PUT: self.put,
            Command.APPEND: self.append,
            Command.PUT_APPEND: self.put_append,
            Command.DELETE: self.delete,
        }

    @property
    def remote_path(self) -> str:
        return f"{self.settings.container}/{self.settings.blob}"

    def run(self) -> CommandResult:
        """
        Run the command named in the settings.

        Returns:
            CommandResult: Result of the command.

        Raises:
            StorageCliError: If the command fails.
        """
        command = self.settings.command
        with timer(str(command), self.settings.container, self.settings.blob):
            return self._handlers[command]()

    def list_objects(self) -> CommandResult:
        """List blobs in the container, or containers if no container is set."""
        container = self.settings.container

        if container:
            blobs = self.client.list_blobs(container)
            logger.info(f"List of {len(blobs)} blobs in container '{container}'")
            for blob in blobs:
                logger.debug(
                    f" {blob.last_modified} {blob.size:>8} {_enum_value(blob.blob_type):>10} {blob.name}"
                )
            names = [blob.name for blob in blobs]
        else:
            containers = self.client.list_containers()
            logger.info(f"List of {len(containers)} containers")
            for item in containers:
                logger.debug(f" {item.last_modified} {item.name}")
            names = [item.name for item in containers]

        return CommandResult(Command.LIST, True, f"{len(names)} item(s)", names)

    def get(self) -> CommandResult:
        """Download the blob to the local path."""
        path = validation.resolve_download_path(self.settings.local, self.settings.blob)
        size = self.client.download_blob(self.settings.container, self.settings.blob, path)
        return CommandResult(Command.GET, True, f"Downloaded {self.remote_path} to {path} ({size} bytes)")

    def put(self) -> CommandResult:
        """Upload the local file as a block blob."""
        response = self.client.upload_block_blob(
            self.settings.container, self.settings.blob, self.settings.local
        )
        logger.debug(f"put response: {response}")
        return CommandResult(Command.PUT, True, f"Uploaded {self.settings.local} to {self.remote_path}")

    def append(self) -> CommandResult:
        """Append the local file to an existing append blob."""
        size = self.client.append_file(
            self.settings.container, self.settings.blob, self.settings.local
        )
        return CommandResult(
            Command.APPEND, True, f"Appended {self.settings.local} to {self.remote_path} ({size} bytes)"
        )

    def put_append(self) -> CommandResult:
        """Create a new empty append blob."""
        response = self.client.create_append_blob(self.settings.container, self.settings.blob)
        logger.debug(f"put-append response: {response}")
        return CommandResult(Command.PUT_APPEND, True, f"Created append blob {self.remote_path}")

    def delete(self) -> CommandResult:
        """Delete the blob."""
        self.client.delete_blob(self.settings.container, self.settings.blob)
        return CommandResult(Command.DELETE, True, f"Deleted {self.remote_path}")


def _enum_value(value) -> str:
    return str(getattr(value, "value", value))
