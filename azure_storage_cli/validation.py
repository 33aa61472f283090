"""
Validation utilities for resolved azure-storage settings.
"""

import logging
from pathlib import Path, PurePath

from azure_storage_cli.exceptions import MissingParameterError
from azure_storage_cli.models import Command, EffectiveSettings

logger = logging.getLogger(__name__)

CREDENTIAL_FIELDS = ("storage_account", "storage_master_key")

# Fields each command needs besides the credentials, checked in this order.
REQUIRED_FIELDS: dict[Command, tuple[str, ...]] = {
    Command.LIST: (),
    Command.GET: ("container", "blob", "local"),
    Command.PUT: ("local", "container", "blob"),
    Command.APPEND: ("local", "container", "blob"),
    Command.PUT_APPEND: ("container", "blob"),
    Command.DELETE: ("container", "blob"),
}

FIELD_LABELS = {
    "storage_account": "storage account",
    "storage_master_key": "storage master key",
    "container": "container name",
    "blob": "blob name",
    "local": "local path",
}


def required_fields(command: Command) -> tuple[str, ...]:
    """
    Get the settings fields that must be non-empty before running a command.

    Args:
        command (Command): The command to run.

    Returns:
        tuple[str, ...]: Field names, credentials first.
    """
    return CREDENTIAL_FIELDS + REQUIRED_FIELDS[command]


def validate_settings(settings: EffectiveSettings) -> None:
    """
    Check that every field the command needs is set.

    Args:
        settings (EffectiveSettings): Resolved settings.

    Raises:
        MissingParameterError: For the first required field that is empty.
    """
    for name in required_fields(settings.command):
        if not getattr(settings, name):
            raise MissingParameterError(FIELD_LABELS[name], str(settings.command))

    logger.debug(f"Settings valid for '{settings.command}'")


def derive_blob_name(local: str) -> str:
    """
    Use the file name component of a local path as a blob name.

    Returns an empty string when the path has no file name (e.g. "/", "" or "..").
    """
    if not local:
        return ""
    name = PurePath(local).name
    if name in ("", ".", ".."):
        return ""
    return name


def resolve_download_path(local: str, blob: str) -> Path:
    """
    Get the file a downloaded blob is written to.

    Args:
        local (str): Local path given by the user.
        blob (str): Remote blob name.

    Returns:
        Path: local/blob if local is an existing directory, otherwise local itself.
    """
    path = Path(local)
    if path.is_dir():
        path = path / blob
        logger.debug(f"local path (complemented) = {path}")
    return path
