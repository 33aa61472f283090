from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from azure_storage_cli import utils


class Command(str, Enum):
    """Operations accepted on the command line."""

    LIST = "list"
    GET = "get"
    PUT = "put"
    APPEND = "append"
    PUT_APPEND = "put-append"
    DELETE = "delete"

    @classmethod
    def from_name(cls, name: str) -> "Command":
        """
        Look up a command by its command-line name.

        Args:
        - name (str): Name as typed by the user, e.g. "put-append".

        Returns:
        - Command: The matching command.

        Raises:
        - ValueError: If the name is not a known command.
        """
        for command in cls:
            if command.value == name:
                return command
        raise ValueError(f"Invalid command: {name}")

    @classmethod
    def names(cls) -> list[str]:
        return [command.value for command in cls]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PartialSettings:
    """
    Settings read from a single source.

    Each field is either a non-empty string or None ("not provided").
    Empty strings are normalised to None so they never override another source.
    """

    storage_account: str | None = None
    storage_master_key: str | None = None
    container: str | None = None
    blob: str | None = None
    local: str | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) == "":
                object.__setattr__(self, f.name, None)

    def provided(self) -> dict[str, str]:
        """Return only the fields this source actually provides."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class EffectiveSettings:
    """Settings used to run one command."""

    command: Command
    storage_account: str = ""
    storage_master_key: str = ""
    container: str = ""
    blob: str = ""
    local: str = ""
    config_path: str = ""
    debug: bool = False

    def masked(self) -> dict[str, Any]:
        """Return the settings as a dict with the master key hidden, for debug output."""
        return {
            "command": str(self.command),
            "storage_account": self.storage_account,
            "storage_master_key": utils.mask_secret(self.storage_master_key),
            "container": self.container,
            "blob": self.blob,
            "local": self.local,
            "config_path": self.config_path,
            "debug": self.debug,
        }
