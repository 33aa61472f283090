"""
Settings sources and resolution for azure-storage.

Settings come from three places, in order of precedence:

    command line > config file > environment

Every source is read into a PartialSettings record, and the records are merged
field by field: the first source that provides a non-empty value wins.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import fields, replace
from pathlib import Path

from azure_storage_cli import utils, validation
from azure_storage_cli.exceptions import ConfigParseError
from azure_storage_cli.models import Command, EffectiveSettings, PartialSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "azure-storage.json"

CONFIG_KEYS = ("storage_account", "storage_master_key", "local")

ENV_STORAGE_ACCOUNT = "STORAGE_ACCOUNT"
ENV_STORAGE_MASTER_KEY = "STORAGE_MASTER_KEY"


def load_config_file(path: str | Path) -> PartialSettings:
    """
    Read settings from a JSON config file.

    A missing file is not an error: the config file is optional.

    Args:
        path (str | Path): Path of the config file.

    Returns:
        PartialSettings: Settings found in the file.

    Raises:
        ConfigParseError: If the file is not a JSON object of string values.
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"Config file not found, skipping: {path}")
        return PartialSettings()
    except OSError as e:
        raise ConfigParseError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigParseError(path, "top level must be a JSON object")

    values: dict[str, str] = {}
    for key, value in data.items():
        if key not in CONFIG_KEYS:
            logger.debug(f"Ignoring unknown config key '{key}' in {path}")
            continue
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigParseError(path, f"'{key}' must be a string")
        values[key] = value

    logger.debug(f"Loaded config file: {path}")
    return PartialSettings(**values)


def read_environment(
    environ: Mapping[str, str] | None = None, secrets_dir: Path | None = None
) -> PartialSettings:
    """
    Read storage credentials from STORAGE_ACCOUNT and STORAGE_MASTER_KEY.

    Unset variables fall back to a secret file of the same name and are
    otherwise left unset.
    """
    return PartialSettings(
        storage_account=utils.get_env_secret(ENV_STORAGE_ACCOUNT, environ, secrets_dir),
        storage_master_key=utils.get_env_secret(ENV_STORAGE_MASTER_KEY, environ, secrets_dir),
    )


def merge(*sources: PartialSettings) -> PartialSettings:
    """
    Merge partial settings, earlier sources taking precedence.

    Args:
        *sources (PartialSettings): Sources, highest precedence first.

    Returns:
        PartialSettings: For each field, the first value provided by any source.
    """
    merged: dict[str, str] = {}
    for source in sources:
        for name, value in source.provided().items():
            merged.setdefault(name, value)
    return PartialSettings(**merged)


def resolve_settings(
    command: Command,
    cli: PartialSettings,
    config: PartialSettings,
    env: PartialSettings,
    config_path: str = DEFAULT_CONFIG_PATH,
    debug: bool = False,
) -> EffectiveSettings:
    """
    Build the settings used to run a command.

    Args:
        command (Command): Command to run.
        cli (PartialSettings): Values from the command line.
        config (PartialSettings): Values from the config file.
        env (PartialSettings): Values from the environment.
        config_path (str): Config file path, kept for debug output.
        debug (bool): Whether debug output is enabled.

    Returns:
        EffectiveSettings: Validated settings.

    Raises:
        MissingParameterError: If a field the command needs is not provided by any source.
    """
    merged = merge(cli, config, env)
    values = {f.name: getattr(merged, f.name) or "" for f in fields(merged)}

    settings = EffectiveSettings(
        command=command, config_path=str(config_path), debug=debug, **values
    )

    if command in (Command.PUT, Command.APPEND) and not settings.blob:
        settings = replace(settings, blob=validation.derive_blob_name(settings.local))
        logger.debug(f"blob name (from local path) = {settings.blob}")

    validation.validate_settings(settings)
    return settings
