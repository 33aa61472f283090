import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SECRETS_DIR = "secrets"


def get_env_secret(
    name: str, environ: Mapping[str, str] | None = None, path: Path | None = None
) -> str | None:
    """
    Get a value from the environment, falling back to a file in the secrets directory.

    Args:
        name (str): Environment variable name.
        environ (Mapping[str, str] | None): Environment to read from (default: os.environ).
        path (Path | None): Secrets directory (default: "secrets/" under the working directory).

    Returns:
        str | None: The value, or None if neither the variable nor the secret file is set.
    """
    if environ is None:
        environ = os.environ

    secret = environ.get(name)
    if secret:
        return secret

    if path is None:
        path = Path.cwd() / DEFAULT_SECRETS_DIR

    secret_file = path / name
    if secret_file.is_file():
        try:
            secret = secret_file.read_text(encoding="utf-8").rstrip("\n")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read secret file {secret_file}: {e}")
            return None
        logger.debug(f"Loaded secret from file: {secret_file}")
        return secret or None

    return None


def mask_secret(value: str, visible: int = 4) -> str:
    """
    Hide all but the first few characters of a secret.

    Args:
    - value (str): Secret to mask.
    - visible (int): Number of leading characters to keep.

    Returns:
    - str: Masked value, or an empty string for an empty secret.
    """
    if not value:
        return ""
    return f"{value[:visible]}..."
