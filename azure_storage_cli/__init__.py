"""
azure-storage - Command-line uploader and downloader for Azure Blob Storage.
"""

from . import (
    config,
    exceptions,
    models,
    storage,
    utils,
    validation,
)

# Import main public API
from .core import CommandResult, CommandRunner

__version__ = "0.1.0"

__all__ = [
    # High-level API (recommended for most users)
    "CommandRunner",
    "CommandResult",
    # Low-level modules (for advanced usage)
    "config",
    "exceptions",
    "models",
    "storage",
    "utils",
    "validation",
]
