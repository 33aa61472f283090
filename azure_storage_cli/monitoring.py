"""
Simple monitoring utilities.
"""

import logging
import time
from contextlib import contextmanager

logger = logging.getLogger(__name__)


def operation_label(command: str, container: str = "", blob: str = "") -> str:
    """
    Describe a storage command and its remote target, e.g. "put test/hoge.txt".

    Missing parts are left out: "list", "list test".
    """
    target = "/".join(part for part in (container, blob) if part)
    return f"{command} {target}" if target else command


@contextmanager
def timer(command: str, container: str = "", blob: str = ""):
    """
    Log how long a storage command takes against its remote target.

    Usage:
        with timer("put", "test", "hoge.txt"):
            # do work
    """
    label = operation_label(command, container, blob)
    start = time.monotonic()
    logger.debug(f"Starting: {label}")

    try:
        yield
    finally:
        elapsed = time.monotonic() - start
        logger.debug(f"{label} finished in {elapsed:.2f}s")
