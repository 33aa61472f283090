#!/usr/bin/env python3
"""
Entry point for running azure_storage_cli as a module.
Usage: python -m azure_storage_cli
"""

import sys

from azure_storage_cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
