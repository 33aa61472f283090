#!/usr/bin/env python3
"""
Command-line interface for azure-storage.
"""

import argparse
import json
import logging
import sys

from azure_storage_cli import __version__, config
from azure_storage_cli.core import CommandRunner
from azure_storage_cli.exceptions import StorageCliError
from azure_storage_cli.models import Command, PartialSettings
from azure_storage_cli.storage import BlobStorageClient

logger = logging.getLogger(__name__)

USER_AGENT = "azure-storage-cli"

# Loggers of the Azure SDK, quiet unless --debug is given.
SDK_LOGGERS = ("azure", "urllib3")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parses command-line arguments.

    Args:
        argv: Arguments to parse (default: sys.argv[1:]).

    Returns:
        argparse.Namespace: The parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="azure-storage",
        description="Azure Storage file uploader and downloader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  list        List containers, or blobs in --container
  get         Get a blob from remote
  put         Put a block blob to remote
  append      Append a file to an existing append blob
  put-append  Create a new append blob on remote
  delete      Delete a blob from remote

Examples:
  # List containers, then blobs in a container
  %(prog)s list
  %(prog)s list -c test

  # Upload a file (blob name defaults to the file name)
  %(prog)s put -c test -l /tmp/hoge.txt

  # Download into a directory
  %(prog)s get -c test -b hoge.txt -l /tmp

Credentials are taken from the command line, then the config file, then the
STORAGE_ACCOUNT and STORAGE_MASTER_KEY environment variables.
""",
    )
    parser.add_argument("command", choices=Command.names(), help="Operation to perform")
    parser.add_argument("-b", "--blob", help="Remote blob name on Azure Storage")
    parser.add_argument(
        "--config",
        default=config.DEFAULT_CONFIG_PATH,
        help=f"Config file path (default: {config.DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("-c", "--container", help="Remote container name on Azure Storage")
    parser.add_argument("-l", "--local", help="Local file path to put or get")
    parser.add_argument("-a", "--storage_account", help="Storage account name (STORAGE_ACCOUNT)")
    parser.add_argument(
        "-k", "--storage_master_key", help="Storage account key (STORAGE_MASTER_KEY)"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug print")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    """
    Configures the logging settings based on the debug flag.

    Args:
        debug: If True, enable DEBUG logging; otherwise INFO.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)


def args_to_partial(args: argparse.Namespace) -> PartialSettings:
    """
    Collect the settings given on the command line.

    Args:
        args: Parsed arguments.

    Returns:
        PartialSettings: Values given as options; unset options are not provided.
    """
    return PartialSettings(
        storage_account=args.storage_account,
        storage_master_key=args.storage_master_key,
        container=args.container,
        blob=args.blob,
        local=args.local,
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        int: Exit code (0 for success, 1 for failure).
    """
    args = parse_args(argv)
    configure_logging(args.debug)

    try:
        command = Command.from_name(args.command)
        settings = config.resolve_settings(
            command,
            cli=args_to_partial(args),
            config=config.load_config_file(args.config),
            env=config.read_environment(),
            config_path=args.config,
            debug=args.debug,
        )

        if settings.debug:
            logger.debug("Settings:\n" + json.dumps(settings.masked(), indent=2))

        with BlobStorageClient(
            settings.storage_account, settings.storage_master_key, user_agent=USER_AGENT
        ) as client:
            result = CommandRunner(settings, client).run()

        for item in result.items:
            print(item)
        if result.command != Command.LIST:
            logger.info(f"✓ {result.message}")
        return 0

    except StorageCliError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("\nOperation cancelled by user")
        return 130
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
