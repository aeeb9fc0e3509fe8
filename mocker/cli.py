#!/usr/bin/env python3
"""
Main CLI entry point for the docker model plugin.
"""
import argparse
import sys
import logging
from mocker import __version__
from mocker.commands import model
from mocker.config import DEFAULT_CONFIG_FILE, load_settings
from mocker.core import RunnerContainer
from mocker.core.plugin import METADATA_SUBCOMMAND, print_metadata

def setup_logging(verbose=False):
    """Configure logging for the application"""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler()
        ]
    )
    return logging.getLogger("mocker")

def build_parser():
    """Build the argument parser for ``docker model``."""
    parser = argparse.ArgumentParser(
        prog="docker model",
        description="Run and manage AI models using open-source tools.",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help=f"Path to JSON configuration file (default: {DEFAULT_CONFIG_FILE} if present)"
    )
    parser.add_argument(
        "--api", "-a", type=str, default=None,
        help="Ollama API base URL used by status (default: the runner's published port)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")
    model.setup_parser(subparsers)
    return parser

def main(argv=None):
    """Main entry point for the CLI application."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    # The docker CLI queries plugin metadata, then invokes "docker-model model ..."
    if argv and argv[0] == METADATA_SUBCOMMAND:
        print_metadata()
        return 0
    if argv and argv[0] == "model":
        argv = argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = load_settings(args.config, args.api)
    except (OSError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1
    runner = RunnerContainer.from_settings(settings)

    try:
        return model.handle_command(args, runner)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=args.verbose)
        return 1

if __name__ == "__main__":
    sys.exit(main())
