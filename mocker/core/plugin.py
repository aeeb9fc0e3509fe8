"""
Docker CLI plugin integration.

The docker CLI discovers plugins as executables named ``docker-<name>`` in
``~/.docker/cli-plugins`` and queries them with the
``docker-cli-plugin-metadata`` subcommand before dispatching to them.
"""
import os
import sys
import json
import shutil
import logging
import argparse
from mocker import __version__, __url__
from mocker.config import (
    PLUGIN_NAME, PLUGIN_SCHEMA_VERSION, PLUGIN_VENDOR, PLUGIN_SHORT_DESCRIPTION
)

logger = logging.getLogger("mocker.core.plugin")

METADATA_SUBCOMMAND = "docker-cli-plugin-metadata"
DEFAULT_PLUGIN_DIR = os.path.join(os.path.expanduser("~"), ".docker", "cli-plugins")

def plugin_metadata():
    """Metadata reported to the docker CLI."""
    return {
        "SchemaVersion": PLUGIN_SCHEMA_VERSION,
        "Vendor": PLUGIN_VENDOR,
        "Version": __version__,
        "ShortDescription": PLUGIN_SHORT_DESCRIPTION,
        "URL": __url__,
    }

def print_metadata():
    print(json.dumps(plugin_metadata(), indent=2))

def find_plugin_executable():
    """
    Locate the installed ``docker-model`` console script.

    Returns:
        str: Path of the executable, or None if it is not on PATH
    """
    found = shutil.which(PLUGIN_NAME)
    if found:
        return found
    candidate = os.path.join(os.path.dirname(sys.executable), PLUGIN_NAME)
    if os.path.isfile(candidate):
        return candidate
    return None

def install_plugin(plugin_dir=DEFAULT_PLUGIN_DIR, source=None, force=False):
    """
    Link the plugin executable into the docker CLI plugin directory.

    Args:
        plugin_dir (str): Docker CLI plugin directory
        source (str, optional): Executable to link; located on PATH if omitted
        force (bool): Replace an existing plugin of the same name

    Returns:
        str: Path of the installed plugin

    Raises:
        FileNotFoundError: If no plugin executable can be found
        FileExistsError: If a plugin is already installed and force is not set
    """
    source = source or find_plugin_executable()
    if not source or not os.path.isfile(source):
        raise FileNotFoundError(f"Could not find the {PLUGIN_NAME} executable. Is mocker installed?")

    os.makedirs(plugin_dir, exist_ok=True)
    target = os.path.join(plugin_dir, PLUGIN_NAME)

    if os.path.lexists(target):
        if not force:
            raise FileExistsError(f"{target} already exists. Use --force to replace it.")
        logger.info(f"Replacing existing plugin at {target}")
        os.remove(target)

    os.symlink(os.path.abspath(source), target)
    installed = os.path.realpath(target)
    os.chmod(installed, os.stat(installed).st_mode | 0o111)
    logger.info(f"Linked {target} -> {source}")
    return target

def install_main(argv=None):
    """Entry point for ``mocker-install-plugin``."""
    parser = argparse.ArgumentParser(
        prog="mocker-install-plugin",
        description="Install the docker model plugin into the docker CLI plugin directory.",
    )
    parser.add_argument(
        "--plugin-dir", default=DEFAULT_PLUGIN_DIR,
        help=f"Docker CLI plugin directory (default: {DEFAULT_PLUGIN_DIR})"
    )
    parser.add_argument(
        "--source", default=None,
        help=f"Path of the {PLUGIN_NAME} executable (default: found on PATH)"
    )
    parser.add_argument(
        "--force", "-f", action="store_true",
        help="Replace an existing plugin"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')

    try:
        target = install_plugin(args.plugin_dir, args.source, args.force)
    except OSError as e:
        logger.error(f"Error: {e}")
        return 1

    print(f"Installed {target}. Try: docker model help")
    return 0
