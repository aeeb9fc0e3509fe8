"""
Mocker - run and manage AI models through a Docker CLI plugin.

This package provides the ``docker model`` plugin, which relays model
management commands to an Ollama engine running inside a container that
the plugin starts on demand.

Commands:
    status   - Check if the model runner is running
    help     - Show the custom help
    version  - Show the plugin and engine versions
    list     - List models available locally
    pull     - Download a model
    rm       - Remove a downloaded model
    run      - Run a model interactively or with a prompt
"""

__version__ = "0.1.0"
__author__ = "Richard Kiene"
__license__ = "MIT"
__url__ = "https://github.com/richardkiene/mocker"
