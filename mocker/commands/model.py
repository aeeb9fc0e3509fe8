"""
Model management commands for the docker model plugin.
"""
import argparse
import logging
from mocker import __version__
from mocker import utils
from mocker.core import relay, scraper, DockerCommandError, RunnerContainer

logger = logging.getLogger("mocker.model")

HELP_TEXT = """Usage:  docker model COMMAND

Commands:
  list        List models available locally
  pull        Download a model from Docker Hub
  rm          Remove a downloaded model
  run         Run a model interactively or with a prompt
  status      Check if the model runner is running
  version     Show the current version"""

def setup_parser(subparsers):
    """
    Register the model subcommands.

    Args:
        subparsers: The subparsers action of the top-level parser
    """
    subparsers.add_parser("status", help="Check if the model runner is running")
    subparsers.add_parser("help", help="Show the custom help")
    subparsers.add_parser("version", help="Show the current version")
    subparsers.add_parser("list", help="List models available locally")

    pull_parser = subparsers.add_parser("pull", help="Download a model from Docker Hub")
    pull_parser.add_argument("model", help="Model to download, e.g. llama3.2:1b")

    rm_parser = subparsers.add_parser("rm", help="Remove a downloaded model")
    rm_parser.add_argument("model", help="Model to remove")

    run_parser = subparsers.add_parser("run", help="Run a model interactively or with a prompt")
    run_parser.add_argument("model", help="Model to run")
    run_parser.add_argument("prompt", nargs=argparse.REMAINDER,
                            help="Prompt to send; starts an interactive chat if omitted")

def handle_command(args, runner=None):
    """
    Handle model commands.

    Args:
        args: Command arguments
        runner (RunnerContainer, optional): The runner container to use

    Returns:
        int: Exit code
    """
    if runner is None:
        runner = RunnerContainer()

    if args.command == "status":
        return cmd_status(args, runner)
    elif args.command == "help":
        return cmd_help(args, runner)
    elif args.command == "version":
        return cmd_version(args, runner)
    elif args.command == "list":
        return cmd_list(args, runner)
    elif args.command == "pull":
        return cmd_pull(args, runner)
    elif args.command == "rm":
        return cmd_rm(args, runner)
    elif args.command == "run":
        return cmd_run(args, runner)
    else:
        logger.error(f"Unknown command: {args.command}")
        return 1

def cmd_status(args, runner):
    """
    Report whether the runner is active without starting it.

    Returns:
        int: Exit code
    """
    if not runner.is_running():
        print("Mocker Model Runner is not running")
        return 0

    print("Mocker Model Runner is active")
    version = utils.fetch_engine_version(runner.api_base)
    if version is None:
        print(f"Ollama API is not reachable at {runner.api_base}")
        return 0

    print(f"Ollama API is reachable at {runner.api_base} (version {version})")
    loaded = [name for name in utils.fetch_running_models(runner.api_base) if name]
    if loaded:
        print(f"Models in memory: {', '.join(loaded)}")
    return 0

def cmd_help(args, runner):
    print(HELP_TEXT)
    return 0

def cmd_version(args, runner):
    """
    Print the plugin version and the version of Ollama in the runner.

    Returns:
        int: Exit code
    """
    runner.ensure_running()
    output = relay.run_in_container(runner, "ollama", "--version")
    print(f"Mocker version: {__version__}")
    print(f"Ollama version: {scraper.parse_engine_version(output)}")
    return 0

def get_model_details(runner, model_name):
    """
    Fetch architecture, quantization and parameter count for a model.

    Returns:
        tuple: (architecture, quantization, parameters), placeholders on failure
    """
    try:
        output = relay.run_in_container(runner, "ollama", "show", model_name)
    except DockerCommandError as e:
        logger.debug(f"Could not show {model_name}: {e}")
        return scraper.UNKNOWN, scraper.UNKNOWN, None
    return scraper.parse_model_details(output)

def cmd_list(args, runner):
    """
    List local models in a table enriched with details from ``ollama show``.

    Returns:
        int: Exit code
    """
    runner.ensure_running()
    output = relay.run_in_container(runner, "ollama", "list")

    print(scraper.format_list_header())
    for record in scraper.parse_list_output(output):
        arch, quant, params = get_model_details(runner, record.name)
        record = record._replace(architecture=arch, quantization=quant, parameters=params)
        print(scraper.format_list_row(record))
    return 0

def cmd_pull(args, runner):
    """
    Pull a model, echoing Ollama's progress and summarizing the download size.

    Returns:
        int: Exit code
    """
    model_name = args.model
    print(f"Pulling model {model_name} (this is just Ollama in disguise, but don't tell anyone)...")
    runner.ensure_running()

    progress = scraper.PullProgress()
    try:
        for line in relay.stream_from_container(runner, "ollama", "pull", model_name):
            print(line, flush=True)
            progress.feed(line)
    except DockerCommandError as e:
        raise DockerCommandError(f"error pulling model: {e.message}", e.output, e.returncode) from e

    print(scraper.format_download_summary(progress.total_kb))
    print(f"Model {model_name} pulled successfully (just like some other tools do, but we're honest about it)")
    return 0

def cmd_rm(args, runner):
    """
    Remove a downloaded model.

    Returns:
        int: Exit code
    """
    model_name = args.model
    runner.ensure_running()
    relay.run_in_container(runner, "ollama", "rm", model_name)
    print(f"Model {model_name} removed successfully (and we didn't charge you a subscription for it)")
    return 0

def cmd_run(args, runner):
    """
    Run a model with a one-shot prompt, or start an interactive chat.

    Returns:
        int: Exit code of the model session
    """
    model_name = args.model
    runner.ensure_running()

    if args.prompt:
        prompt = " ".join(args.prompt)
        print("Running with prompt (Ollama is doing all the work, but we'll take credit)...", flush=True)
        return relay.run_in_container_interactive(runner, "ollama", "run", model_name, prompt)

    print("Interactive chat mode started. Type 'Ctrl+C' to exit.")
    print("(What you're about to use is just Ollama's interface with our name on it)", flush=True)
    return relay.run_in_container_interactive(runner, "ollama", "run", model_name)
