"""
Relay commands to the docker CLI and into the runner container.
"""
import subprocess
import sys
import logging

logger = logging.getLogger("mocker.core.relay")

class DockerCommandError(Exception):
    """
    A docker invocation failed to start or exited with a non-zero status.
    """

    def __init__(self, message, output="", returncode=None):
        super().__init__(message)
        self.message = message
        self.output = output or ""
        self.returncode = returncode

    def __str__(self):
        if self.output:
            return f"{self.message}\nOutput: {self.output}"
        return self.message

def run_docker(args, docker_bin="docker"):
    """
    Run a docker command and capture its combined stdout and stderr.

    Args:
        args (list): Arguments passed to the docker executable
        docker_bin (str): The docker executable

    Returns:
        str: The captured output

    Raises:
        DockerCommandError: If docker cannot be started or exits non-zero
    """
    cmd = [docker_bin] + list(args)
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise DockerCommandError(f"could not run {docker_bin}: {e}") from e

    if proc.returncode != 0:
        raise DockerCommandError(
            f"{' '.join(cmd)} exited with status {proc.returncode}",
            proc.stdout,
            proc.returncode,
        )
    return proc.stdout

def exec_args(runner, args, interactive=False, tty=None):
    """
    Build the docker argument list that executes ``args`` inside the runner.

    Args:
        runner: The RunnerContainer to execute in
        args (list): Command and arguments to run in the container
        interactive (bool): Keep stdin open for an attached session
        tty (bool, optional): Allocate a pseudo-TTY; defaults to whether
            stdin is a terminal for interactive sessions

    Returns:
        list: Arguments for the docker executable
    """
    cmd = ["exec"]
    if interactive:
        if tty is None:
            tty = sys.stdin.isatty()
        cmd.append("-it" if tty else "-i")
    cmd.append(runner.name)
    cmd.extend(args)
    return cmd

def run_in_container(runner, *args):
    """
    Execute a command in the runner container and return its output.

    Raises:
        DockerCommandError: If the command fails
    """
    try:
        return run_docker(exec_args(runner, args), runner.docker_bin)
    except DockerCommandError as e:
        raise DockerCommandError("command failed", e.output, e.returncode) from e

def stream_from_container(runner, *args):
    """
    Execute a command in the runner container, yielding output lines as
    they are produced. Carriage-return progress redraws arrive as separate
    lines.

    Raises:
        DockerCommandError: If the command cannot start or exits non-zero
            once its output is exhausted
    """
    cmd = [runner.docker_bin] + exec_args(runner, args)
    logger.debug(f"Streaming: {' '.join(cmd)}")
    try:
        with subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        ) as proc:
            for line in proc.stdout:
                yield line.rstrip("\n")
            returncode = proc.wait()
    except OSError as e:
        raise DockerCommandError(f"could not run {runner.docker_bin}: {e}") from e

    if returncode != 0:
        raise DockerCommandError(
            f"{' '.join(args)} exited with status {returncode}",
            returncode=returncode,
        )

def run_in_container_interactive(runner, *args):
    """
    Execute a command in the runner container attached to this process's
    standard streams.

    Returns:
        int: Exit status of the command

    Raises:
        DockerCommandError: If docker cannot be started
    """
    cmd = [runner.docker_bin] + exec_args(runner, args, interactive=True)
    logger.debug(f"Attaching: {' '.join(cmd)}")
    try:
        return subprocess.run(cmd).returncode
    except OSError as e:
        raise DockerCommandError(f"could not run {runner.docker_bin}: {e}") from e
