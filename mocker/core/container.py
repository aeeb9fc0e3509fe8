"""
Lifecycle of the container hosting the Ollama engine.
"""
import time
import logging
from mocker import config
from mocker.core.relay import DockerCommandError, run_docker

logger = logging.getLogger("mocker.core.container")

class RunnerContainer:
    """
    The model runner container.

    Nothing about the container is cached: every check asks docker again,
    so the container may be stopped or removed between commands.
    """

    def __init__(self, name=config.CONTAINER_NAME, image=config.ENGINE_IMAGE,
                 volume=config.VOLUME_NAME, mount_path=config.VOLUME_MOUNT_PATH,
                 port=config.ENGINE_PORT, docker_bin=config.DOCKER_BIN,
                 startup_delay=config.STARTUP_DELAY, api_base=None):
        self.name = name
        self.image = image
        self.volume = volume
        self.mount_path = mount_path
        self.port = port
        self.docker_bin = docker_bin
        self.startup_delay = startup_delay
        self.api_base = api_base or f"http://localhost:{port}"

    @classmethod
    def from_settings(cls, settings):
        """Create a runner from a settings dict as built by config.load_settings."""
        return cls(
            name=settings["container_name"],
            image=settings["image"],
            volume=settings["volume"],
            mount_path=settings["mount_path"],
            port=settings["port"],
            docker_bin=settings["docker"],
            startup_delay=settings["startup_delay"],
            api_base=settings.get("api_base"),
        )

    def __repr__(self):
        return f"RunnerContainer(name={self.name!r}, image={self.image!r})"

    def run_args(self):
        """Arguments for ``docker run`` that launch a fresh runner."""
        return [
            "run", "-d",
            "--name", self.name,
            "-v", f"{self.volume}:{self.mount_path}",
            "-p", f"{self.port}:{self.port}",
            "--pull", "always",
            self.image,
        ]

    def is_running(self):
        """
        Check whether the runner container is active.

        Returns:
            bool: True if a running container has exactly this name
        """
        try:
            output = run_docker(["ps", "--format", "{{.Names}}"], self.docker_bin)
        except DockerCommandError as e:
            logger.debug(f"Could not list containers: {e}")
            return False
        return self.name in (line.strip() for line in output.splitlines())

    def ensure_running(self):
        """
        Start the runner container unless it is already active.

        A stale container with the same name is removed first and the model
        volume is created if missing; failures of those two steps are
        ignored.

        Returns:
            bool: True if a container was started, False if one was running

        Raises:
            DockerCommandError: If the container could not be started
        """
        if self.is_running():
            return False

        print("Starting Mocker Model Runner...")

        try:
            run_docker(["rm", "-f", self.name], self.docker_bin)
        except DockerCommandError as e:
            logger.debug(f"Ignoring failed removal of {self.name}: {e}")

        try:
            run_docker(["volume", "create", self.volume], self.docker_bin)
        except DockerCommandError as e:
            logger.debug(f"Ignoring failed creation of volume {self.volume}: {e}")

        try:
            run_docker(self.run_args(), self.docker_bin)
        except DockerCommandError as e:
            raise DockerCommandError("failed to start Ollama container", e.output, e.returncode) from e

        logger.info(f"Started container {self.name} from {self.image}")
        # Give Ollama a moment to initialize
        time.sleep(self.startup_delay)
        return True
