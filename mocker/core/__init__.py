"""
Core functionality modules for the mocker package: the runner container
lifecycle, the command relay into it, and the scraping of Ollama's output.
"""

from mocker.core.relay import DockerCommandError
from mocker.core.container import RunnerContainer
