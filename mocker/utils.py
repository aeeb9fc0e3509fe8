"""
Utility functions for talking to the Ollama API published by the runner.
"""
import requests
import logging
from mocker.config import API_TIMEOUT

logger = logging.getLogger("mocker.utils")

def fetch_engine_version(api_base):
    """
    Fetch the Ollama version from the API.

    Args:
        api_base (str): API base URL

    Returns:
        str: The version string, or None if the API cannot be reached
    """
    try:
        logger.debug(f"Fetching Ollama version from {api_base}")
        resp = requests.get(f"{api_base}/api/version", timeout=API_TIMEOUT)
        resp.raise_for_status()
        data = resp.json()
        return data.get("version", "unknown")
    except (requests.RequestException, ValueError) as e:
        logger.debug(f"Ollama API at {api_base} is not reachable: {e}")
        return None

def fetch_running_models(api_base):
    """
    Fetch the models currently loaded in memory.

    Returns:
        list: Names of loaded models, empty if the API cannot be reached
    """
    try:
        resp = requests.get(f"{api_base}/api/ps", timeout=API_TIMEOUT)
        resp.raise_for_status()
        return [m.get("name") or m.get("model") for m in resp.json().get("models", [])]
    except (requests.RequestException, ValueError) as e:
        logger.debug(f"Could not fetch loaded models from {api_base}: {e}")
        return []
