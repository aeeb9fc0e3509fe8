"""
Test the utility functions.
"""
import unittest
from unittest.mock import patch, MagicMock
import requests
from mocker.utils import fetch_engine_version, fetch_running_models

class TestUtils(unittest.TestCase):
    """
    Test the utility functions.
    """

    @patch("requests.get")
    def test_fetch_engine_version(self, mock_get):
        """Test the fetch_engine_version function."""
        mock_response = MagicMock()
        mock_response.json.return_value = {"version": "0.5.7"}
        mock_get.return_value = mock_response

        version = fetch_engine_version("http://localhost:11434")

        self.assertEqual(version, "0.5.7")
        self.assertEqual(mock_get.call_args[0][0], "http://localhost:11434/api/version")

    @patch("requests.get")
    def test_fetch_engine_version_unreachable(self, mock_get):
        """An unreachable API answers None."""
        mock_get.side_effect = requests.ConnectionError("Connection refused")

        self.assertIsNone(fetch_engine_version("http://localhost:11434"))

    @patch("requests.get")
    def test_fetch_engine_version_missing_field(self, mock_get):
        """A response without a version answers unknown."""
        mock_response = MagicMock()
        mock_response.json.return_value = {}
        mock_get.return_value = mock_response

        self.assertEqual(fetch_engine_version("http://gpu-box:11434"), "unknown")
        self.assertEqual(mock_get.call_args[0][0], "http://gpu-box:11434/api/version")

    @patch("requests.get")
    def test_fetch_running_models(self, mock_get):
        """Test the fetch_running_models function."""
        mock_response = MagicMock()
        mock_response.json.return_value = {
            "models": [
                {"name": "llama3.2:latest", "model": "llama3.2:latest"},
                {"model": "smollm:135m"}
            ]
        }
        mock_get.return_value = mock_response

        models = fetch_running_models("http://localhost:11434")

        self.assertEqual(models, ["llama3.2:latest", "smollm:135m"])

    @patch("requests.get")
    def test_fetch_running_models_error(self, mock_get):
        mock_get.side_effect = requests.Timeout("timed out")

        self.assertEqual(fetch_running_models("http://localhost:11434"), [])

if __name__ == "__main__":
    unittest.main()
