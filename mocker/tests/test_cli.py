"""
Test the CLI entry point.
"""
import unittest
from unittest.mock import patch
import io
import json
import os
import tempfile
from mocker.cli import main, build_parser
from mocker.core.relay import DockerCommandError

class TestCLI(unittest.TestCase):
    """
    Test the CLI entry point.
    """

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_main_no_args(self, mock_stdout):
        """Test the main function with no arguments."""
        result = main([])

        self.assertEqual(result, 0)
        self.assertIn('usage:', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_plugin_metadata(self, mock_stdout):
        """The docker CLI metadata query is answered with JSON."""
        result = main(["docker-cli-plugin-metadata"])

        self.assertEqual(result, 0)
        self.assertEqual(json.loads(mock_stdout.getvalue())["Vendor"], "Mocker")

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_plugin_invocation_prefix(self, mock_stdout):
        """The leading plugin name passed by the docker CLI is dropped."""
        result = main(["model", "help"])

        self.assertEqual(result, 0)
        self.assertIn("Usage:  docker model COMMAND", mock_stdout.getvalue())

    def test_parser_run_prompt(self):
        """Everything after the model is the prompt."""
        args = build_parser().parse_args(["run", "llama3.2", "why", "is", "the", "sky", "blue?"])
        self.assertEqual(args.command, "run")
        self.assertEqual(args.model, "llama3.2")
        self.assertEqual(args.prompt, ["why", "is", "the", "sky", "blue?"])

    def test_parser_run_without_prompt(self):
        args = build_parser().parse_args(["run", "llama3.2"])
        self.assertEqual(args.prompt, [])

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_parser_requires_model(self, mock_stderr):
        """pull, rm and run need a model argument."""
        for command in ("pull", "rm", "run"):
            with self.assertRaises(SystemExit):
                build_parser().parse_args([command])

    @patch('mocker.commands.model.handle_command')
    def test_main_command_failure(self, mock_handle):
        """A failing docker command yields a non-zero exit status."""
        mock_handle.side_effect = DockerCommandError("command failed", "Error: boom")

        with self.assertLogs("mocker", level="ERROR") as logs:
            result = main(["rm", "llama3.2"])

        self.assertEqual(result, 1)
        self.assertIn("Error: boom", "\n".join(logs.output))

    @patch('mocker.commands.model.handle_command')
    def test_main_keyboard_interrupt(self, mock_handle):
        mock_handle.side_effect = KeyboardInterrupt()

        with self.assertLogs("mocker", level="INFO"):
            result = main(["run", "llama3.2"])

        self.assertEqual(result, 1)

    @patch('mocker.commands.model.handle_command')
    def test_main_passes_exit_status(self, mock_handle):
        """The handler's exit status is returned unchanged."""
        mock_handle.return_value = 130

        self.assertEqual(main(["run", "llama3.2"]), 130)

    def test_main_missing_config(self):
        with self.assertLogs("mocker", level="ERROR"):
            result = main(["--config", "/nonexistent/mocker.conf", "list"])
        self.assertEqual(result, 1)

    @patch('mocker.commands.model.handle_command')
    def test_main_invalid_config(self, mock_handle):
        """A config file with mistyped values is reported, not raised."""
        for data in ({"port": None}, {"api_base": 5}):
            with tempfile.NamedTemporaryFile("w", suffix=".conf", delete=False) as f:
                json.dump(data, f)
            self.addCleanup(os.unlink, f.name)

            with self.assertLogs("mocker", level="ERROR") as logs:
                result = main(["--config", f.name, "status"])

            self.assertEqual(result, 1)
            self.assertIn("Invalid setting", "\n".join(logs.output))
        mock_handle.assert_not_called()

if __name__ == '__main__':
    unittest.main()
