"""
Test the docker CLI plugin integration.
"""
import unittest
from unittest.mock import patch
import io
import os
import json
import shutil
import tempfile
from mocker import __version__
from mocker.core.plugin import install_main, install_plugin, plugin_metadata, print_metadata

class TestPluginMetadata(unittest.TestCase):

    def test_plugin_metadata(self):
        metadata = plugin_metadata()
        self.assertEqual(metadata["SchemaVersion"], "0.1.0")
        self.assertEqual(metadata["Vendor"], "Mocker")
        self.assertEqual(metadata["Version"], __version__)
        self.assertIn("ShortDescription", metadata)
        self.assertIn("URL", metadata)

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_print_metadata(self, mock_stdout):
        """The metadata is printed as JSON for the docker CLI."""
        print_metadata()
        self.assertEqual(json.loads(mock_stdout.getvalue()), plugin_metadata())

class TestInstallPlugin(unittest.TestCase):
    """
    Test installing the plugin into a docker CLI plugin directory.
    """

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.plugin_dir = os.path.join(self.temp_dir, "cli-plugins")
        self.source = os.path.join(self.temp_dir, "docker-model")
        with open(self.source, "w") as f:
            f.write("#!/bin/sh\n")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_install_plugin(self):
        """The executable is linked into a freshly created plugin directory."""
        target = install_plugin(self.plugin_dir, self.source)

        self.assertEqual(target, os.path.join(self.plugin_dir, "docker-model"))
        self.assertTrue(os.path.islink(target))
        self.assertEqual(os.path.realpath(target), os.path.realpath(self.source))
        self.assertTrue(os.access(target, os.X_OK))

    def test_install_plugin_existing(self):
        """An existing plugin is only replaced with force."""
        install_plugin(self.plugin_dir, self.source)

        with self.assertRaises(FileExistsError):
            install_plugin(self.plugin_dir, self.source)

        target = install_plugin(self.plugin_dir, self.source, force=True)
        self.assertTrue(os.path.islink(target))

    @patch("mocker.core.plugin.find_plugin_executable")
    def test_install_plugin_missing_source(self, mock_find):
        mock_find.return_value = None
        with self.assertRaises(FileNotFoundError):
            install_plugin(self.plugin_dir)

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_install_main(self, mock_stdout):
        result = install_main(["--plugin-dir", self.plugin_dir, "--source", self.source])

        self.assertEqual(result, 0)
        self.assertIn("docker model help", mock_stdout.getvalue())

    def test_install_main_failure(self):
        result = install_main(["--plugin-dir", self.plugin_dir,
                               "--source", os.path.join(self.temp_dir, "missing")])
        self.assertEqual(result, 1)

if __name__ == "__main__":
    unittest.main()
