"""CLI tests for the build command."""

import copy
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.cli import cli
from src.config_loader import DEFAULT_CONFIG


class TestCliBuild(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp_dir.name)

    def tearDown(self):
        self.tmp_dir.cleanup()

    @patch("src.cli.setup_logging")
    @patch("src.cli.ensure_directories")
    @patch("src.cli.load_config", return_value={"logging": {}})
    @patch("src.cli.run_build")
    def test_build_prints_summary(self, mock_build, *_mocks):
        mock_build.return_value = {
            "status": "completed",
            "output_dir": "/srv/site/dist/skycms",
            "output_dir_name": "dist/skycms",
            "files": {
                "runtime": "/srv/site/dist/skycms/tailwind-runtime.js",
                "config": "/srv/site/dist/skycms/tailwind-config.js",
                "bundle": "/srv/site/dist/skycms/tailwind-bundle.js",
                "readme": "/srv/site/dist/skycms/README.md",
                "example": "/srv/site/dist/skycms/example-template.html",
            },
            "sizes": {"runtime": 407000, "config": 1900, "bundle": 408900},
            "generated_at": "2026-01-15T16:11:56.113000+00:00",
        }
        result = self.runner.invoke(cli, ["build", "--root", str(self.root)])

        self.assertEqual(result.exit_code, 0)
        kwargs = mock_build.call_args.kwargs
        self.assertEqual(kwargs["project_root"], str(self.root))
        self.assertEqual(kwargs["config"], {"logging": {}})
        self.assertIn("BUILD COMPLETE", result.output)
        self.assertIn("tailwind-bundle.js (minified + banner)", result.output)
        self.assertIn("Deploy dist/skycms/ to your web server", result.output)

    @patch("src.cli.setup_logging")
    @patch("src.cli.ensure_directories")
    @patch("src.cli.load_config")
    def test_missing_source_exits_with_failure(self, mock_config, *_mocks):
        mock_config.return_value = copy.deepcopy(DEFAULT_CONFIG)
        (self.root / "tailwind-config.js").write_text("tailwind.config = {};\n", encoding="utf-8")

        result = self.runner.invoke(cli, ["build", "--root", str(self.root)])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("tailwind.js not found!", result.output)
        self.assertFalse((self.root / "dist").exists())

    @patch("src.cli.setup_logging")
    @patch("src.cli.ensure_directories")
    @patch("src.cli.load_config")
    def test_build_runs_end_to_end(self, mock_config, *_mocks):
        mock_config.return_value = copy.deepcopy(DEFAULT_CONFIG)
        (self.root / "tailwind.js").write_text("(function(){})();\n", encoding="utf-8")
        (self.root / "tailwind-config.js").write_text(
            "tailwind.config = { theme: { extend: { colors: { brand: { 500: '#00BCD4' } } } } };\n",
            encoding="utf-8",
        )

        result = self.runner.invoke(cli, ["build", "--root", str(self.root)])

        self.assertEqual(result.exit_code, 0, result.output)
        bundle = (self.root / "dist" / "skycms" / "tailwind-bundle.js").read_text(encoding="utf-8")
        self.assertIn("#00BCD4", bundle)

    @patch("src.cli.load_config", side_effect=ValueError("Configuration root must be a mapping: config.yaml"))
    def test_bad_configuration_exits_with_failure(self, _mock_config):
        result = self.runner.invoke(cli, ["build"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error loading configuration", result.output)


if __name__ == "__main__":
    unittest.main()
