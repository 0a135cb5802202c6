"""
Tests for the KVParse command-line interface.
"""

import json
import logging
import unittest
from unittest import mock
from pathlib import Path

import yaml
from click.testing import CliRunner

from KVParse.cli.commands import cli, main
from KVParse.utils.logging import PACKAGE_LOGGER, reset_logging

DATA_DIR = Path(__file__).parent / "data"
SIMPLE = str(DATA_DIR / "simple.cfg")
BROKEN = str(DATA_DIR / "test_config2.cfg")


class TestCLI(unittest.TestCase):
    """Test cases for the kvparse commands."""

    def setUp(self):
        self.runner = CliRunner()

    def tearDown(self):
        reset_logging()

    def test_dump_text(self):
        result = self.runner.invoke(cli, ['dump', SIMPLE])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Keyword: seed  |  Values: 42 \n", result.stdout)
        self.assertIn("Keyword: operators  |  Values: crossover mutation \n", result.stdout)

    def test_dump_json(self):
        result = self.runner.invoke(cli, ['dump', SIMPLE, '--format', 'json'])
        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.stdout)
        self.assertEqual(data["operators"], ["crossover", "mutation"])
        self.assertEqual(data["name"], ['"demo run"'])

    def test_dump_yaml(self):
        result = self.runner.invoke(cli, ['dump', SIMPLE, '--format', 'yaml'])
        self.assertEqual(result.exit_code, 0, result.output)
        data = yaml.safe_load(result.stdout)
        self.assertEqual(list(data), ["name", "seed", "verbose", "operators", "weights"])
        self.assertEqual(data["seed"], ["42"])

    def test_dump_syntax_error(self):
        result = self.runner.invoke(cli, ['dump', BROKEN])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("syntax error in", result.output)

    def test_dump_missing_file(self):
        result = self.runner.invoke(cli, ['dump', str(DATA_DIR / "nope.cfg")])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("failed to open configuration file", result.output)

    def test_get_typed(self):
        cases = [
            (['seed', '--type', 'integer'], "42\n"),
            (['seed', '--type', 'double'], "42.0\n"),
            (['verbose', '--type', 'boolean'], "true\n"),
            (['name'], "demo run\n"),
            (['operators', '--type', 'list'], "crossover\nmutation\n"),
            (['weights', '--type', 'vector', '--item-type', 'double'], "0.5\n0.25\n0.25\n"),
        ]
        for args, expected in cases:
            result = self.runner.invoke(cli, ['get', SIMPLE] + args)
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(result.stdout, expected, args)

    def test_get_illegal_value(self):
        result = self.runner.invoke(cli, ['get', SIMPLE, 'name', '--type', 'integer'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("illegal value", result.output)

    def test_get_ambiguous(self):
        result = self.runner.invoke(cli, ['get', SIMPLE, 'operators'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("ambiguous", result.output)

    def test_get_missing(self):
        result = self.runner.invoke(cli, ['get', SIMPLE, 'missing'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("not found", result.output)

    def test_get_missing_with_default(self):
        result = self.runner.invoke(cli, ['get', SIMPLE, 'missing', '--default', 'fallback'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "fallback\n")

    def test_get_missing_required(self):
        result = self.runner.invoke(cli, ['get', SIMPLE, 'missing', '--required', '--default', 'x'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("required keyword 'missing' not specified", result.output)

    def test_check(self):
        result = self.runner.invoke(cli, ['check', SIMPLE])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("OK (5 keywords)", result.stdout)

    def test_check_reports_each_file(self):
        result = self.runner.invoke(cli, ['check', SIMPLE, BROKEN])
        self.assertEqual(result.exit_code, 1)
        self.assertIn(f"{SIMPLE}: OK", result.output)
        self.assertIn(f"{BROKEN}: KV-PARSE-1001 syntax error in {BROKEN} (3): justtext", result.output)

    def test_log_level_option(self):
        result = self.runner.invoke(cli, ['check', '--log-level', 'debug', SIMPLE])
        self.assertEqual(result.exit_code, 0, result.output)

    def test_invalid_log_level(self):
        result = self.runner.invoke(cli, ['check', '--log-level', 'loud', SIMPLE])
        self.assertNotEqual(result.exit_code, 0)

    def test_main_configures_logging(self):
        with mock.patch("KVParse.cli.commands.cli") as cli_mock:
            main()
        cli_mock.assert_called_once_with()
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        self.assertFalse(package_logger.propagate)
        self.assertIsInstance(package_logger.handlers[0], logging.StreamHandler)


if __name__ == "__main__":
    unittest.main()
