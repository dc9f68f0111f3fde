"""End-to-end tests for the command line interface."""
import json
import logging

import pytest

from gof_patterns.cli.main import format_error_details, main, parse_args
from gof_patterns.infrastructure.logging.logger import LOGGER_NAMESPACE


@pytest.fixture(autouse=True)
def detach_log_handlers():
    """main() installs handlers on the package logger; drop them afterwards."""
    yield
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()


class TestArgumentParsing:
    def test_run_defaults(self):
        args = parse_args(["run", "observer"])
        assert args.action == "run"
        assert args.names == ["observer"]
        assert args.format == "text"
        assert not args.all

    def test_global_options(self):
        args = parse_args(["--log-level", "DEBUG", "--config", "c.json", "list", "--format", "json"])
        assert args.log_level == "DEBUG"
        assert args.config == "c.json"
        assert args.format == "json"


class TestListCommand:
    """Test listing registered demos."""

    def test_list_json(self, capsys):
        assert main(["list", "--format", "json"]) == 0

        demos = json.loads(capsys.readouterr().out)["demos"]

        assert len(demos) == 18
        assert {"name", "category", "description"} <= set(demos[0])

    def test_list_text_by_category(self, capsys):
        assert main(["list", "--category", "creational", "--format", "text"]) == 0
        assert capsys.readouterr().out.split() == [
            "abstract_factory",
            "builder",
            "factory",
            "prototype",
            "singleton",
        ]

    def test_list_table(self, capsys):
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "flyweight" in out
        assert "Category" in out


class TestRunCommand:
    """Test running demos."""

    def test_run_single_demo_text(self, capsys):
        assert main(["run", "state"]) == 0
        assert capsys.readouterr().out == "=== state ===\nIm Happy!\nIm Sad!\nIm Happy!\n"

    def test_run_several_demos_separated(self, capsys):
        assert main(["run", "state", "builder"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "=== state ==="
        assert lines[4] == ""
        assert lines[5] == "=== builder ==="

    def test_run_json(self, capsys):
        assert main(["run", "iterator", "--format", "json"]) == 0

        result = json.loads(capsys.readouterr().out)

        assert result == {
            "demos": [
                {
                    "name": "iterator",
                    "category": "behavioral",
                    "output": ["item1", "item2", "item3", "5", "10", "15", "20"],
                }
            ]
        }

    def test_run_all(self, capsys):
        assert main(["run", "--all", "--format", "json"]) == 0
        demos = json.loads(capsys.readouterr().out)["demos"]
        assert len(demos) == 18
        assert all(demo["output"] for demo in demos)

    def test_unknown_demo_fails_before_output(self, capsys):
        assert main(["run", "state", "nonexistent"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "nonexistent" in captured.err

    def test_run_without_names(self, capsys):
        assert main(["run"]) == 1
        assert "No demos specified" in capsys.readouterr().err


class TestConfiguration:
    """Test configuration handling through the CLI."""

    def test_config_file_changes_demo(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"demo": {"iterator": {"start": 10, "end": 12, "step": 1}}}))

        assert main(["--config", str(config_file), "run", "iterator", "--format", "json"]) == 0

        output = json.loads(capsys.readouterr().out)["demos"][0]["output"]
        assert output[-2:] == ["11", "12"]

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.json"), "list"]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_invalid_value_names_the_field(self, monkeypatch, capsys):
        monkeypatch.setenv("GOF_PATTERNS_ENVIRONMENT", "bad")

        assert main(["list"]) == 1

        err = capsys.readouterr().err
        assert "Error: Invalid configuration" in err
        assert "  environment: " in err
        assert "Environment must be one of" in err

    def test_invalid_json_shows_parser_message(self, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        assert main(["--config", str(config_file), "list"]) == 1

        err_lines = capsys.readouterr().err.splitlines()
        assert err_lines[0].startswith("Error: Configuration file is not valid JSON")
        assert err_lines[1].startswith("  ")

    def test_logs_never_reach_stdout(self, capsys):
        assert main(["--log-level", "DEBUG", "run", "observer"]) == 0
        captured = capsys.readouterr()
        assert "Running demo" in captured.err
        assert "Running demo" not in captured.out


def test_no_action(capsys):
    assert main([]) == 1
    assert "No action specified" in capsys.readouterr().err


class TestErrorDetails:
    """Test rendering of configuration error details."""

    def test_no_details(self):
        assert format_error_details(None) == []
        assert format_error_details([]) == []

    def test_validation_errors(self):
        details = [
            {"loc": ("demo", "iterator", "step"), "msg": "Value error, too small"},
            {"loc": (), "msg": "bad root"},
        ]
        assert format_error_details(details) == [
            "  demo.iterator.step: Value error, too small",
            "  <root>: bad root",
        ]

    def test_plain_details(self):
        assert format_error_details("Expecting value") == ["  Expecting value"]
