from __future__ import annotations

"""
Unit tests for the CLI application controller.

Runs ``main`` in-process with the network layer patched, covering the
interactive shutdown confirmation and exit codes.
"""

import json
import os
from unittest.mock import patch

import pytest

from mdnavigator.domain import config as cfg
from mdnavigator.domain.errors import ShutdownError
from mdnavigator.domain.tree_models import ListingEntry
from mdnavigator.infra.network import ViewerApiClient
from mdnavigator.interface.cli.app import main

BASE = ["--use-defaults", "-u", "http://127.0.0.1:8080"]


def test_shutdown_refused_at_prompt(capsys) -> None:
    """Answering anything but yes sends nothing."""
    with patch("builtins.input", return_value="n"), \
            patch.object(ViewerApiClient, "shutdown") as mock_shutdown:
        code = main(BASE + ["--shutdown"])

    assert code == 1
    mock_shutdown.assert_not_called()
    assert "Shutdown cancelled." in capsys.readouterr().out


def test_shutdown_confirmed_at_prompt(capsys) -> None:
    with patch("builtins.input", return_value="yes"), \
            patch.object(ViewerApiClient, "shutdown", return_value="bye") as mock_shutdown:
        code = main(BASE + ["--shutdown"])

    assert code == 0
    mock_shutdown.assert_called_once()
    assert "Server has been shut down" in capsys.readouterr().out


def test_shutdown_failure_reports_error(capsys) -> None:
    with patch.object(ViewerApiClient, "shutdown", side_effect=ShutdownError("refused")):
        code = main(BASE + ["--shutdown", "-y"])

    assert code == 1
    assert "Failed to send shutdown signal" in capsys.readouterr().err


def test_list_null_body_prints_nothing(capsys) -> None:
    with patch.object(ViewerApiClient, "list_directory", return_value=None):
        code = main(BASE + ["--list", "/empty"])

    assert code == 0
    assert capsys.readouterr().out == ""


def test_tree_depth_expands_levels(capsys) -> None:
    listings = {
        "/": [ListingEntry("docs", "/docs", True)],
        "/docs": [ListingEntry("api", "/docs/api", True)],
        "/docs/api": [ListingEntry("ref.md", "/docs/api/ref.md", False)],
    }
    with patch.object(ViewerApiClient, "list_directory", side_effect=lambda p: listings[p]) as mock_list:
        code = main(BASE + ["--tree", "--depth", "3"])

    assert code == 0
    assert [c.args[0] for c in mock_list.call_args_list] == ["/", "/docs", "/docs/api"]
    assert "ref.md" in capsys.readouterr().out


def test_interrupt_returns_130(capsys) -> None:
    with patch.object(ViewerApiClient, "list_directory", side_effect=KeyboardInterrupt):
        code = main(BASE + ["--list", "/"])

    assert code == 130


@pytest.mark.parametrize("extra, level", [([], "INFO"), (["--debug"], "DEBUG")])
def test_logging_level_comes_from_resolved_config(extra, level) -> None:
    with patch("mdnavigator.interface.cli.app.configure_logging") as mock_logging:
        main(BASE + extra + ["--view", "/a.md"])

    assert mock_logging.call_args[0][0].level == level


def test_logging_level_from_environment(tmp_path) -> None:
    with patch.object(cfg, "CONFIG_FILE", str(tmp_path / "config.json")), \
            patch.dict(os.environ, {"MDV_LOG_LEVEL": "error"}), \
            patch("mdnavigator.interface.cli.app.configure_logging") as mock_logging:
        main(["--view", "/a.md"])

    assert mock_logging.call_args[0][0].level == "ERROR"


def test_save_config_persists_validated_config(tmp_path, capsys) -> None:
    target = tmp_path / "config.json"
    with patch.object(cfg, "CONFIG_FILE", str(target)):
        code = main(["--use-defaults", "-u", "docs.local:9000", "--save-config"])

    assert code == 0
    saved = json.loads(target.read_text(encoding="utf-8"))
    assert saved["base_url"] == "http://docs.local:9000"
    assert "Configuration saved." in capsys.readouterr().out


def test_save_config_failure_exits_with_error(capsys) -> None:
    with patch("mdnavigator.interface.cli.app.save_config", return_value=False):
        code = main(BASE + ["--save-config"])

    assert code == 1
    assert "Could not save the configuration." in capsys.readouterr().err
