from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the navigator and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from mdnavigator.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mdnavigator CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="mdnavigator",
        description=i18n.t("app.description"),
    )

    # --- Server ---
    p.add_argument(
        "-u", "--url",
        dest="base_url",
        help=i18n.t("cli.args.url"),
        default=None,
    )

    # --- Tree Navigation ---
    p.add_argument(
        "-l", "--list",
        dest="list_path",
        metavar="PATH",
        help=i18n.t("cli.args.list"),
        default=None,
    )
    p.add_argument(
        "--tree",
        action="store_true",
        help=i18n.t("cli.args.tree"),
    )
    p.add_argument(
        "--depth",
        type=int,
        default=1,
        help=i18n.t("cli.args.depth"),
    )
    p.add_argument(
        "--html",
        action="store_true",
        help=i18n.t("cli.args.html"),
    )
    p.add_argument(
        "--view",
        dest="view_path",
        metavar="PATH",
        help=i18n.t("cli.args.view"),
        default=None,
    )

    # --- Server Control ---
    p.add_argument(
        "--shutdown",
        action="store_true",
        help=i18n.t("cli.args.shutdown"),
    )
    p.add_argument(
        "-y", "--yes",
        dest="assume_yes",
        action="store_true",
        help=i18n.t("cli.args.yes"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides


def normalize_server_path(path: str) -> str:
    """Make a user supplied server path absolute ('docs' -> '/docs')."""
    p = (path or "").strip() or "/"
    return p if p.startswith("/") else "/" + p
