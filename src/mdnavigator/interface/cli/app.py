from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persistent storage, environment and flags), then one action
against the viewer server. The TreeView and Shutdown controllers run with
the inline task runner, so every command completes before the next one is
published.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from mdnavigator.core.rendering.html_renderer import render_tree_html
from mdnavigator.core.rendering.text_renderer import render_tree_text
from mdnavigator.core.services.event_bus import EventBus
from mdnavigator.core.services.shutdown_controller import ShutdownDialogController
from mdnavigator.core.services.tree_controller import TreeViewController
from mdnavigator.core.services.validator import validate_config
from mdnavigator.domain.config import get_default_config, load_config, save_config
from mdnavigator.domain.errors import FetchError
from mdnavigator.domain.events import (
    ConfirmShutdown,
    LoadTree,
    OpenShutdownDialog,
    ToggleNode,
)
from mdnavigator.domain.tree_models import NodeState, TreeModel, view_target
from mdnavigator.infra.logging import LoggingConfig, configure_logging, get_logger
from mdnavigator.infra.network import ViewerApiClient
from mdnavigator.interface.cli import args as cli_args
from mdnavigator.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 usage, 130 interrupted).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration resolution
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    config, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console only, level from the resolved config)
    configure_logging(LoggingConfig(level=config["log_level"], console=True))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(config, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        if not save_config(config):
            print(i18n.t("cli.errors.save"), file=sys.stderr)
            return 1
        print(i18n.t("cli.status.saved"))
        return 0

    client = ViewerApiClient.from_config(config)

    # 4. Action routing
    try:
        if args.view_path is not None:
            return _run_view(client, args.view_path, args.json_output)
        if args.list_path is not None:
            return _run_list(client, args.list_path, args.json_output)
        if args.tree or args.html:
            return _run_tree(client, config["root_path"], max(1, args.depth), args.html)
        if args.shutdown:
            return _run_shutdown(client, args.assume_yes)
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return 130

    print(i18n.t("cli.errors.no_action"), file=sys.stderr)
    return 2

# -----------------------------------------------------------------------------
# ACTIONS
# -----------------------------------------------------------------------------

def _run_view(client: ViewerApiClient, raw_path: str, as_json: bool) -> int:
    """Print the content URL of a file without contacting the server."""
    target = view_target(cli_args.normalize_server_path(raw_path))
    url = client.view_url(target)
    if as_json:
        print(json.dumps({"target": target, "url": url}))
    else:
        print(url)
    return 0


def _run_list(client: ViewerApiClient, raw_path: str, as_json: bool) -> int:
    """Print one directory listing."""
    path = cli_args.normalize_server_path(raw_path)
    try:
        entries = client.list_directory(path) or []
    except FetchError as e:
        print(f"ERROR: {i18n.t('cli.errors.fetch', path=path, error=str(e))}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps([{"name": e.name, "path": e.path, "is_dir": e.is_dir} for e in entries], ensure_ascii=False))
    else:
        for entry in entries:
            marker = "d" if entry.is_dir else "-"
            print(f"{marker} {entry.path}")
    return 0


def _run_tree(client: ViewerApiClient, root_path: str, depth: int, as_html: bool) -> int:
    """Load the tree down to ``depth`` levels and print it."""
    bus = EventBus()
    controller = TreeViewController(client, bus, model=TreeModel(root_path)).bind()
    bus.publish(LoadTree())
    _expand_levels(controller, bus, depth - 1)

    model = controller.model
    if as_html:
        print(render_tree_html(model))
    else:
        print("\n".join(render_tree_text(model)))

    if model.root.state is NodeState.FAILED:
        print(f"ERROR: {i18n.t('cli.errors.fetch', path=root_path, error=model.root.error)}", file=sys.stderr)
        return 1
    return 0


def _run_shutdown(client: ViewerApiClient, assume_yes: bool) -> int:
    """Confirm, then send the shutdown signal through the dialog controller."""
    if not assume_yes:
        answer = input(i18n.t("shutdown.confirm_cli", url=client.base_url))
        if answer.strip().lower() not in ("y", "yes"):
            print(i18n.t("shutdown.cancelled"))
            return 1

    bus = EventBus()
    controller = ShutdownDialogController(client, bus).bind()
    bus.publish(OpenShutdownDialog())
    bus.publish(ConfirmShutdown())

    if controller.model.terminated:
        print(controller.model.page_body)
        return 0

    print(f"ERROR: {controller.model.message}", file=sys.stderr)
    return 1

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _expand_levels(controller: TreeViewController, bus: EventBus, levels: int) -> None:
    """Expand every loaded directory breadth-first for the given number of levels."""
    model = controller.model
    frontier = [model.root.path]
    for _ in range(levels):
        next_frontier: List[str] = []
        for path in frontier:
            for child in model.children_of(path):
                if not child.is_dir:
                    continue
                if not child.expanded:
                    bus.publish(ToggleNode(child.path))
                if child.state is NodeState.LOADED:
                    next_frontier.append(child.path)
        frontier = next_frontier


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-null overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
