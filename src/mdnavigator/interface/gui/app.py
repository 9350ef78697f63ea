from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes the CustomTkinter environment, resolves the configuration,
assembles the panels and binds them to the TreeView and Shutdown controllers
through a shared event bus. Network calls run on daemon threads and their
outcomes are marshalled back to the Tk main loop.
"""

import logging
import tkinter.messagebox as mb
from tkinter import Tk
from typing import Any, Dict

from mdnavigator.core.services.event_bus import EventBus
from mdnavigator.core.services.shutdown_controller import ShutdownDialogController
from mdnavigator.core.services.tasks import ThreadedRunner
from mdnavigator.core.services.tree_controller import TreeViewController
from mdnavigator.core.services.validator import validate_config
from mdnavigator.domain import config as cfg
from mdnavigator.domain import constants as const
from mdnavigator.domain.events import LoadTree, OpenShutdownDialog, ReloadTree
from mdnavigator.domain.tree_models import TreeModel
from mdnavigator.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_gui_log_path,
)
from mdnavigator.infra.network import ViewerApiClient
from mdnavigator.interface.gui.components.content_panel import ContentPanel
from mdnavigator.interface.gui.components.main_window import HeaderBar, create_main_window
from mdnavigator.interface.gui.components.tree_panel import TreePanel
from mdnavigator.interface.gui.dialogs.shutdown_modal import ShutdownOverlay

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main() -> None:
    """
    Initialize and launch the Graphical User Interface.

    Startup sequence: configuration recovery, logging setup, view
    construction, controller binding, initial tree load, main loop.
    """
    # -----------------------------------------------------------------------------
    # PHASE 1: CONFIGURATION AND DIAGNOSTICS
    # -----------------------------------------------------------------------------
    config = _load_gui_config()
    configure_logging(LoggingConfig(
        level=config["log_level"],
        console=True,
        log_file=get_default_gui_log_path(),
    ))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION} against {config['base_url']}")

    # -----------------------------------------------------------------------------
    # PHASE 2: CONTROLLERS
    # -----------------------------------------------------------------------------
    app = create_main_window(config["base_url"])
    bus = EventBus()
    client = ViewerApiClient.from_config(config)
    runner = ThreadedRunner(lambda fn: app.after(0, fn))

    tree_controller = TreeViewController(
        client, bus, model=TreeModel(config["root_path"]), runner=runner
    ).bind()
    shutdown_controller = ShutdownDialogController(client, bus, runner=runner).bind()

    # -----------------------------------------------------------------------------
    # PHASE 3: VIEW COMPONENT HIERARCHY
    # -----------------------------------------------------------------------------
    header = HeaderBar(
        app,
        on_reload=lambda: bus.publish(ReloadTree()),
        on_shutdown=lambda: bus.publish(OpenShutdownDialog()),
    )
    header.grid(row=0, column=0, columnspan=2, sticky="ew")

    tree_panel = TreePanel(app, tree_controller.model, bus)
    tree_panel.grid(row=1, column=0, sticky="nsew", padx=(15, 8), pady=15)

    content_panel = ContentPanel(
        app,
        tree_controller.content,
        client,
        bus,
        auto_open=config["open_in_browser"],
    )
    content_panel.grid(row=1, column=1, sticky="nsew", padx=(8, 15), pady=15)

    # Created last so that it stacks above the panels when placed
    ShutdownOverlay(app, shutdown_controller.model, bus)

    # -----------------------------------------------------------------------------
    # PHASE 4: INITIAL LOAD AND LOOP ENTRY
    # -----------------------------------------------------------------------------
    bus.publish(LoadTree())

    try:
        app.mainloop()
    except KeyboardInterrupt:
        logger.info("GUI Lifecycle: Interrupted by user.")
    finally:
        logger.info("GUI Lifecycle: Shutting down.")


def _load_gui_config() -> Dict[str, Any]:
    """Load, validate and report the configuration for the GUI session."""
    try:
        raw = cfg.load_config()
    except Exception as e:
        logger.error(f"State Error: Failure during config deserialization: {e}")
        raw = cfg.get_default_config()

    config, warnings = validate_config(raw, strict=False)
    if warnings:
        logger.warning("Configuration adjusted: " + "; ".join(warnings))
    return config


def show_fatal_error(message: str) -> None:
    """Last-resort message box used by the global supervisor."""
    root = Tk()
    root.withdraw()
    mb.showerror(f"{const.APP_NAME} - Fatal Error", message, parent=root)
    root.destroy()
