from __future__ import annotations

"""
Shutdown Dialog Controller.

Drives the confirm-then-act overlay. A confirmed request that succeeds
replaces the page with a static notice and ends all interaction; a failed
one keeps the dialog open with an error message so the user can retry or
close it.
"""

import logging
from typing import Any, Optional

from mdnavigator.core.services.event_bus import EventBus
from mdnavigator.core.services.tasks import TaskRunner, run_inline
from mdnavigator.domain import constants as const
from mdnavigator.domain.dialog_models import DialogState, ShutdownDialogModel
from mdnavigator.domain.events import (
    CancelShutdownDialog,
    ConfirmShutdown,
    OpenShutdownDialog,
    ShutdownDialogChanged,
    ShutdownOverlayClicked,
)
from mdnavigator.infra.network import ViewerApiClient
from mdnavigator.utils.i18n import i18n

logger = logging.getLogger(__name__)


class ShutdownDialogController:
    """
    State machine for the shutdown confirmation.

    Args:
        client: API client used for the shutdown call.
        bus: Message bus shared with the views.
        model: Dialog model to mutate.
        runner: Executes the shutdown request; inline by default.
    """

    def __init__(
            self,
            client: ViewerApiClient,
            bus: EventBus,
            model: Optional[ShutdownDialogModel] = None,
            runner: TaskRunner = run_inline,
    ):
        self.client = client
        self.bus = bus
        if model is None:
            model = ShutdownDialogModel(message=i18n.t("shutdown.prompt", default=const.MSG_SHUTDOWN_PROMPT))
        self.model = model
        self.runner = runner

    def bind(self) -> "ShutdownDialogController":
        """Subscribe the controller to its commands."""
        self.bus.subscribe(OpenShutdownDialog, lambda _cmd: self.open())
        self.bus.subscribe(CancelShutdownDialog, lambda _cmd: self.cancel())
        self.bus.subscribe(ShutdownOverlayClicked, lambda cmd: self.overlay_clicked(cmd.on_background))
        self.bus.subscribe(ConfirmShutdown, lambda _cmd: self.confirm())
        return self

    # -------------------------------------------------------------------------
    # COMMANDS
    # -------------------------------------------------------------------------

    def open(self) -> None:
        if self.model.terminated or self.model.visible:
            return
        # A previous failure notice stays in place, as the dialog text does
        self.model.state = DialogState.VISIBLE_WITH_ERROR if self.model.is_error else DialogState.VISIBLE
        self._changed()

    def cancel(self) -> None:
        if not self.model.visible:
            return
        self.model.state = DialogState.HIDDEN
        self._changed()

    def overlay_clicked(self, on_background: bool) -> None:
        """Clicks on the backdrop cancel; clicks inside the dialog do nothing."""
        if on_background:
            self.cancel()

    def confirm(self) -> bool:
        """
        Send the shutdown request.

        Returns:
            bool: True when a request was dispatched.
        """
        if not self.model.visible or self.model.pending:
            return False

        self.model.pending = True
        self._changed()
        self.runner(self.client.shutdown, self._apply_result)
        return True

    # -------------------------------------------------------------------------
    # COMPLETION
    # -------------------------------------------------------------------------

    def _apply_result(self, outcome: Any) -> None:
        self.model.pending = False

        if isinstance(outcome, Exception):
            logger.warning(f"Shutdown signal failed: {outcome}")
            self.model.message = i18n.t("shutdown.failed", default=const.MSG_SHUTDOWN_FAILED)
            self.model.is_error = True
            if self.model.visible:
                self.model.state = DialogState.VISIBLE_WITH_ERROR
        else:
            logger.info("Server acknowledged the shutdown signal.")
            self.model.state = DialogState.TERMINATED
            self.model.page_body = i18n.t("shutdown.done", default=const.MSG_SHUTDOWN_DONE)

        self._changed()

    def _changed(self) -> None:
        self.bus.publish(ShutdownDialogChanged())
