from __future__ import annotations

"""
Shutdown Dialog State Model.

Represents the confirm-then-act overlay as an explicit state machine:
HIDDEN -> VISIBLE -> (HIDDEN | TERMINATED | VISIBLE_WITH_ERROR). The
TERMINATED state is absorbing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mdnavigator.domain import constants as const


class DialogState(Enum):
    """Visibility lifecycle of the shutdown confirmation overlay."""
    HIDDEN = "HIDDEN"
    VISIBLE = "VISIBLE"
    VISIBLE_WITH_ERROR = "VISIBLE_WITH_ERROR"
    TERMINATED = "TERMINATED"


@dataclass
class ShutdownDialogModel:
    """
    Observable state of the shutdown dialog and of the hosting page.

    Attributes:
        state: Current machine state.
        message: Text shown inside the dialog.
        is_error: Whether the message is a failure notice.
        page_body: Replacement page content once the server went down.
        pending: A confirmation request is in flight.
    """
    state: DialogState = DialogState.HIDDEN
    message: str = const.MSG_SHUTDOWN_PROMPT
    is_error: bool = False
    page_body: Optional[str] = None
    pending: bool = False

    @property
    def visible(self) -> bool:
        return self.state in (DialogState.VISIBLE, DialogState.VISIBLE_WITH_ERROR)

    @property
    def terminated(self) -> bool:
        return self.state is DialogState.TERMINATED
