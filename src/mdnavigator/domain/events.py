from __future__ import annotations

"""
Command and Event Messages.

Commands flow from views to controllers (user intent); events flow from
controllers back to views after the model changed. Both are immutable
records dispatched through the EventBus by their concrete type.
"""

from dataclasses import dataclass
from typing import Optional

# -----------------------------------------------------------------------------
# BASE TYPES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Message:
    """Common ancestor for everything published on the bus."""


@dataclass(frozen=True)
class Command(Message):
    """A user intent addressed to a controller."""


@dataclass(frozen=True)
class Event(Message):
    """A notification that model state changed."""


# -----------------------------------------------------------------------------
# TREE VIEW COMMANDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoadTree(Command):
    """Initial load of the root listing."""


@dataclass(frozen=True)
class ReloadTree(Command):
    """Discard the tree and load the root listing again."""


@dataclass(frozen=True)
class ToggleNode(Command):
    """Click on a directory row."""
    path: str


@dataclass(frozen=True)
class SelectFile(Command):
    """Click on a file row."""
    path: str


# -----------------------------------------------------------------------------
# SHUTDOWN DIALOG COMMANDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class OpenShutdownDialog(Command):
    """Click on the shutdown trigger."""


@dataclass(frozen=True)
class CancelShutdownDialog(Command):
    """Click on the "no" button."""


@dataclass(frozen=True)
class ShutdownOverlayClicked(Command):
    """
    Click somewhere on the overlay.

    Attributes:
        on_background: True when the click hit the backdrop rather than the
            inner dialog.
    """
    on_background: bool = True


@dataclass(frozen=True)
class ConfirmShutdown(Command):
    """Click on the "yes" button."""


# -----------------------------------------------------------------------------
# EVENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NodeChanged(Event):
    """State, visibility or children of a node changed."""
    path: str


@dataclass(frozen=True)
class ContentTargetChanged(Event):
    """The content frame navigation target changed."""
    target: str
    frame: Optional[str] = None


@dataclass(frozen=True)
class ShutdownDialogChanged(Event):
    """The shutdown dialog model changed."""
