from __future__ import annotations

"""
TreeView Controller.

Owns the lazy expansion lifecycle of the directory tree. Each directory is
listed at most once per successful load: the node enters LOADING before the
request is dispatched, so repeated toggles while a request is in flight only
flip visibility. Views never touch the model directly; they publish
commands and re-render on NodeChanged / ContentTargetChanged events.
"""

import logging
from functools import partial
from typing import Any, Optional

from mdnavigator.core.services.event_bus import EventBus
from mdnavigator.core.services.tasks import TaskRunner, run_inline
from mdnavigator.domain.errors import FetchError
from mdnavigator.domain.events import (
    ContentTargetChanged,
    LoadTree,
    NodeChanged,
    ReloadTree,
    SelectFile,
    ToggleNode,
)
from mdnavigator.domain.tree_models import (
    ContentFrame,
    NodeState,
    TreeModel,
    view_target,
)
from mdnavigator.infra.network import ViewerApiClient

logger = logging.getLogger(__name__)


class TreeViewController:
    """
    Translate tree commands into model transitions and listing requests.

    Args:
        client: API client used for directory listings.
        bus: Message bus shared with the views.
        model: Tree model to mutate (a fresh one rooted at ``/`` by default).
        runner: Executes listing requests; inline by default.
        content: Content frame receiving file selections.
    """

    def __init__(
            self,
            client: ViewerApiClient,
            bus: EventBus,
            model: Optional[TreeModel] = None,
            runner: TaskRunner = run_inline,
            content: Optional[ContentFrame] = None,
    ):
        self.client = client
        self.bus = bus
        self.model = model if model is not None else TreeModel()
        self.runner = runner
        self.content = content if content is not None else ContentFrame()

    def bind(self) -> "TreeViewController":
        """Subscribe the controller to its commands."""
        self.bus.subscribe(LoadTree, lambda _cmd: self.load_root())
        self.bus.subscribe(ReloadTree, lambda _cmd: self.reload())
        self.bus.subscribe(ToggleNode, lambda cmd: self.toggle_node(cmd.path))
        self.bus.subscribe(SelectFile, lambda cmd: self.select_file(cmd.path))
        return self

    # -------------------------------------------------------------------------
    # COMMANDS
    # -------------------------------------------------------------------------

    def load_root(self) -> None:
        """Request the root listing for the tree container."""
        logger.info(f"Loading tree root '{self.model.root.path}' from {self.client.base_url}")
        self.fetch_and_render(self.model.root.path)

    def reload(self) -> None:
        """Discard every loaded node and list the root again."""
        self.model.reset()
        self.load_root()

    def fetch_and_render(self, path: str) -> None:
        """
        List a directory and attach the result below its node.

        The node is marked LOADING synchronously; the outcome is applied by
        the completion callback, whichever thread the runner used.
        """
        node = self.model.mark_loading(path)
        self.bus.publish(NodeChanged(path))
        self.runner(
            partial(self.client.list_directory, path),
            partial(self._apply_listing, path, node.request_id),
        )

    def toggle_node(self, path: str) -> bool:
        """
        Expand or collapse a directory node.

        Returns:
            bool: True when a listing request was started.
        """
        if path not in self.model:
            logger.warning(f"Toggle ignored for unknown node '{path}'")
            return False

        node = self.model.get(path)
        if not node.is_dir or node.state is NodeState.EMPTY:
            return False

        if node.has_children_container:
            node.expanded = not node.expanded
            self.bus.publish(NodeChanged(path))
            return False

        self.fetch_and_render(path)
        return True

    def select_file(self, path: str) -> Optional[str]:
        """
        Route the content frame to a file.

        Returns:
            Optional[str]: The new frame target, or None if the path is not
            a known file.
        """
        node = self.model.get(path) if path in self.model else None
        if node is None or node.is_dir:
            logger.warning(f"Selection ignored for '{path}': not a known file")
            return None

        target = view_target(node.path)
        self.content.src = target
        logger.debug(f"Content frame '{self.content.name}' -> {target}")
        self.bus.publish(ContentTargetChanged(target=target, frame=self.content.name))
        return target

    # -------------------------------------------------------------------------
    # COMPLETION
    # -------------------------------------------------------------------------

    def _apply_listing(self, path: str, request_id: int, outcome: Any) -> None:
        """
        Apply a listing outcome, even if the node was collapsed meanwhile.

        Outcomes of superseded requests are dropped: the node must still be
        LOADING under the same request id.
        """
        node = self.model.get(path) if path in self.model else None
        if node is None or node.state is not NodeState.LOADING or node.request_id != request_id:
            logger.debug(f"Discarding stale listing for '{path}'")
            return

        if isinstance(outcome, FetchError):
            logger.warning(f"Directory '{path}' could not be loaded: {outcome}")
            self.model.mark_failed(path, str(outcome))
        elif isinstance(outcome, Exception):
            logger.error(f"Unexpected failure while listing '{path}': {outcome}", exc_info=outcome)
            self.model.mark_failed(path, str(outcome))
        else:
            children = self.model.attach_listing(path, outcome)
            logger.debug(f"Directory '{path}' loaded with {len(children)} entries")

        self.bus.publish(NodeChanged(path))
