from __future__ import annotations

"""
Typed Message Dispatch.

Routes commands and events to the handlers subscribed for their type (or any
of its base classes). Delivery is synchronous and in subscription order,
which keeps controller behavior deterministic under test.
"""

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, List, Type

from mdnavigator.domain.events import Message

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventBus:
    """In-process publish/subscribe hub keyed by message class."""

    def __init__(self) -> None:
        self._handlers: DefaultDict[Type[Message], List[Handler]] = defaultdict(list)

    def subscribe(self, message_type: Type[Message], handler: Handler) -> Callable[[], None]:
        """
        Register a handler for a message class.

        Args:
            message_type: Class to listen for; subclasses are delivered too.
            handler: Callable receiving the message instance.

        Returns:
            Callable[[], None]: Function that removes the subscription.
        """
        self._handlers[message_type].append(handler)

        def _unsubscribe() -> None:
            handlers = self._handlers.get(message_type, [])
            if handler in handlers:
                handlers.remove(handler)

        return _unsubscribe

    def publish(self, message: Message) -> int:
        """
        Deliver a message to every matching handler.

        Args:
            message: Command or event instance.

        Returns:
            int: Number of handlers invoked.
        """
        delivered = 0
        for cls in type(message).__mro__:
            for handler in list(self._handlers.get(cls, ())):
                handler(message)
                delivered += 1

        if not delivered:
            logger.debug(f"EventBus: No handler for {type(message).__name__}")
        return delivered
