import logging
from collections import defaultdict
from datetime import datetime
from typing import Callable, DefaultDict, List, NamedTuple

__all__ = ['EXPENSE_ADDED', 'EXPENSE_DELETED', 'EXPENSE_REJECTED', 'Event', 'EventBus', 'Handler']

logger = logging.getLogger(__name__)

EXPENSE_ADDED = "EXPENSE_ADDED"
EXPENSE_DELETED = "EXPENSE_DELETED"
EXPENSE_REJECTED = "EXPENSE_REJECTED"


class Event(NamedTuple):
    name: str
    ts: str
    payload: dict


Handler = Callable[[Event, dict], dict]


class EventBus:
    """Synchronous observer: handlers run in subscription order on publish."""

    def __init__(self):
        self._handlers: DefaultDict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers[name].append(handler)

    def unsubscribe(self, name: str, handler: Handler) -> None:
        if handler in self._handlers.get(name, []):
            self._handlers[name].remove(handler)

    def publish(self, name: str, payload: dict) -> List[dict]:
        handlers = list(self._handlers.get(name, []))
        if not handlers:
            return []

        event = Event(name=name, ts=datetime.now().isoformat(), payload=payload)
        logger.debug("Publishing %s to %d handler(s)", name, len(handlers))
        return [handler(event, payload) for handler in handlers]
