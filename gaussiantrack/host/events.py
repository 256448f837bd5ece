"""
Publish/subscribe channel the host exposes to its plugins.

Plugins register plain callables for an event type; `post` delivers an event to
every handler registered for its class or one of its base classes. Posting is
allowed from any thread. Handlers run on the posting thread, so a handler that
touches Qt widgets must marshal that work itself.
"""
import logging
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostEvent:
    """Base class for everything posted on the host's event channel."""


@dataclass(frozen=True)
class ShutdownCommencingEvent(HostEvent):
    """Broadcast once before the host terminates, so plugins can release resources."""

    reason: str = ""


class EventChannel:
    """Thread-safe handler registry keyed by event type."""

    def __init__(self):
        self._lock = threading.Lock()
        self._handlers: dict[type, list] = {}

    def subscribe(self, event_type: type, handler) -> None:
        if not callable(handler):
            raise TypeError(f"Handler for {event_type.__name__} is not callable: {handler!r}")
        with self._lock:
            handlers = self._handlers.setdefault(event_type, [])
            if handler in handlers:
                return
            handlers.append(handler)
        logger.debug(f"Subscribed {_describe(handler)} to {event_type.__name__}")

    def unsubscribe(self, event_type: type, handler) -> bool:
        with self._lock:
            handlers = self._handlers.get(event_type, [])
            try:
                handlers.remove(handler)
            except ValueError:
                return False
            if not handlers:
                del self._handlers[event_type]
        logger.debug(f"Unsubscribed {_describe(handler)} from {event_type.__name__}")
        return True

    def handler_count(self, event_type: type | None = None) -> int:
        with self._lock:
            if event_type is None:
                return sum(len(h) for h in self._handlers.values())
            return len(self._handlers.get(event_type, []))

    def post(self, event) -> int:
        """
        Deliver `event` to all matching handlers and return how many ran.

        Delivery works on a snapshot, so handlers may (un)subscribe while the
        event is being dispatched. A failing handler is logged and skipped.
        """
        with self._lock:
            snapshot = [
                handler
                for event_type, handlers in self._handlers.items()
                if isinstance(event, event_type)
                for handler in handlers
            ]
        logger.info(f"Posting {type(event).__name__} to {len(snapshot)} handler(s)")
        delivered = 0
        for handler in snapshot:
            try:
                handler(event)
            except Exception:
                logger.error(
                    f"Handler {_describe(handler)} failed on {type(event).__name__}",
                    exc_info=True,
                )
                continue
            delivered += 1
        return delivered


def _describe(handler) -> str:
    owner = getattr(handler, "__self__", None)
    name = getattr(handler, "__qualname__", None) or repr(handler)
    if owner is not None:
        return f"{type(owner).__name__}.{getattr(handler, '__name__', name)}"
    return name
