"""
Shell -> frontend event channel.

Only names listed in events.FRONTEND_EVENTS are accepted, so a typo in a menu
callback or a frontend subscription fails loudly instead of going nowhere.
Handlers run synchronously on the caller's (GUI) thread, in subscription
order, and receive the payload only.
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping

from dia.exceptions import UnknownEventError

from .events import FRONTEND_EVENTS
from .logger import get_logger

logger = get_logger("event_bus")

Handler = Callable[[Any], None]


class EventBus:
    """Routes shell events to frontend handlers; a failing handler is logged and skipped."""

    def __init__(self, names: Iterable[str] = FRONTEND_EVENTS) -> None:
        self._names = frozenset(names)
        self._handlers: Dict[str, List[Handler]] = {}

    def _check(self, event_name: str) -> None:
        if event_name not in self._names:
            raise UnknownEventError("unknown frontend event %r" % event_name)

    def subscribe(self, event_name: str, handler: Handler) -> None:
        self._check(event_name)
        self._handlers.setdefault(event_name, []).append(handler)

    def unsubscribe(self, event_name: str, handler: Handler) -> bool:
        """Remove one registration of handler. Returns False when it was not registered."""
        handlers = self._handlers.get(event_name)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._handlers[event_name]
        return True

    def connect(self, handlers: Mapping[str, Handler]) -> Callable[[], None]:
        """
        Subscribe a whole event -> handler table at once (a frontend).
        Every name is validated before anything is registered. Returns a
        callable that removes exactly these registrations.
        """
        for event_name in handlers:
            self._check(event_name)
        pairs = list(handlers.items())
        for event_name, handler in pairs:
            self.subscribe(event_name, handler)

        def disconnect() -> None:
            for event_name, handler in pairs:
                self.unsubscribe(event_name, handler)

        return disconnect

    def missing(self) -> List[str]:
        """Frontend events nobody handles yet, in declaration order."""
        return [name for name in FRONTEND_EVENTS if name in self._names and not self._handlers.get(name)]

    def emit(self, event_name: str, data: Any = None) -> int:
        """Deliver data to every handler of event_name. Returns how many handlers ran without error."""
        self._check(event_name)
        handlers = list(self._handlers.get(event_name, ()))
        if not handlers:
            logger.warning("no frontend handler for %s", event_name)
            return 0
        delivered = 0
        for handler in handlers:
            try:
                handler(data)
            except Exception:
                logger.exception("frontend handler for %s failed", event_name)
            else:
                delivered += 1
        return delivered
