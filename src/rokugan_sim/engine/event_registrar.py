"""Owner-scoped event registration for card abilities."""

from typing import Any, Iterable, Optional, Set

from .event_system import EventDispatcher, EventKey, event_key
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class EventRegistrar:
    """Subscribes an owner's handler methods to named events.

    The handler for an event is the owner's method named after the event's
    value, so registering ``EventName.CARD_PLAYED`` attaches
    ``owner.on_card_played``. The registrar never decides when its owner is
    live; whoever moves cards calls ``unregister_all`` when the owner leaves
    play or the game ends.
    """

    def __init__(self, dispatcher: EventDispatcher, owner: Any):
        self.dispatcher = dispatcher
        self.owner = owner
        self._registered: Set[str] = set()

    @property
    def registered_names(self) -> Set[str]:
        return set(self._registered)

    @property
    def active(self) -> bool:
        return bool(self._registered)

    def register(self, names: Iterable[EventKey]) -> None:
        """Attach the owner's handler for each name. Already registered names are skipped."""
        for name in names:
            key = event_key(name)
            if key in self._registered:
                continue

            handler = getattr(self.owner, key, None)
            if not callable(handler):
                raise ValueError(f"{self.owner!r} has no handler '{key}' for event registration")

            self.dispatcher.subscribe(key, self.owner, handler)
            self._registered.add(key)

    def unregister(self, names: Optional[Iterable[EventKey]] = None) -> None:
        """Detach handlers for the given names, or for every registered name."""
        keys = self.registered_names if names is None else {event_key(name) for name in names}
        for key in keys:
            if key not in self._registered:
                continue
            self.dispatcher.unsubscribe(key, self.owner)
            self._registered.discard(key)

    def unregister_all(self) -> None:
        if self._registered:
            logger.debug("Tearing down %d registration(s) for %r", len(self._registered), self.owner)
        self.unregister()
