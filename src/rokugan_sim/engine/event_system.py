"""Event system for triggered abilities and game state changes."""

from enum import Enum
from typing import Any, Callable, Dict, List, Tuple, Union
from dataclasses import dataclass, field

from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class EventName(Enum):
    """Named game events. The value doubles as the handler method name."""
    # Game lifecycle
    DECKS_PREPARED = "on_decks_prepared"
    BEGIN_ROUND = "on_begin_round"
    GAME_ENDED = "on_game_ended"

    # Phase structure
    PHASE_STARTED = "on_phase_started"
    PHASE_ENDED = "on_phase_ended"

    # Conflicts
    CONFLICT_DECLARED = "on_conflict_declared"
    CONFLICT_FINISHED = "on_conflict_finished"

    # Cards
    CARD_PLAYED = "on_card_played"
    CARD_ENTERS_PLAY = "on_card_enters_play"
    CARD_LEFT_PLAY = "on_card_left_play"
    CARD_DISCARDED = "on_card_discarded"
    CARD_BOWED = "on_card_bowed"
    CARD_READIED = "on_card_readied"
    CONTROL_CHANGED = "on_control_changed"


EventKey = Union[EventName, str]
Handler = Callable[['Event'], None]


def event_key(name: EventKey) -> str:
    """Normalise an event name to the string used for subscriptions."""
    if isinstance(name, EventName):
        return name.value
    return name


class DuplicateSubscriptionError(ValueError):
    """Raised when an owner subscribes to the same event name twice."""
    pass


@dataclass(eq=False)
class Event:
    """A single notification, created fresh for every raise."""
    name: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    cancelled: bool = False
    resolved: bool = False

    def __getattr__(self, item: str) -> Any:
        # Only reached for attributes not set on the instance
        if item == 'parameters':
            raise AttributeError(item)
        try:
            return self.parameters[item]
        except KeyError:
            raise AttributeError(f"Event '{self.name}' has no parameter '{item}'") from None

    def cancel(self) -> None:
        """Mark the event as cancelled for the raising code to inspect."""
        self.cancelled = True

    def resolve(self) -> None:
        """Mark the event as resolved by a handler."""
        self.resolved = True


class EventDispatcher:
    """Synchronous, owner-scoped publish/subscribe.

    Each event name maps to an ordered list of (owner, handler) pairs.
    Handlers run in the order their subscriptions were made, and an owner
    may hold at most one subscription per event name.
    """

    def __init__(self):
        self._subscriptions: Dict[str, List[Tuple[Any, Handler]]] = {}

    def subscribe(self, name: EventKey, owner: Any, handler: Handler) -> None:
        """Attach a handler for an owner.

        Raises:
            DuplicateSubscriptionError: if the owner is already subscribed to the name
        """
        key = event_key(name)
        subscribers = self._subscriptions.setdefault(key, [])
        if any(existing is owner for existing, _ in subscribers):
            raise DuplicateSubscriptionError(f"{owner!r} is already subscribed to '{key}'")
        subscribers.append((owner, handler))
        logger.debug("Subscribed %r to %s", owner, key)

    def unsubscribe(self, name: EventKey, owner: Any) -> bool:
        """Detach the owner's handler for a name. Returns whether one was removed."""
        key = event_key(name)
        subscribers = self._subscriptions.get(key)
        if not subscribers:
            return False

        for index, (existing, _) in enumerate(subscribers):
            if existing is owner:
                del subscribers[index]
                if not subscribers:
                    del self._subscriptions[key]
                logger.debug("Unsubscribed %r from %s", owner, key)
                return True
        return False

    def is_subscribed(self, name: EventKey, owner: Any) -> bool:
        return any(existing is owner for existing, _ in self._subscriptions.get(event_key(name), []))

    def listener_count(self, name: EventKey) -> int:
        return len(self._subscriptions.get(event_key(name), []))

    def owners_for(self, name: EventKey) -> List[Any]:
        """Owners subscribed to a name, in dispatch order."""
        return [owner for owner, _ in self._subscriptions.get(event_key(name), [])]

    def raise_event(self, name: EventKey, **parameters: Any) -> Event:
        """Build an event and deliver it to every current subscriber.

        The subscriber list is captured before the first handler runs, so
        subscriptions made during dispatch only see the next raise. A
        subscription dropped during dispatch is skipped if its turn has not
        come yet. Handlers may raise further events; those are dispatched
        to completion before the remaining handlers here are called.
        """
        key = event_key(name)
        event = Event(name=key, parameters=parameters)
        subscribers = list(self._subscriptions.get(key, []))

        logger.debug("Raising %s to %d handler(s)", key, len(subscribers))
        for subscription in subscribers:
            if not any(live is subscription for live in self._subscriptions.get(key, ())):
                continue
            _, handler = subscription
            handler(event)

        return event

    def clear(self) -> None:
        """Drop every subscription."""
        self._subscriptions.clear()
