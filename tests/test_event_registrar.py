"""Tests for owner-scoped event registration."""

import pytest
from rokugan_sim.engine.event_registrar import EventRegistrar
from rokugan_sim.engine.event_system import EventDispatcher, EventName


class SpellCounter:
    """Owner with handler methods named after the events it wants."""

    def __init__(self):
        self.played = 0
        self.finished = 0

    def on_card_played(self, event):
        self.played += 1

    def on_conflict_finished(self, event):
        self.finished += 1


class TestEventRegistrar:
    """Test registering, unregistering and teardown."""

    def setup_method(self):
        self.dispatcher = EventDispatcher()
        self.owner = SpellCounter()
        self.registrar = EventRegistrar(self.dispatcher, self.owner)

    def test_register_binds_method_named_after_event(self):
        """Test that each name is bound to the owner's method of the same name."""
        self.registrar.register([EventName.CARD_PLAYED, EventName.CONFLICT_FINISHED])

        self.dispatcher.raise_event(EventName.CARD_PLAYED)
        self.dispatcher.raise_event(EventName.CONFLICT_FINISHED)

        assert self.owner.played == 1
        assert self.owner.finished == 1
        assert self.registrar.active
        assert self.registrar.registered_names == {"on_card_played", "on_conflict_finished"}

    def test_register_is_idempotent_per_name(self):
        """Test that registering an already registered name adds nothing."""
        self.registrar.register([EventName.CARD_PLAYED])
        self.registrar.register([EventName.CARD_PLAYED, EventName.CONFLICT_FINISHED])

        self.dispatcher.raise_event(EventName.CARD_PLAYED)

        assert self.owner.played == 1
        assert self.dispatcher.listener_count(EventName.CARD_PLAYED) == 1

    def test_register_without_handler_raises(self):
        """Test that naming an event the owner cannot handle is an error."""
        with pytest.raises(ValueError):
            self.registrar.register([EventName.CARD_BOWED])

        assert not self.dispatcher.is_subscribed(EventName.CARD_BOWED, self.owner)

    def test_unregister_selected_names(self):
        self.registrar.register([EventName.CARD_PLAYED, EventName.CONFLICT_FINISHED])

        self.registrar.unregister([EventName.CARD_PLAYED])
        self.dispatcher.raise_event(EventName.CARD_PLAYED)
        self.dispatcher.raise_event(EventName.CONFLICT_FINISHED)

        assert self.owner.played == 0
        assert self.owner.finished == 1

    def test_unregister_unknown_name_is_ignored(self):
        """Test that unregistering a name never registered does nothing."""
        self.registrar.register([EventName.CARD_PLAYED])

        self.registrar.unregister([EventName.CARD_BOWED, "on_custom"])

        assert self.registrar.registered_names == {"on_card_played"}

    def test_unregister_all_then_nothing_is_delivered(self):
        """Test that after teardown the owner receives no further events."""
        self.registrar.register([EventName.CARD_PLAYED, EventName.CONFLICT_FINISHED])

        self.registrar.unregister_all()
        self.dispatcher.raise_event(EventName.CARD_PLAYED)
        self.dispatcher.raise_event(EventName.CONFLICT_FINISHED)

        assert self.owner.played == 0
        assert self.owner.finished == 0
        assert not self.registrar.active

    def test_unregister_all_twice_is_harmless(self):
        self.registrar.register([EventName.CARD_PLAYED])

        self.registrar.unregister_all()
        self.registrar.unregister_all()

        assert self.dispatcher.listener_count(EventName.CARD_PLAYED) == 0

    def test_register_again_after_teardown(self):
        """Test that a torn down registrar can be registered again."""
        self.registrar.register([EventName.CARD_PLAYED])
        self.registrar.unregister_all()

        self.registrar.register([EventName.CARD_PLAYED])
        self.dispatcher.raise_event(EventName.CARD_PLAYED)

        assert self.owner.played == 1

    def test_registrars_for_different_owners_are_independent(self):
        """Test that tearing down one owner leaves another subscribed."""
        other_owner = SpellCounter()
        other_registrar = EventRegistrar(self.dispatcher, other_owner)
        self.registrar.register([EventName.CARD_PLAYED])
        other_registrar.register([EventName.CARD_PLAYED])

        self.registrar.unregister_all()
        self.dispatcher.raise_event(EventName.CARD_PLAYED)

        assert self.owner.played == 0
        assert other_owner.played == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
