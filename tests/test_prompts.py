"""Tests for prompt steps driven through the game's player commands."""

import pytest
from rokugan_sim.engine.event_system import EventName
from rokugan_sim.engine.steps import ActionWindow, MenuPrompt, SelectCardPrompt, StepStatus
from tests.helpers import (
    EventRecorder, GameTestBase, create_test_attachment, create_test_character
)


class Chooser:
    """Menu context whose 'choose' method accepts only 'yes'."""

    def __init__(self):
        self.calls = []

    def choose(self, player, arg):
        self.calls.append((player, arg))
        return arg == 'yes'

    def undeclared(self, player, arg):
        self.calls.append((player, 'undeclared'))
        return True


class TestMenuPrompt(GameTestBase):
    """Test menu prompts queued into a running game."""

    def setup_method(self):
        super().setup_method()
        self.chooser = Chooser()
        self.game.prompt_with_menu(self.player1, self.chooser, {
            'active_prompt': {
                'menu_title': 'Choose wisely',
                'buttons': [{'text': 'Yes', 'method': 'choose', 'arg': 'yes'},
                            {'text': 'No', 'method': 'choose', 'arg': 'no'}]
            }
        })
        self.game.continue_execution()
        self.prompt = self.active_step

    def test_prompt_becomes_active_step(self):
        """Test that the queued prompt interrupts the open action window."""
        assert isinstance(self.prompt, MenuPrompt)
        assert self.prompt.status == StepStatus.WAITING_FOR_INPUT
        assert self.prompt.menu_title == 'Choose wisely'

    def test_truthy_handler_completes_prompt(self):
        assert self.game.menu_button('Alice', 'yes', 'choose')

        assert self.chooser.calls == [(self.player1, 'yes')]
        assert self.prompt.is_complete()
        assert isinstance(self.active_step, ActionWindow)

    def test_falsy_handler_keeps_prompt_open(self):
        """Test that a handler returning False leaves the prompt waiting."""
        assert self.game.menu_button('Alice', 'no', 'choose')

        assert not self.prompt.is_complete()
        assert self.active_step is self.prompt

    def test_other_player_is_ignored(self):
        assert not self.game.menu_button('Bob', 'yes', 'choose')

        assert self.chooser.calls == []
        assert self.active_step is self.prompt

    def test_undeclared_method_is_ignored(self):
        """Test that only methods offered as buttons can be called."""
        assert not self.game.menu_button('Alice', None, 'undeclared')

        assert self.chooser.calls == []
        assert self.active_step is self.prompt

    def test_unknown_player_is_ignored(self):
        assert not self.game.menu_button('Nobody', 'yes', 'choose')


class TestSelectCardPrompt(GameTestBase):
    """Test card selection prompts."""

    def setup_method(self):
        super().setup_method()
        self.alice_character = self.put_into_play(self.player1, create_test_character("Alice's Samurai"))
        self.bob_character = self.put_into_play(self.player2, create_test_character("Bob's Samurai"))
        self.bob_other = self.put_into_play(self.player2, create_test_character("Bob's Courtier"))
        self.selected = []
        self.cancelled = []

    def prompt(self, **properties):
        defaults = {
            'card_condition': lambda card: card.controller is self.player2,
            'on_select': lambda player, selection: self.selected.append(selection) or True,
            'on_cancel': lambda player: self.cancelled.append(player),
        }
        defaults.update(properties)
        self.game.prompt_for_select(self.player1, defaults)
        self.game.continue_execution()
        return self.active_step

    def test_single_select_hands_card_to_callback(self):
        """Test that clicking an eligible card selects it and completes the prompt."""
        prompt = self.prompt()
        assert isinstance(prompt, SelectCardPrompt)

        self.game.card_clicked('Alice', self.bob_character.uuid)

        assert self.selected == [self.bob_character]
        assert prompt.is_complete()
        assert isinstance(self.active_step, ActionWindow)

    def test_ineligible_card_is_declined(self):
        prompt = self.prompt()

        assert not self.game.pipeline.handle_card_clicked(self.player1, self.alice_character)

        assert self.selected == []
        assert self.active_step is prompt

    def test_click_by_other_player_is_declined(self):
        prompt = self.prompt()

        assert not self.game.pipeline.handle_card_clicked(self.player2, self.bob_character)
        assert self.active_step is prompt

    def test_rejected_selection_keeps_prompt_open(self):
        """Test that on_select returning False leaves the prompt waiting."""
        prompt = self.prompt(on_select=lambda player, card: False)

        self.game.card_clicked('Alice', self.bob_character.uuid)

        assert not prompt.is_complete()
        assert self.active_step is prompt

    def test_multi_select_toggles_and_finishes_with_done(self):
        """Test that clicks toggle selection and 'done' hands over the list."""
        prompt = self.prompt(multi_select=True)

        self.game.card_clicked('Alice', self.bob_character.uuid)
        self.game.card_clicked('Alice', self.bob_other.uuid)
        assert self.bob_character.selected and self.bob_other.selected

        self.game.card_clicked('Alice', self.bob_character.uuid)
        assert not self.bob_character.selected

        assert self.game.menu_button('Alice', 'done')

        assert self.selected == [[self.bob_other]]
        assert prompt.is_complete()
        assert not self.bob_other.selected

    def test_multi_select_respects_limit(self):
        prompt = self.prompt(multi_select=True, number_of_cards=1)

        self.game.card_clicked('Alice', self.bob_character.uuid)
        self.game.card_clicked('Alice', self.bob_other.uuid)

        assert prompt.selected_cards == [self.bob_character]
        assert not self.bob_other.selected

    def test_cancel_button(self):
        """Test that the cancel button calls on_cancel and completes the prompt."""
        prompt = self.prompt()

        assert self.game.menu_button('Alice', 'cancel')

        assert self.cancelled == [self.player1]
        assert self.selected == []
        assert prompt.is_complete()

    def test_done_ignored_in_single_select(self):
        prompt = self.prompt()

        assert not self.game.menu_button('Alice', 'done')
        assert self.active_step is prompt


class TestActionWindow(GameTestBase):
    """Test alternating action windows inside each phase."""

    def test_first_player_holds_window_first(self):
        window = self.active_step

        assert isinstance(window, ActionWindow)
        assert window.player is self.player1
        assert self.game.current_phase == 'dynasty'

    def test_window_closes_after_all_players_pass(self):
        """Test that consecutive passes by every player end the phase."""
        recorder = EventRecorder(self.game, EventName.PHASE_ENDED, EventName.PHASE_STARTED)

        self.pass_action_window()
        assert self.game.current_phase == 'dynasty'
        assert self.active_step.player is self.player2

        self.pass_action_window()

        assert self.game.current_phase == 'draw'
        assert [(event.name, event.phase) for event in recorder.events] == [
            ('on_phase_ended', 'dynasty'),
            ('on_phase_started', 'draw'),
        ]

    def test_pass_out_of_turn_is_ignored(self):
        assert not self.game.menu_button('Bob', None, 'pass')

        assert self.active_step.player is self.player1

    def test_action_resets_passes(self):
        """Test that acting instead of passing keeps the window open."""
        character = self.put_into_hand(self.player2, create_test_character("Bob's Recruit"))

        self.pass_action_window()
        self.game.play_card('Bob', character.uuid)

        assert character.in_play
        window = self.active_step
        assert window.player is self.player1
        assert window.consecutive_passes == 0

        self.pass_action_window()
        assert self.game.current_phase == 'dynasty'
        self.pass_action_window()
        assert self.game.current_phase == 'draw'

    def test_playing_attachment_resets_passes(self):
        """Test that attaching a card counts as acting in the window that was open."""
        host = self.put_into_play(self.player2, create_test_character("Bob's Samurai"))
        katana = self.put_into_hand(self.player2, create_test_attachment("Katana"))
        window = self.active_step

        self.pass_action_window()
        self.game.play_card('Bob', katana.uuid)
        self.game.card_clicked('Bob', host.uuid)

        assert katana.parent is host
        assert self.active_step is window
        assert window.consecutive_passes == 0
        assert window.player is self.player1
        assert self.game.current_phase == 'dynasty'


class TestAttachmentPrompt(GameTestBase):
    """Test the host selection prompt when playing an attachment."""

    def test_attachment_goes_onto_chosen_host(self):
        host = self.put_into_play(self.player1, create_test_character("Host"))
        attachment = self.put_into_hand(self.player1, create_test_attachment("Katana"))
        recorder = EventRecorder(self.game, EventName.CARD_PLAYED)

        self.game.play_card('Alice', attachment.uuid)
        assert isinstance(self.active_step, SelectCardPrompt)
        assert recorder.events == []

        self.game.card_clicked('Alice', host.uuid)

        assert attachment.parent is host
        assert host.attachments == [attachment]
        assert attachment not in self.player1.hand
        assert [event.card for event in recorder.events] == [attachment]
        assert isinstance(self.active_step, ActionWindow)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
