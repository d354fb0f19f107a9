"""Tests for the ChatState reducers."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from zapchat.chat import state as reducers
from zapchat.chat.models import ChatState, ChatStatus


class TestChatState:
    """Tests for derived state."""

    def test_initial_state(self):
        state = ChatState()
        assert state.loading
        assert state.status == ChatStatus.IDLE
        assert state.demo_mode
        assert not state.can_send

    @pytest.mark.parametrize(
        "text,typing,expected",
        [("hi", False, True), ("  ", False, False), ("", False, False), ("hi", True, False)],
    )
    def test_can_send(self, text, typing, expected):
        assert ChatState(input_text=text, typing=typing).can_send is expected

    def test_demo_mode_follows_credential(self):
        assert not ChatState(credential="abc").demo_mode


class TestTypingReducers:
    """Tests for the pending-reply counter."""

    def test_begin_and_end(self):
        state = reducers.begin_typing(ChatState())
        assert state.typing
        assert state.status == ChatStatus.AWAITING_REPLY
        state = reducers.end_typing(state)
        assert not state.typing
        assert state.status == ChatStatus.IDLE

    def test_overlapping_replies_keep_typing(self):
        state = reducers.begin_typing(reducers.begin_typing(ChatState()))
        state = reducers.end_typing(state)
        assert state.typing
        assert state.pending_replies == 1
        state = reducers.end_typing(state)
        assert not state.typing

    def test_end_without_begin_stays_idle(self):
        state = reducers.end_typing(ChatState())
        assert not state.typing
        assert state.pending_replies == 0

    @given(st.lists(st.booleans(), max_size=40))
    def test_typing_iff_pending(self, steps):
        """Property test: typing is on exactly while replies are pending."""
        state = ChatState()
        for begin in steps:
            state = reducers.begin_typing(state) if begin else reducers.end_typing(state)
            assert state.pending_replies >= 0
            assert state.typing == (state.pending_replies > 0)


class TestPanelReducers:
    """Tests for dialogs, hints and the command palette."""

    def test_closing_credential_modal_discards_draft(self):
        state = reducers.open_credential_modal(ChatState())
        state = reducers.set_credential_draft(state, "sk-123")
        state = reducers.close_credential_modal(state)
        assert not state.credential_modal_open
        assert state.credential_draft == ""

    def test_link_confirm(self):
        state = reducers.open_link_confirm(ChatState())
        assert state.link_confirm_open
        assert not reducers.close_link_confirm(state).link_confirm_open

    def test_toggle_hints(self):
        state = reducers.toggle_hints(ChatState())
        assert state.hints_open
        assert not reducers.toggle_hints(state).hints_open
        assert not reducers.close_hints(state).hints_open

    def test_toggle_palette_resets_highlight(self):
        state = reducers.toggle_palette(ChatState())
        state = reducers.move_suggestion(state, 1, 5)
        assert state.active_suggestion == 0
        state = reducers.toggle_palette(state)
        assert not state.palette_open
        assert state.active_suggestion == -1

    @pytest.mark.parametrize(
        "start,step,expected",
        [(-1, 1, 0), (-1, -1, 4), (0, 1, 1), (4, 1, 0), (0, -1, 4), (2, -1, 1)],
    )
    def test_move_suggestion_wraps(self, start, step, expected):
        state = ChatState(palette_open=True, active_suggestion=start)
        assert reducers.move_suggestion(state, step, 5).active_suggestion == expected

    def test_move_suggestion_without_entries(self):
        state = ChatState(active_suggestion=2)
        assert reducers.move_suggestion(state, 1, 0).active_suggestion == -1


class TestAttachmentReducers:
    """Tests for the attachment list."""

    def test_add_and_remove(self):
        state = reducers.add_attachment(ChatState(), "a.pdf")
        state = reducers.add_attachment(state, "b.pdf")
        assert state.attachments == ("a.pdf", "b.pdf")
        state = reducers.remove_attachment(state, 0)
        assert state.attachments == ("b.pdf",)

    @pytest.mark.parametrize("index", [-1, 1, 10])
    def test_remove_out_of_range_is_ignored(self, index):
        state = reducers.add_attachment(ChatState(), "a.pdf")
        assert reducers.remove_attachment(state, index) == state

    def test_reducers_do_not_mutate(self):
        state = ChatState()
        reducers.set_input(state, "hello")
        reducers.finish_loading(state)
        assert state.input_text == ""
        assert state.loading
