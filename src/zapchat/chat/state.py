"""Reducers for ChatState.

Every function takes the current state and returns a new one. The
controller is the only caller; tests use them directly to check
transitions without timers.
"""

from .models import ChatState


def finish_loading(state: ChatState) -> ChatState:
    return state.model_copy(update={"loading": False})


def set_input(state: ChatState, text: str) -> ChatState:
    return state.model_copy(update={"input_text": text})


def clear_input(state: ChatState) -> ChatState:
    return state.model_copy(update={"input_text": ""})


def begin_typing(state: ChatState) -> ChatState:
    """A reply started typing."""
    return state.model_copy(
        update={"typing": True, "pending_replies": state.pending_replies + 1}
    )


def end_typing(state: ChatState) -> ChatState:
    """A reply finished typing.

    The indicator stays on while other overlapping replies are still pending.
    """
    pending = max(state.pending_replies - 1, 0)
    return state.model_copy(update={"typing": pending > 0, "pending_replies": pending})


def open_link_confirm(state: ChatState) -> ChatState:
    return state.model_copy(update={"link_confirm_open": True})


def close_link_confirm(state: ChatState) -> ChatState:
    return state.model_copy(update={"link_confirm_open": False})


def open_credential_modal(state: ChatState) -> ChatState:
    return state.model_copy(update={"credential_modal_open": True})


def close_credential_modal(state: ChatState) -> ChatState:
    """Close the credential modal and discard whatever was typed in it."""
    return state.model_copy(
        update={"credential_modal_open": False, "credential_draft": ""}
    )


def set_credential_draft(state: ChatState, text: str) -> ChatState:
    return state.model_copy(update={"credential_draft": text})


def set_credential(state: ChatState, credential: str) -> ChatState:
    return state.model_copy(update={"credential": credential})


def toggle_hints(state: ChatState) -> ChatState:
    return state.model_copy(update={"hints_open": not state.hints_open})


def close_hints(state: ChatState) -> ChatState:
    return state.model_copy(update={"hints_open": False})


def toggle_palette(state: ChatState) -> ChatState:
    return state.model_copy(
        update={"palette_open": not state.palette_open, "active_suggestion": -1}
    )


def close_palette(state: ChatState) -> ChatState:
    return state.model_copy(update={"palette_open": False, "active_suggestion": -1})


def move_suggestion(state: ChatState, step: int, count: int) -> ChatState:
    """Move the palette highlight by ``step``, wrapping around ``count`` entries."""
    if count <= 0:
        return state.model_copy(update={"active_suggestion": -1})
    if state.active_suggestion < 0:
        index = 0 if step > 0 else count - 1
    else:
        index = (state.active_suggestion + step) % count
    return state.model_copy(update={"active_suggestion": index})


def add_attachment(state: ChatState, name: str) -> ChatState:
    return state.model_copy(update={"attachments": (*state.attachments, name)})


def remove_attachment(state: ChatState, index: int) -> ChatState:
    """Drop the attachment at ``index``. Out-of-range indexes are ignored."""
    if not 0 <= index < len(state.attachments):
        return state
    attachments = state.attachments[:index] + state.attachments[index + 1:]
    return state.model_copy(update={"attachments": attachments})


def set_notice(state: ChatState, notice: str | None) -> ChatState:
    return state.model_copy(update={"notice": notice})
