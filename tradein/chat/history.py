"""
Chat history normalization for Gemini chat sessions.

A chat session is seeded with prior turns and then sent the newest message.
Gemini wants the seed history to start with a user turn, while the UI opens
every conversation with a model-authored welcome message. The seed is
therefore cut at the first user message; when there is none, the lone
trailing message is kept. A conversation that is a single user message has
an empty seed, since that message is sent as the new turn.
"""

from collections.abc import Sequence

from tradein.ai.gemini.schemas import ChatMessage, ChatRole


def _first_user_index(messages: Sequence[ChatMessage]) -> int | None:
    for index, message in enumerate(messages):
        if message.role == ChatRole.USER:
            return index
    return None


def normalize_chat_history(history: Sequence[ChatMessage]) -> list[ChatMessage]:
    """Seed history for a session whose new turn is ``history[-1]``.

    ``[model "hi", user "a", model "b", user "c"]`` gives
    ``[user "a", model "b"]``; ``[model "welcome"]`` gives itself and
    ``[user "a"]`` gives ``[]``.
    """
    if not history:
        return []

    prior = history[:-1]
    start = _first_user_index(prior)
    if start is not None:
        return list(prior[start:])
    if prior:
        return [prior[-1]]

    # A lone user message is the new turn itself and must not be seeded too
    if history[-1].role == ChatRole.USER:
        return []
    return [history[-1]]


def split_chat_turn(
    history: Sequence[ChatMessage],
) -> tuple[list[ChatMessage], ChatMessage]:
    """Split a conversation into seed history and the new turn to send.

    Raises:
        ValueError: If the history is empty
    """
    if not history:
        raise ValueError("Chat history is empty")
    return normalize_chat_history(history), history[-1]
