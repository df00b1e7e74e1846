"""
Chat Assistant
Advisory Chat Session — FinSight Advisor

Owns the chat transcript for one session. The transcript is explicit state:
every call takes the current ChatTranscript and returns a new one. Replies
come from the stateless intent responder; earlier turns are stored for
display only and never influence matching.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from finsight_agents.schemas.chat_output import ChatMessage, ChatTranscript
from finsight_agents.tools.intent_responder import (
    FALLBACK_RESPONSE,
    GREETING,
    match_intent,
)

logger = logging.getLogger(__name__)


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def _next_id(transcript: ChatTranscript) -> str:
    return str(len(transcript.messages) + 1)


def start_chat(now: Optional[datetime] = None) -> ChatTranscript:
    """Open a session whose transcript holds only the assistant greeting."""
    greeting = ChatMessage(
        id="1",
        content=GREETING,
        sender="assistant",
        timestamp=_now(now),
        category="text",
    )
    return ChatTranscript(messages=(greeting,))


def send_message(
    transcript: ChatTranscript,
    text: str,
    now: Optional[datetime] = None,
) -> ChatTranscript:
    """
    Append a user message and the assistant's reply.

    Args:
        transcript: current session transcript.
        text: raw user input; surrounding whitespace is stripped.
        now: timestamp for both messages (defaults to current UTC time).

    Returns:
        New transcript with two more messages, or the same transcript when
        the input is blank. Matched intents are tagged "analysis", the
        fallback reply "text".
    """
    content = text.strip()
    if not content:
        return transcript

    timestamp = _now(now)
    user_msg = ChatMessage(
        id=_next_id(transcript),
        content=content,
        sender="user",
        timestamp=timestamp,
    )
    transcript = transcript.append(user_msg)

    rule = match_intent(content)
    reply = ChatMessage(
        id=_next_id(transcript),
        content=rule.response if rule is not None else FALLBACK_RESPONSE,
        sender="assistant",
        timestamp=timestamp,
        category="analysis" if rule is not None else "text",
    )
    logger.info(
        f"[Chat] Replied to message {user_msg.id} "
        f"with intent={rule.name if rule else 'fallback'}"
    )
    return transcript.append(reply)
