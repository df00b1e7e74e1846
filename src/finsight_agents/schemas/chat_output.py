"""
Chat Assistant — Output Schema
FinSight Advisor

Output contract for the advisory chat. The intent rule table is an ordered
decision list: rules are evaluated top-down and the first firing rule wins.
The transcript is append-only and is passed into and out of every chat call.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IntentRule(BaseModel):
    """Keyword guard paired with a canned response."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    keywords: tuple[str, ...] = Field(..., min_length=1)
    response: str = Field(..., min_length=20)

    @field_validator("keywords")
    @classmethod
    def keywords_lowercase(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for kw in v:
            if not kw or kw != kw.casefold():
                raise ValueError(f"keyword '{kw}' must be non-empty and case-folded")
        return v

    def matches(self, normalized: str) -> bool:
        """True when any keyword is a substring of the case-folded utterance."""
        return any(kw in normalized for kw in self.keywords)


class ChatMessage(BaseModel):
    """One message in the chat transcript."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    sender: Literal["user", "assistant"]
    timestamp: datetime
    category: Literal["text", "analysis"] = "text"


class ChatTranscript(BaseModel):
    """Append-only chat history owned by one chat session."""

    model_config = ConfigDict(frozen=True)

    messages: tuple[ChatMessage, ...] = Field(default_factory=tuple)

    def append(self, *new_messages: ChatMessage) -> "ChatTranscript":
        """Return a new transcript with the messages added at the end."""
        return ChatTranscript(messages=self.messages + tuple(new_messages))

    @property
    def last(self) -> Optional[ChatMessage]:
        return self.messages[-1] if self.messages else None
