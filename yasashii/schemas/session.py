from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import Phase
from .dictionary import ConversationTurn, WordExplanation


def _strip_required(v: str) -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError("must not be blank")
    return v


class SearchRequest(BaseModel):
    word: str = Field(..., description="Japanese word to look up")

    @field_validator("word")
    @classmethod
    def _strip_word(cls, v: str) -> str:
        return _strip_required(v)


class FollowUpRequest(BaseModel):
    message: str = Field(..., description="Follow-up question about the searched word")

    @field_validator("message")
    @classmethod
    def _strip_message(cls, v: str) -> str:
        return _strip_required(v)


class SessionView(BaseModel):
    """What the page renders. Built from SessionState by the controller."""

    model_config = ConfigDict(populate_by_name=True)

    phase: Phase
    results: List[WordExplanation] = []
    searched_word: Optional[str] = Field(None, alias="searchedWord")
    history: List[ConversationTurn] = []
    is_lookup_in_flight: bool = Field(False, alias="isLookupInFlight")
    is_follow_up_in_flight: bool = Field(False, alias="isFollowUpInFlight")
    can_follow_up: bool = Field(False, alias="canFollowUp")
    scroll_target: Optional[str] = Field(None, alias="scrollTarget")
