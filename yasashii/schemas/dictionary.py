from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..enums import Role


class WordExplanation(BaseModel):
    """One sense of a looked-up word. Wire names are camelCase."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    word: str
    reading: str
    brief_meaning: str = Field(..., alias="briefMeaning")
    detailed_explanation: str = Field(..., alias="detailedExplanation")


class ConversationTurn(BaseModel):
    role: Role
    content: str
