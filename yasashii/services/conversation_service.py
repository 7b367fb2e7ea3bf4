"""
Follow-up conversation service: free-text tutor answers about the last looked-up word.
"""

import logging
from typing import List

from ..llm.client import GeminiGateway
from ..llm.prompts import build_follow_up_request
from ..schemas.dictionary import ConversationTurn
from ..utils.exceptions import YasashiiError, log_error
from ..utils.text import strip_brackets

logger = logging.getLogger(__name__)

APOLOGY_TEXT = "申し訳ありませんが、エラーが発生しました。もう一度お試しください。"


class ConversationService:
    def __init__(self, gateway: GeminiGateway):
        self.gateway = gateway

    async def follow_up(self, word: str, history: List[ConversationTurn]) -> str:
        """Answer the last user turn in ``history``.

        The caller appends the user turn before calling and appends the
        returned text as a model turn afterwards. Never raises; failures
        return APOLOGY_TEXT.
        """
        if not history:
            logger.error(f"Follow-up for '{word}' called with empty history")
            return APOLOGY_TEXT

        try:
            answer = await self.gateway.generate(build_follow_up_request(word, history))
        except YasashiiError as e:
            log_error(e, logger)
            return APOLOGY_TEXT
        except Exception as e:
            logger.error(f"Error fetching follow-up for '{word}': {e}", exc_info=True)
            return APOLOGY_TEXT

        return strip_brackets(answer)
