"""
Dictionary session controller.

Holds one browser session's state and sequences calls to the lookup and
conversation services. All state changes happen synchronously on the event
loop; the only awaits are the two service calls.

Each search bumps ``generation``. A lookup or follow-up response whose
generation is no longer current belongs to a superseded search and is
dropped without touching state.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..enums import Phase, Role
from ..schemas.dictionary import ConversationTurn, WordExplanation
from ..schemas.session import SessionView
from .conversation_service import ConversationService
from .lookup_service import LookupService, is_error_entry

logger = logging.getLogger(__name__)

SCROLL_RESULTS = "results"
SCROLL_CONVERSATION = "conversation"


@dataclass
class SessionState:
    results: List[WordExplanation] = field(default_factory=list)
    searched_word: Optional[str] = None
    history: List[ConversationTurn] = field(default_factory=list)
    is_lookup_in_flight: bool = False
    is_follow_up_in_flight: bool = False
    has_searched: bool = False
    generation: int = 0
    # Where the page should scroll after the last completed transition
    scroll_target: Optional[str] = None

    @property
    def phase(self) -> Phase:
        if self.is_lookup_in_flight:
            return Phase.SEARCHING
        if self.results:
            return Phase.RESULTS_SHOWN
        if not self.has_searched:
            return Phase.WELCOME
        return Phase.EMPTY

    @property
    def can_follow_up(self) -> bool:
        return self.searched_word is not None and not self.is_lookup_in_flight


class SessionController:
    def __init__(self, lookup_service: LookupService, conversation_service: ConversationService):
        self.lookup_service = lookup_service
        self.conversation_service = conversation_service
        self.state = SessionState()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def _begin_search(self) -> int:
        s = self.state
        s.generation += 1
        s.results = []
        s.history = []
        s.searched_word = None
        s.has_searched = True
        s.is_lookup_in_flight = True
        # A pending follow-up belongs to the old word and will be dropped
        s.is_follow_up_in_flight = False
        s.scroll_target = None
        return s.generation

    def _is_current(self, generation: int) -> bool:
        return self.state.generation == generation

    async def submit_search(self, text: str) -> None:
        word = (text or "").strip()
        if not word:
            return

        generation = self._begin_search()
        explanations: Optional[List[WordExplanation]] = None
        try:
            explanations = await self.lookup_service.lookup(word)
        finally:
            if not self._is_current(generation):
                logger.info(f"Discarding stale lookup for '{word}' (generation {generation})")
            else:
                s = self.state
                if explanations is not None:
                    s.results = list(explanations)
                    if s.results and not is_error_entry(s.results[0]):
                        s.searched_word = word
                    s.scroll_target = SCROLL_RESULTS if s.results else None
                s.is_lookup_in_flight = False

    async def submit_follow_up(self, text: str) -> None:
        s = self.state
        message = (text or "").strip()
        if s.is_follow_up_in_flight or not message or s.searched_word is None:
            return

        generation = s.generation
        word = s.searched_word
        s.history.append(ConversationTurn(role=Role.USER, content=message))
        s.is_follow_up_in_flight = True

        answer: Optional[str] = None
        try:
            answer = await self.conversation_service.follow_up(word, list(s.history))
        finally:
            if not self._is_current(generation):
                logger.info(f"Discarding stale follow-up answer for '{word}'")
            else:
                if answer is not None:
                    s.history.append(ConversationTurn(role=Role.MODEL, content=answer))
                    s.scroll_target = SCROLL_CONVERSATION
                s.is_follow_up_in_flight = False

    def reset(self) -> None:
        """Back to the welcome screen; any in-flight response is dropped."""
        generation = self.state.generation + 1
        self.state = SessionState(generation=generation)

    def view(self) -> SessionView:
        s = self.state
        return SessionView(
            phase=s.phase,
            results=list(s.results),
            searched_word=s.searched_word,
            history=list(s.history),
            is_lookup_in_flight=s.is_lookup_in_flight,
            is_follow_up_in_flight=s.is_follow_up_in_flight,
            can_follow_up=s.can_follow_up,
            scroll_target=s.scroll_target,
        )
