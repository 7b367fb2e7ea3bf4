"""
Word lookup service.

Asks the model for every sense of a word and turns the answer into
WordExplanation entries. Never raises: every failure becomes a single
sentinel entry whose ``reading`` is ERROR_READING.
"""

import logging
from typing import List

from pydantic import ValidationError

from ..llm.client import GeminiGateway
from ..llm.prompts import build_lookup_request
from ..schemas.dictionary import WordExplanation
from ..utils.exceptions import MalformedOutputError, YasashiiError, log_error
from ..utils.json_parser import extract_json_array
from ..utils.text import strip_brackets

logger = logging.getLogger(__name__)

ERROR_READING = "エラー"
ERROR_BRIEF_MEANING = "情報の取得中にエラーが発生しました。"
ERROR_DETAILED_EXPLANATION = "申し訳ありませんが、もう一度お試しください。ネットワーク接続を確認してください。"


def error_entry(word: str) -> WordExplanation:
    """Sentinel returned in place of real senses when a lookup fails."""
    return WordExplanation(
        word=word,
        reading=ERROR_READING,
        brief_meaning=ERROR_BRIEF_MEANING,
        detailed_explanation=ERROR_DETAILED_EXPLANATION,
    )


def is_error_entry(entry: WordExplanation) -> bool:
    return entry.reading == ERROR_READING


def sanitize_entry(entry: WordExplanation) -> WordExplanation:
    return WordExplanation(
        word=strip_brackets(entry.word),
        reading=strip_brackets(entry.reading),
        brief_meaning=strip_brackets(entry.brief_meaning),
        detailed_explanation=strip_brackets(entry.detailed_explanation),
    )


def parse_explanations(text: str) -> List[WordExplanation]:
    """Parse the model's JSON array into sanitized entries.

    Raises:
        MalformedOutputError: no array found, or an item lacks a field.
    """
    items = extract_json_array(text)
    if items is None:
        raise MalformedOutputError("response is not a JSON array", raw=text)

    entries: List[WordExplanation] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedOutputError(f"item {idx} is not an object", raw=text)
        try:
            entries.append(sanitize_entry(WordExplanation.model_validate(item)))
        except ValidationError as e:
            raise MalformedOutputError(f"item {idx} does not match schema: {e.error_count()} errors", raw=text) from e
    return entries


class LookupService:
    def __init__(self, gateway: GeminiGateway):
        self.gateway = gateway

    async def lookup(self, word: str) -> List[WordExplanation]:
        """Look up ``word`` (already trimmed and non-empty).

        Returns at least one entry. Check the first entry with
        ``is_error_entry`` to tell a failure from real senses.
        """
        try:
            text = await self.gateway.generate(build_lookup_request(word))
            entries = parse_explanations(text)
        except YasashiiError as e:
            log_error(e, logger)
            return [error_entry(word)]
        except Exception as e:
            logger.error(f"Error fetching explanation for '{word}': {e}", exc_info=True)
            return [error_entry(word)]

        if not entries:
            logger.warning(f"Model returned no senses for '{word}'")
            return [error_entry(word)]

        logger.info(f"Lookup for '{word}' returned {len(entries)} sense(s)")
        return entries
