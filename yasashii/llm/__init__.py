"""
LLM module - Gemini gateway client and prompt building for dictionary lookups.
"""

from .client import GatewayMessage, GatewayRequest, GeminiGateway
from .prompts import (
    WORD_EXPLANATION_SCHEMA,
    build_follow_up_request,
    build_lookup_request,
)

__all__ = [
    "GatewayMessage",
    "GatewayRequest",
    "GeminiGateway",
    "WORD_EXPLANATION_SCHEMA",
    "build_follow_up_request",
    "build_lookup_request",
]
