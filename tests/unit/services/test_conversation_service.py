"""Unit tests for ConversationService."""

import pytest

from yasashii.enums import Role
from yasashii.schemas.dictionary import ConversationTurn
from yasashii.services.conversation_service import APOLOGY_TEXT
from yasashii.utils.exceptions import ExternalServiceError


def _turn(role: Role, content: str) -> ConversationTurn:
    return ConversationTurn(role=role, content=content)


@pytest.mark.asyncio
async def test_follow_up_sends_full_history_in_order(conversation_service, gateway):
    gateway.queue("りんごをたべます")
    history = [
        _turn(Role.USER, "例文を教えて"),
        _turn(Role.MODEL, "パンをたべます"),
        _turn(Role.USER, "もうひとつ"),
    ]

    answer = await conversation_service.follow_up("食べる", history)

    assert answer == "りんごをたべます"
    req = gateway.requests[0]
    assert [(m.role, m.text) for m in req.contents] == [
        (Role.USER, "例文を教えて"),
        (Role.MODEL, "パンをたべます"),
        (Role.USER, "もうひとつ"),
    ]
    assert req.response_schema is None
    assert "「食べる」" in req.system_instruction


@pytest.mark.asyncio
async def test_follow_up_does_not_mutate_history(conversation_service, gateway):
    gateway.queue("はい")
    history = [_turn(Role.USER, "例文を教えて")]

    await conversation_service.follow_up("食べる", history)

    assert len(history) == 1


@pytest.mark.asyncio
async def test_follow_up_strips_brackets(conversation_service, gateway):
    gateway.queue("りんご（果物）をたべます")

    answer = await conversation_service.follow_up("食べる", [_turn(Role.USER, "例文を教えて")])

    assert answer == "りんご果物をたべます"


@pytest.mark.asyncio
async def test_follow_up_gateway_error_returns_apology(conversation_service, gateway):
    gateway.queue(ExternalServiceError("timeout", service_name="gemini"))

    answer = await conversation_service.follow_up("食べる", [_turn(Role.USER, "例文を教えて")])

    assert answer == APOLOGY_TEXT


@pytest.mark.asyncio
async def test_follow_up_without_credentials_returns_apology(conversation_service, gateway):
    gateway.configured = False

    answer = await conversation_service.follow_up("食べる", [_turn(Role.USER, "例文を教えて")])

    assert answer == APOLOGY_TEXT


@pytest.mark.asyncio
async def test_follow_up_empty_history_skips_gateway(conversation_service, gateway):
    answer = await conversation_service.follow_up("食べる", [])

    assert answer == APOLOGY_TEXT
    assert gateway.requests == []
