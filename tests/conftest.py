"""
Shared fixtures.

Only the model gateway is faked; services, controller and routes run for real.
"""

import json
from typing import Any, List, Optional, Union

import pytest
from fastapi.testclient import TestClient

from yasashii.config import Settings
from yasashii.llm.client import GatewayRequest
from yasashii.main import create_app
from yasashii.services.conversation_service import ConversationService
from yasashii.services.lookup_service import LookupService
from yasashii.services.session_controller import SessionController
from yasashii.utils.exceptions import ConfigurationError, ExternalServiceError


TABERU_ENTRY = {
    "word": "食べる",
    "reading": "たべる",
    "briefMeaning": "食べ物を口に入れること。",
    "detailedExplanation": "ごはんやパンを口に入れて、かんで、のみこむことです。",
}


class FakeGateway:
    """Records requests and replays queued replies (str) or errors (Exception)."""

    def __init__(self, replies: Optional[List[Union[str, Exception]]] = None, configured: bool = True):
        self.replies: List[Union[str, Exception]] = list(replies or [])
        self.requests: List[GatewayRequest] = []
        self.configured = configured
        self.model = "fake-model"

    @property
    def is_configured(self) -> bool:
        return self.configured

    def queue(self, *replies: Union[str, Exception]) -> None:
        self.replies.extend(replies)

    async def generate(self, request: GatewayRequest) -> str:
        self.requests.append(request)
        if not self.configured:
            raise ConfigurationError("Gemini API key is not set", config_key="GEMINI_API_KEY")
        if not self.replies:
            raise ExternalServiceError("no reply queued", service_name="fake")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def lookup_service(gateway):
    return LookupService(gateway)


@pytest.fixture
def conversation_service(gateway):
    return ConversationService(gateway)


@pytest.fixture
def controller(lookup_service, conversation_service):
    return SessionController(lookup_service, conversation_service)


@pytest.fixture
def settings():
    return Settings(
        api_key=None,
        model="fake-model",
        gemini_base_url="https://gateway.invalid/v1beta",
        http_timeout_sec=5.0,
        max_sessions=8,
        log_level="WARNING",
        log_prompts=False,
    )


@pytest.fixture
def client(settings, gateway):
    """FastAPI test client wired to the fake gateway."""
    app = create_app(settings, gateway=gateway)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def taberu_entry():
    return dict(TABERU_ENTRY)


@pytest.fixture
def as_json():
    def _dump(data: Any) -> str:
        return json.dumps(data, ensure_ascii=False)
    return _dump
