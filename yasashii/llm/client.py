from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from ..config import Settings
from ..enums import Role
from ..utils.exceptions import ConfigurationError, ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "gemini"


@dataclass
class GatewayMessage:
    """One entry of the ordered contents sent to the model."""

    role: Role
    text: str


@dataclass
class GatewayRequest:
    """A single generateContent call.

    ``response_schema`` switches the model to JSON output constrained to
    that schema; without it the model answers in free text.
    """

    system_instruction: str
    contents: List[GatewayMessage]
    response_schema: Optional[Dict[str, Any]] = None
    temperature: Optional[float] = None


@dataclass
class GeminiGateway:
    """Client for the Gemini ``generateContent`` REST endpoint.

    Constructed once by the app and handed to the services; nothing reads a
    module-level client.
    """

    api_key: Optional[str]
    model: str
    base_url: str
    timeout: float = 60.0
    log_prompts: bool = False
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, repr=False)

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GeminiGateway":
        return cls(
            api_key=settings.api_key,
            model=settings.model,
            base_url=settings.gemini_base_url,
            timeout=settings.http_timeout_sec,
            log_prompts=settings.log_prompts,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"

    def build_body(self, request: GatewayRequest) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "systemInstruction": {"parts": [{"text": request.system_instruction}]},
            "contents": [
                {"role": Role(m.role).value, "parts": [{"text": m.text}]}
                for m in request.contents
            ],
        }
        generation_config: Dict[str, Any] = {}
        if request.response_schema is not None:
            generation_config["responseMimeType"] = "application/json"
            generation_config["responseSchema"] = request.response_schema
        if request.temperature is not None:
            generation_config["temperature"] = request.temperature
        if generation_config:
            body["generationConfig"] = generation_config
        return body

    async def generate(self, request: GatewayRequest) -> str:
        """Send the request and return the model's trimmed text.

        Raises:
            ConfigurationError: no API key; no network I/O is attempted.
            ExternalServiceError: transport failure, non-2xx status, or a
                response without candidate text.
        """
        if not self.api_key:
            raise ConfigurationError("Gemini API key is not set", config_key="GEMINI_API_KEY")

        body = self.build_body(request)
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        logger.info(
            f"Calling Gemini API with model: {self.model}, messages count: {len(request.contents)}"
        )
        if self.log_prompts and logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Request body: {json.dumps(body, ensure_ascii=False)[:500]}")

        try:
            async with httpx.AsyncClient(timeout=float(self.timeout), transport=self.transport) as client:
                resp = await client.post(self.url, json=body, headers=headers)
                resp.raise_for_status()
                resp_dict = resp.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise ExternalServiceError(
                f"Gemini returned HTTP {status_code}: {_error_message(e.response)}",
                service_name=SERVICE_NAME,
                status_code=status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise ExternalServiceError("Gemini request timed out", service_name=SERVICE_NAME) from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Network error calling Gemini: {e}", service_name=SERVICE_NAME) from e
        except ValueError as e:
            # resp.json() on a non-JSON body
            raise ExternalServiceError("Gemini response was not JSON", service_name=SERVICE_NAME) from e

        return _candidate_text(resp_dict)


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        return str(data["error"].get("message", "Unknown error"))
    return "Unknown error"


def _candidate_text(resp_dict: Any) -> str:
    if not isinstance(resp_dict, dict):
        raise ExternalServiceError("Gemini response is not an object", service_name=SERVICE_NAME)

    candidates = resp_dict.get("candidates")
    if not isinstance(candidates, list) or len(candidates) == 0:
        reason = (resp_dict.get("promptFeedback") or {}).get("blockReason")
        raise ExternalServiceError(
            f"no candidates in response{f' (blocked: {reason})' if reason else ''}",
            service_name=SERVICE_NAME,
        )

    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        raise ExternalServiceError("no content parts in candidate", service_name=SERVICE_NAME)

    texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
    if not texts:
        raise ExternalServiceError("no text in candidate parts", service_name=SERVICE_NAME)

    return "".join(texts).strip()
