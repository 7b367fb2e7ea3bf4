from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .llm.client import GeminiGateway
from .routes.dictionary import router as dictionary_router
from .routes.health import router as health_router
from .routes.ui import router as ui_router
from .schemas.errors import ErrorResponse
from .services.conversation_service import ConversationService
from .services.lookup_service import LookupService
from .services.session_controller import SessionController
from .services.session_registry import SessionRegistry
from .utils.exceptions import ExternalServiceError, YasashiiError, log_error

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None, gateway: Optional[GeminiGateway] = None) -> FastAPI:
    """Build the app. ``gateway`` overrides the one built from settings (tests)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    gateway = gateway or GeminiGateway.from_settings(settings)
    lookup_service = LookupService(gateway)
    conversation_service = ConversationService(gateway)

    def _new_controller() -> SessionController:
        return SessionController(lookup_service, conversation_service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not gateway.is_configured:
            logger.warning(
                "GEMINI_API_KEY (or API_KEY) not set; every lookup will return the error entry"
            )
        else:
            logger.info(f"Using Gemini model {gateway.model}")
        yield

    app = FastAPI(lifespan=lifespan, title="Yasashii Jisho", version="0.1.0")
    app.state.settings = settings
    app.state.gateway = gateway
    app.state.registry = SessionRegistry(_new_controller, max_sessions=settings.max_sessions)

    @app.exception_handler(YasashiiError)
    async def yasashii_error_handler(request: Request, exc: YasashiiError):
        log_error(exc, logger)
        status_code = 502 if isinstance(exc, ExternalServiceError) else 500
        body = ErrorResponse(message=exc.message, error_code=exc.error_code, details=exc.details or None)
        return JSONResponse(status_code=status_code, content=body.model_dump())

    app.include_router(health_router)
    app.include_router(dictionary_router)
    app.include_router(ui_router)
    return app


app = create_app()
