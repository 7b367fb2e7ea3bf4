from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request, Response

from .config import SESSION_COOKIE_NAME
from .services.session_controller import SessionController
from .services.session_registry import SessionRegistry

logger = logging.getLogger(__name__)


@dataclass
class BrowserSession:
    id: str
    controller: SessionController
    created: bool


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.registry


async def get_browser_session(request: Request) -> BrowserSession:
    registry = get_registry(request)
    cookie: Optional[str] = request.cookies.get(SESSION_COOKIE_NAME)
    sid, controller, created = registry.get_or_create(cookie)
    if created and cookie:
        logger.info("Unknown session cookie, starting a new session")
    return BrowserSession(id=sid, controller=controller, created=created)


def attach_session_cookie(response: Response, session: BrowserSession) -> None:
    if session.created:
        response.set_cookie(
            SESSION_COOKIE_NAME,
            session.id,
            httponly=True,
            samesite="lax",
        )
