from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ..deps import BrowserSession, attach_session_cookie, get_browser_session
from ..schemas.session import FollowUpRequest, SearchRequest, SessionView

router = APIRouter(prefix="/api", tags=["dictionary"])


@router.get("/session", response_model=SessionView)
async def get_session(
    response: Response,
    session: BrowserSession = Depends(get_browser_session),
) -> SessionView:
    attach_session_cookie(response, session)
    return session.controller.view()


@router.post("/search", response_model=SessionView)
async def search(
    req: SearchRequest,
    response: Response,
    session: BrowserSession = Depends(get_browser_session),
) -> SessionView:
    attach_session_cookie(response, session)
    await session.controller.submit_search(req.word)
    return session.controller.view()


@router.post("/follow-up", response_model=SessionView)
async def follow_up(
    req: FollowUpRequest,
    response: Response,
    session: BrowserSession = Depends(get_browser_session),
) -> SessionView:
    attach_session_cookie(response, session)
    await session.controller.submit_follow_up(req.message)
    return session.controller.view()


@router.post("/reset", response_model=SessionView)
async def reset(
    response: Response,
    session: BrowserSession = Depends(get_browser_session),
) -> SessionView:
    attach_session_cookie(response, session)
    session.controller.reset()
    return session.controller.view()
