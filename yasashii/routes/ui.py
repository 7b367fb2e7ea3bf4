from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..deps import BrowserSession, attach_session_cookie, get_browser_session


router = APIRouter(tags=["ui"])

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
_templates_env: Optional[Jinja2Templates] = None


def _templates() -> Jinja2Templates:
    global _templates_env
    if _templates_env is None:
        env = Environment(
            loader=FileSystemLoader([str(TEMPLATES_DIR)]),
            autoescape=select_autoescape(["html", "xml"]),
        )
        _templates_env = Jinja2Templates(env=env)
    return _templates_env


@router.get("/", response_class=HTMLResponse)
async def index_page(request: Request, session: BrowserSession = Depends(get_browser_session)):
    t = _templates()
    view = session.controller.view()
    response = t.TemplateResponse(
        request,
        "index.html",
        {
            "title": "やさしい日本語辞書",
            "view": view,
            "initial_state": view.model_dump(mode="json", by_alias=True),
        },
    )
    attach_session_cookie(response, session)
    return response
