from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Request


router = APIRouter(tags=["system"])


@router.get("/health")
def health(request: Request) -> Dict[str, Any]:
    return {
        "status": "ok",
        "gateway_configured": request.app.state.gateway.is_configured,
    }
