"""
Global middleware — request timer and the page access gate.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from auth.jwt import decode_token
from config.settings import config
from core.errors import AuthenticationError
from core.gate import GateConfig, decide, matches_filter

logger = logging.getLogger(__name__)


def _cookie_token(request: Request) -> Optional[str]:
    """The credential cookie, or ``None`` when it is missing, invalid or expired."""
    token = request.cookies.get(config.token_cookie_name)
    if not token:
        return None
    try:
        decode_token(token)
    except AuthenticationError:
        return None
    return token


def register_middleware(app: FastAPI, gate_config: GateConfig | None = None) -> None:
    """Attach any app-level middleware."""
    gate = gate_config or GateConfig.from_settings()

    @app.middleware("http")
    async def access_gate(request: Request, call_next):
        path = request.url.path
        if not matches_filter(path, gate.matcher):
            return await call_next(request)

        decision = decide(path, _cookie_token(request), gate)
        if decision.allowed:
            return await call_next(request)

        target = request.url.replace(path=decision.redirect_to, query="", fragment="")
        logger.debug(
            "Gate: %s (%s) -> %s", path, decision.path_class.value, decision.redirect_to,
        )
        return RedirectResponse(url=str(target))

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response
