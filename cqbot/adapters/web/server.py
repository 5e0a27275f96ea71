"""FastAPI application — CQHTTP event webhook and status routes."""

import json
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, HTTPException, Request, Response
from pydantic import BaseModel

from cqbot.adapters.cqhttp.events import parse_event, verify_signature

if TYPE_CHECKING:
    from cqbot.app import BotContext


def _log(msg: str):
    print(msg, file=sys.stderr)


class StatusResponse(BaseModel):
    pending: int
    handled: int


def create_app(context: "BotContext") -> FastAPI:
    """Build the webhook app around an already-constructed BotContext."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await context.start()
        _log(f"[web] listening for events, replies via {context.config.cqhttp.api_url}")
        try:
            yield
        finally:
            await context.close()

    app = FastAPI(title="cqbot", lifespan=lifespan)

    @app.post("/", status_code=204)
    async def receive_event(request: Request):
        """Event post URL configured on the connector."""
        raw_body = await request.body()

        secret = context.config.cqhttp.secret
        if not verify_signature(secret, raw_body, request.headers.get("X-Signature", "")):
            _log("[web] event signature mismatch")
            raise HTTPException(status_code=403, detail="Invalid signature")

        try:
            payload = json.loads(raw_body)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid JSON") from None
        if not isinstance(payload, dict):
            raise HTTPException(status_code=400, detail="Invalid event")

        msg = parse_event(payload)
        if msg is not None:
            context.router.dispatch(msg)
        # Empty body: no quick operation for the connector
        return Response(status_code=204)

    @app.get("/status", response_model=StatusResponse)
    async def status():
        return StatusResponse(
            pending=context.router.pending_count,
            handled=context.router.handled_count,
        )

    return app
