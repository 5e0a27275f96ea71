"""Web adapter — FastAPI webhook receiving connector events."""

from cqbot.adapters.web.server import create_app

__all__ = ["create_app"]
