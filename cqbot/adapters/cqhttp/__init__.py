"""CQHTTP adapters — event decoding and the reply sender."""

from cqbot.adapters.cqhttp.client import CQHTTPClient, CQHTTPError
from cqbot.adapters.cqhttp.events import parse_event, render_segments, verify_signature

__all__ = [
    "CQHTTPClient",
    "CQHTTPError",
    "parse_event",
    "render_segments",
    "verify_signature",
]
