"""Domain layer — pure Python, no framework dependencies."""

from cqbot.domain.models import ExtractedEndpoint
from cqbot.domain.cq_code import (
    AT_MENTION_MARKER,
    CQ_CODE_RE,
    ENDPOINT_RE,
    extract_endpoint,
    has_at_mention,
    strip_cq_codes,
)
from cqbot.domain.router import MessageRouter

__all__ = [
    "AT_MENTION_MARKER",
    "CQ_CODE_RE",
    "ENDPOINT_RE",
    "ExtractedEndpoint",
    "MessageRouter",
    "extract_endpoint",
    "has_at_mention",
    "strip_cq_codes",
]
