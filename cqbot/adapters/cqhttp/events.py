"""CQHTTP event decoding and signature verification."""

import hashlib
import hmac
from typing import Any, Dict, List, Optional, Union

from cqbot.ports.inbound import IncomingMessage, MessageCategory

# (message_type, sub_type) pairs this bot reacts to; None = sub_type missing
_CATEGORY_MAP = {
    ("private", "friend"): MessageCategory.PRIVATE,
    ("private", None): MessageCategory.PRIVATE,
    ("group", "normal"): MessageCategory.GROUP,
    ("group", None): MessageCategory.GROUP,
}


def escape_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("[", "&#91;").replace("]", "&#93;")


def escape_param(value: str) -> str:
    return escape_text(value).replace(",", "&#44;")


def render_segments(segments: List[Dict[str, Any]]) -> str:
    """Render an array-format message back into CQ code string form."""
    parts = []
    for seg in segments:
        seg_type = seg.get("type", "")
        data = seg.get("data") or {}
        if seg_type == "text":
            parts.append(escape_text(str(data.get("text", ""))))
            continue
        params = "".join(
            f",{key}={escape_param(str(value))}" for key, value in data.items()
        )
        parts.append(f"[CQ:{seg_type}{params}]")
    return "".join(parts)


def _message_text(message: Union[str, List[Dict[str, Any]], None]) -> Optional[str]:
    """CQ string form of a reported message; None if it is neither format."""
    if message is None:
        return ""
    if isinstance(message, str):
        return message
    if isinstance(message, list) and all(isinstance(seg, dict) for seg in message):
        return render_segments(message)
    return None


def parse_event(payload: Dict[str, Any]) -> Optional[IncomingMessage]:
    """Decode a reported event; None for anything that is not a handled message."""
    if payload.get("post_type") != "message":
        return None

    key = (payload.get("message_type"), payload.get("sub_type"))
    category = _CATEGORY_MAP.get(key)
    if category is None:
        return None

    try:
        sender_id = int(payload["user_id"])
        group_id = payload.get("group_id")
        if group_id is not None:
            group_id = int(group_id)
    except (KeyError, TypeError, ValueError):
        return None

    text = _message_text(payload.get("message"))
    if text is None:
        return None

    return IncomingMessage(
        sender_id=sender_id,
        text=text,
        category=category,
        group_id=group_id,
        message_id=payload.get("message_id"),
    )


def verify_signature(secret: str, body: bytes, signature_header: str) -> bool:
    """Check ``X-Signature: sha1=<hex>`` (HMAC-SHA1 of the raw body).

    Always passes when no secret is configured.
    """
    if not secret:
        return True
    expected_sig = "sha1=" + hmac.new(secret.encode(), body, hashlib.sha1).hexdigest()
    return hmac.compare_digest(expected_sig, signature_header or "")
