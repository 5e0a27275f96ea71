"""Inbound port — connector-agnostic message representation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MessageCategory(str, Enum):
    PRIVATE = "private"
    GROUP = "group"


@dataclass(frozen=True)
class IncomingMessage:
    """A decoded chat message, alive for a single handling invocation."""

    sender_id: int
    text: str
    category: MessageCategory
    group_id: Optional[int] = None  # logging only
    message_id: Optional[int] = None
