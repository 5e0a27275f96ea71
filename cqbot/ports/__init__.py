"""Port interfaces (Hexagonal Architecture)."""

from cqbot.ports.inbound import IncomingMessage, MessageCategory
from cqbot.ports.outbound import RegistryPort, ReplyPort, SubmitResult

__all__ = [
    "IncomingMessage",
    "MessageCategory",
    "RegistryPort",
    "ReplyPort",
    "SubmitResult",
]
