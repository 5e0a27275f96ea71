"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cqbot.domain.models import ExtractedEndpoint


@dataclass
class SubmitResult:
    """Outcome of one registry submission. Logged, never acted on."""

    addr: str
    status: int
    data: Optional[Any] = None


@runtime_checkable
class ReplyPort(Protocol):
    """Interface for sending a private message back to a user."""

    async def send_private_msg(self, user_id: int, message: str) -> None: ...


@runtime_checkable
class RegistryPort(Protocol):
    """Interface for the host registry that records extracted endpoints."""

    async def add_host(self, endpoint: "ExtractedEndpoint") -> SubmitResult: ...
