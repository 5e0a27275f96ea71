"""cqbot — QQ chat bot that echoes private messages and registers hosts posted in groups."""

from cqbot.config import CONFIG, AppConfig, __version__
from cqbot.ports.inbound import IncomingMessage, MessageCategory
from cqbot.ports.outbound import RegistryPort, ReplyPort, SubmitResult
from cqbot.domain.models import ExtractedEndpoint
from cqbot.domain.router import MessageRouter
from cqbot.adapters.cqhttp.client import CQHTTPClient, CQHTTPError
from cqbot.adapters.registry.client import HostRegistryClient, RegistryError

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "IncomingMessage",
    "MessageCategory",
    "RegistryPort",
    "ReplyPort",
    "SubmitResult",
    "ExtractedEndpoint",
    "MessageRouter",
    "CQHTTPClient",
    "CQHTTPError",
    "HostRegistryClient",
    "RegistryError",
]
