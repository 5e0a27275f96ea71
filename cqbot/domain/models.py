"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ExtractedEndpoint:
    """Address candidate pulled out of a group message.

    Octets and port are kept exactly as matched; ``999.999.999.999:99999``
    is a valid value here.
    """

    host: str  # e.g. "192.168.1.100"
    port: str  # e.g. "8080"
    description: str

    @property
    def addr(self) -> str:
        return f"{self.host}:{self.port}"

    def to_payload(self) -> Dict[str, str]:
        """JSON body for the registry's host add call."""
        return {"addr": self.addr, "desc": self.description}
