"""Host registry client using aiohttp — implements RegistryPort."""

import asyncio

import aiohttp

from cqbot.config import DEFAULT_REGISTRY_URL
from cqbot.domain.models import ExtractedEndpoint
from cqbot.ports.outbound import SubmitResult


class RegistryError(RuntimeError):
    """Submission failed: network error, HTTP error status or a non-JSON reply."""


class HostRegistryClient:
    """Posts extracted endpoints to the registry's host add API. No retries."""

    def __init__(self, session: aiohttp.ClientSession, url: str = DEFAULT_REGISTRY_URL):
        self._session = session
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    async def add_host(self, endpoint: ExtractedEndpoint) -> SubmitResult:
        try:
            async with self._session.post(
                self._url,
                json=endpoint.to_payload(),
                headers={"Content-Type": "application/json"},
            ) as resp:
                if resp.status >= 400:
                    body = await resp.text()
                    raise RegistryError(f"HTTP {resp.status}: {body}")
                data = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RegistryError(f"{endpoint.addr}: {e!r}") from e
        except ValueError as e:
            raise RegistryError(f"{endpoint.addr}: malformed JSON response") from e

        return SubmitResult(addr=endpoint.addr, status=resp.status, data=data)
