"""CQHTTP API client using aiohttp — implements ReplyPort."""

from typing import Any, Dict, Optional

import aiohttp


class CQHTTPError(RuntimeError):
    """The connector rejected or failed an API call."""


class CQHTTPClient:
    """Async client for the connector's HTTP API (send side only)."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_url: str = "http://localhost:5700",
        access_token: str = "",
    ):
        self._session = session
        self._api_url = api_url.rstrip("/")
        self._access_token = access_token

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    async def call_action(self, action: str, params: Dict[str, Any]) -> Optional[Any]:
        """POST ``params`` to ``/{action}`` and return the response ``data``."""
        url = f"{self._api_url}/{action}"
        async with self._session.post(url, json=params, headers=self._headers()) as resp:
            if resp.status >= 400:
                body = await resp.text()
                raise CQHTTPError(f"{action}: HTTP {resp.status}: {body}")
            data = await resp.json(content_type=None)

        if not isinstance(data, dict):
            raise CQHTTPError(f"{action}: unexpected response {data!r}")
        # retcode 0 = ok, 1 = accepted for async processing
        if data.get("status") == "failed" or data.get("retcode", 0) not in (0, 1):
            raise CQHTTPError(f"{action}: retcode={data.get('retcode')} {data.get('msg', '')}".rstrip())
        return data.get("data")

    async def send_private_msg(self, user_id: int, message: str) -> None:
        await self.call_action("send_private_msg", {"user_id": user_id, "message": message})
