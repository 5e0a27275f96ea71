"""Application context and entry point."""

import sys
from typing import Optional

import aiohttp
import uvicorn

from cqbot.adapters.cqhttp.client import CQHTTPClient
from cqbot.adapters.registry.client import HostRegistryClient
from cqbot.adapters.web.server import create_app
from cqbot.config import AppConfig
from cqbot.domain.router import MessageRouter


def _log(msg: str):
    print(msg, file=sys.stderr)


class BotContext:
    """Everything one running bot owns, built once at startup.

    The HTTP session and the clients on top of it exist between ``start()``
    and ``close()``. A router passed in explicitly is kept as is.
    """

    def __init__(self, config: AppConfig, router: Optional[MessageRouter] = None):
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None
        self.cqhttp: Optional[CQHTTPClient] = None
        self.registry: Optional[HostRegistryClient] = None
        self._router = router

    @property
    def router(self) -> MessageRouter:
        if self._router is None:
            raise RuntimeError("BotContext not started")
        return self._router

    async def start(self) -> None:
        if self.session is None:
            timeout = aiohttp.ClientTimeout(total=self.config.http_timeout_seconds)
            self.session = aiohttp.ClientSession(timeout=timeout)
        self.cqhttp = CQHTTPClient(
            self.session,
            api_url=self.config.cqhttp.api_url,
            access_token=self.config.cqhttp.access_token,
        )
        self.registry = HostRegistryClient(self.session, url=self.config.registry.url)
        if self._router is None:
            self._router = MessageRouter(reply=self.cqhttp, registry=self.registry)

    async def close(self) -> None:
        if self._router is not None:
            await self._router.drain()
        if self.session is not None:
            await self.session.close()
            self.session = None


def main():
    config = AppConfig.from_env()
    context = BotContext(config)
    app = create_app(context)
    _log(f"cqbot starting on {config.listen_host}:{config.listen_port}")
    _log(f"Registry: {config.registry.url}")
    uvicorn.run(app, host=config.listen_host, port=config.listen_port)


if __name__ == "__main__":
    main()
