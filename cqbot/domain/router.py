"""MessageRouter — per-message decision logic, no framework dependencies.

Private messages are echoed back to the sender. Group messages are scanned
for an address:port and, if one is found, submitted to the host registry.
"""

import asyncio
import sys
from typing import Set

from cqbot.domain.cq_code import extract_endpoint, has_at_mention, strip_cq_codes
from cqbot.ports.inbound import IncomingMessage, MessageCategory
from cqbot.ports.outbound import RegistryPort, ReplyPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class MessageRouter:
    """Stateless per message; testable with mock ports.

    ``dispatch`` runs each message as its own task so the caller never waits
    on network I/O. Failures inside a task are not retried or reported to
    chat, only logged.
    """

    def __init__(self, reply: ReplyPort, registry: RegistryPort):
        self._reply = reply
        self._registry = registry
        self._pending: Set[asyncio.Task] = set()
        self.handled_count = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def handle_private_message(self, msg: IncomingMessage) -> None:
        await self._reply.send_private_msg(msg.sender_id, msg.text)

    async def handle_group_message(self, msg: IncomingMessage) -> None:
        if has_at_mention(msg.text):
            return

        endpoint = extract_endpoint(strip_cq_codes(msg.text))
        if endpoint is None:
            return

        result = await self._registry.add_host(endpoint)
        _log(f"[router] submitted {result.addr} (group={msg.group_id}, status={result.status})")

    async def handle(self, msg: IncomingMessage) -> None:
        if msg.category == MessageCategory.PRIVATE:
            await self.handle_private_message(msg)
        elif msg.category == MessageCategory.GROUP:
            await self.handle_group_message(msg)

    def dispatch(self, msg: IncomingMessage) -> asyncio.Task:
        """Schedule ``handle(msg)`` as an independent task and return it."""
        task = asyncio.create_task(self.handle(msg))
        self._pending.add(task)
        task.add_done_callback(self._on_task_done)
        self.handled_count += 1
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _log(f"[router] task failed: {type(exc).__name__}: {exc}")

    async def drain(self) -> None:
        """Wait for every pending task; used on shutdown."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
