"""Unit tests for CQHTTPClient."""

import pytest

from cqbot.adapters.cqhttp.client import CQHTTPClient, CQHTTPError
from cqbot.ports.outbound import ReplyPort


class FakeResponse:
    def __init__(self, data, status=200, text=""):
        self._data = data
        self.status = status
        self._text = text

    async def json(self, content_type="application/json"):
        return self._data

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


class FakeSession:
    """Stands in for aiohttp.ClientSession; records every post() call."""

    def __init__(self, response):
        self._response = response
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self._response


def _ok():
    return FakeResponse({"status": "ok", "retcode": 0, "data": {"message_id": 1}})


class TestSendPrivateMsg:
    def test_is_reply_port(self):
        assert isinstance(CQHTTPClient(FakeSession(_ok())), ReplyPort)

    @pytest.mark.asyncio
    async def test_posts_user_and_message(self):
        session = FakeSession(_ok())
        client = CQHTTPClient(session, api_url="http://localhost:5700/")
        await client.send_private_msg(7, "echo [CQ:face,id=1]")
        url, kwargs = session.calls[0]
        assert url == "http://localhost:5700/send_private_msg"
        assert kwargs["json"] == {"user_id": 7, "message": "echo [CQ:face,id=1]"}
        assert "Authorization" not in kwargs["headers"]

    @pytest.mark.asyncio
    async def test_access_token_header(self):
        session = FakeSession(_ok())
        client = CQHTTPClient(session, access_token="tok")
        await client.send_private_msg(7, "hi")
        assert session.calls[0][1]["headers"]["Authorization"] == "Bearer tok"

    @pytest.mark.asyncio
    async def test_http_error(self):
        session = FakeSession(FakeResponse(None, status=401, text="unauthorized"))
        client = CQHTTPClient(session)
        with pytest.raises(CQHTTPError, match="HTTP 401"):
            await client.send_private_msg(7, "hi")

    @pytest.mark.asyncio
    async def test_failed_retcode(self):
        session = FakeSession(FakeResponse({"status": "failed", "retcode": 100, "msg": "bad user"}))
        client = CQHTTPClient(session)
        with pytest.raises(CQHTTPError, match="retcode=100"):
            await client.send_private_msg(7, "hi")

    @pytest.mark.asyncio
    async def test_async_status_is_success(self):
        session = FakeSession(FakeResponse({"status": "async", "retcode": 1, "data": None}))
        client = CQHTTPClient(session)
        await client.send_private_msg(7, "hi")
        assert len(session.calls) == 1

    @pytest.mark.asyncio
    async def test_non_object_response(self):
        session = FakeSession(FakeResponse(["nope"]))
        client = CQHTTPClient(session)
        with pytest.raises(CQHTTPError, match="unexpected response"):
            await client.send_private_msg(7, "hi")


class TestCallAction:
    @pytest.mark.asyncio
    async def test_returns_data(self):
        client = CQHTTPClient(FakeSession(_ok()))
        data = await client.call_action("send_private_msg", {"user_id": 1, "message": "x"})
        assert data == {"message_id": 1}
