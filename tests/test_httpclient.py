import asyncio
import contextlib

import httpx
import pytest
import respx

from cryptoinfo.httpclient import (
    DownloadProvider,
    PostContentProvider,
    common_headers,
    download_timer,
    download_timer_pro,
    http_get,
    http_post,
    post,
)

URL = "https://api.example.com/data"


async def _stop(task):
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task


class FakeProvider(DownloadProvider):
    def __init__(self, url, interval=30, now=False):
        self._url = url
        self._interval = interval
        self.now = now
        self.parsed = []

    def url(self):
        return self._url

    def update_interval(self):
        return self._interval

    def update_now(self):
        return self.now

    def disable_update_now(self):
        self.now = False

    def parse_body(self, text):
        self.parsed.append(text)


class FakePostProvider(FakeProvider, PostContentProvider):
    def content(self):
        return "payload"


def test_common_headers_values():
    headers = common_headers()
    assert headers["Accept"] == "application/json, text/plain, */*"
    assert "Chrome/103.0.5060.134" in headers["user-agent"]


def test_provider_default_headers_are_common():
    assert FakeProvider(URL).headers() == common_headers()


def test_provider_is_abstract():
    with pytest.raises(TypeError):
        DownloadProvider()


@pytest.mark.asyncio
async def test_http_get_returns_body_and_sends_headers():
    with respx.mock(assert_all_called=False) as router:
        route = router.get(URL).mock(return_value=httpx.Response(200, text="hello"))
        text = await http_get(URL, common_headers())
    assert text == "hello"
    assert route.calls.last.request.headers["user-agent"] == common_headers()["user-agent"]


@pytest.mark.asyncio
async def test_http_get_returns_body_of_error_status():
    with respx.mock(assert_all_called=False) as router:
        router.get(URL).mock(return_value=httpx.Response(500, text="oops"))
        text = await http_get(URL, {})
    assert text == "oops"


@pytest.mark.asyncio
async def test_http_get_raises_on_connection_failure():
    with respx.mock(assert_all_called=False) as router:
        router.get(URL).mock(side_effect=httpx.ConnectError("down"))
        with pytest.raises(httpx.ConnectError):
            await http_get(URL, {})


@pytest.mark.asyncio
async def test_http_post_sends_content():
    with respx.mock(assert_all_called=False) as router:
        route = router.post(URL).mock(return_value=httpx.Response(200, text="ok"))
        text = await http_post(URL, common_headers(), "payload")
    assert text == "ok"
    assert route.calls.last.request.content == b"payload"


@pytest.mark.asyncio
async def test_download_timer_calls_back_once_at_start():
    received = []
    with respx.mock(assert_all_called=False) as router:
        route = router.get(URL).mock(return_value=httpx.Response(200, text="hello"))
        task = download_timer(URL, 30, 0, received.append)
        await asyncio.sleep(0.2)
        await _stop(task)
    assert received == ["hello"]
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_download_timer_skips_empty_body():
    received = []
    with respx.mock(assert_all_called=False) as router:
        route = router.get(URL).mock(return_value=httpx.Response(200, text=""))
        task = download_timer(URL, 30, 0, received.append)
        await asyncio.sleep(0.2)
        await _stop(task)
    assert received == []
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_download_timer_survives_errors():
    received = []
    with respx.mock(assert_all_called=False) as router:
        route = router.get(URL).mock(side_effect=httpx.ConnectError("down"))
        task = download_timer(URL, 30, 0, received.append)
        await asyncio.sleep(0.2)
        alive = not task.done()
        await _stop(task)
    assert alive
    assert received == []
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_download_timer_pro_update_now():
    provider = FakeProvider(URL, interval=30, now=True)
    received = []
    with respx.mock(assert_all_called=False) as router:
        route = router.get(URL).mock(return_value=httpx.Response(200, text="hello"))
        task = download_timer_pro(provider, 5, received.append)
        await asyncio.sleep(0.2)
        await _stop(task)
    assert received == ["hello"]
    assert provider.parsed == ["hello"]
    assert provider.now is False
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_download_timer_pro_waits_for_delay():
    provider = FakeProvider(URL, interval=30, now=False)
    received = []
    with respx.mock(assert_all_called=False) as router:
        route = router.get(URL).mock(return_value=httpx.Response(200, text="hello"))
        task = download_timer_pro(provider, 5, received.append)
        await asyncio.sleep(0.2)
        await _stop(task)
    assert received == []
    assert route.call_count == 0


@pytest.mark.asyncio
async def test_post_sends_provider_content():
    provider = FakePostProvider(URL, interval=30, now=True)
    received = []
    with respx.mock(assert_all_called=False) as router:
        route = router.post(URL).mock(return_value=httpx.Response(200, text="done"))
        task = post(provider, 5, received.append)
        await asyncio.sleep(0.2)
        await _stop(task)
    assert received == ["done"]
    assert route.calls.last.request.content == b"payload"


def test_post_requires_content_provider():
    with pytest.raises(TypeError):
        post(FakeProvider(URL), 0, print)