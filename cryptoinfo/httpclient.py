"""HTTP requests and the periodic download loops built on them."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping

import httpx

log = logging.getLogger(__name__)

TIMEOUT_SECONDS = 15.0
MAX_TRY_COUNT = 5

_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/103.0.5060.134 Safari/537.36"
)
_ERRORS = (httpx.HTTPError, httpx.InvalidURL)

Callback = Callable[[str], object]


def common_headers() -> dict[str, str]:
    """Headers sent with every request."""
    return {
        "Accept": "application/json, text/plain, */*",
        "user-agent": _USER_AGENT,
    }


class DownloadProvider(ABC):
    """A source of requests for :func:`download_timer_pro` and :func:`post`."""

    @abstractmethod
    def url(self) -> str:
        """The address to request."""

    @abstractmethod
    def update_interval(self) -> int:
        """Seconds between two regular requests."""

    @abstractmethod
    def update_now(self) -> bool:
        """Whether a request is wanted right away."""

    @abstractmethod
    def disable_update_now(self) -> None:
        """Clear the request-now flag."""

    def parse_body(self, text: str) -> None:
        """Hook receiving every non-empty response body; ignores it by default."""

    def headers(self) -> dict[str, str]:
        return common_headers()


class PostContentProvider(ABC):
    """A source of request bodies for :func:`post`."""

    @abstractmethod
    def content(self) -> str:
        """The body to send."""


async def http_get(url: str, headers: Mapping[str, str]) -> str:
    """GET ``url`` and return the response body, whatever its status."""
    async with httpx.AsyncClient(timeout=TIMEOUT_SECONDS) as client:
        response = await client.get(url, headers=dict(headers))
        return response.text


async def http_post(url: str, headers: Mapping[str, str], content: str) -> str:
    """POST ``content`` to ``url`` and return the response body."""
    async with httpx.AsyncClient(timeout=TIMEOUT_SECONDS) as client:
        response = await client.post(url, headers=dict(headers), content=content)
        return response.text


class _Ticker:
    """Fires once immediately, then once per period on a fixed schedule."""

    def __init__(self, period: float = 1.0) -> None:
        self._period = period
        self._deadline: float | None = None

    async def tick(self) -> None:
        loop = asyncio.get_running_loop()
        if self._deadline is None:
            self._deadline = loop.time()
        else:
            self._deadline += self._period
        await asyncio.sleep(max(0.0, self._deadline - loop.time()))


def download_timer(
    url: str, interval: int, delay_start_second: int, callback: Callback
) -> asyncio.Task[None]:
    """Fetch ``url`` every ``interval`` seconds in the background.

    Every non-empty body is handed to ``callback``. Returns the running task.
    """

    async def run() -> None:
        ticker = _Ticker()
        count = 0
        period = max(1, interval)
        headers = common_headers()
        while True:
            if count % period == delay_start_second:
                try:
                    text = await http_get(url, headers)
                except _ERRORS as exc:
                    count = 0
                    log.debug("%r", exc)
                else:
                    if text:
                        callback(text)
            count += 1
            await ticker.tick()

    return asyncio.create_task(run())


def _get_request(provider: DownloadProvider) -> Callable[[], Awaitable[str]]:
    url, headers = provider.url(), provider.headers()
    return lambda: http_get(url, headers)


def _post_request(provider: DownloadProvider) -> Callable[[], Awaitable[str]]:
    url, headers = provider.url(), provider.headers()
    content = provider.content()  # type: ignore[attr-defined]
    return lambda: http_post(url, headers, content)


async def _provider_loop(
    provider: DownloadProvider,
    delay_start_second: int,
    callback: Callback,
    make_request: Callable[[DownloadProvider], Callable[[], Awaitable[str]]],
) -> None:
    ticker = _Ticker()
    count = 0
    tries = 0
    while True:
        send = make_request(provider)
        period = max(1, provider.update_interval())

        if provider.update_now():
            try:
                text = await send()
            except _ERRORS as exc:
                log.debug("%r", exc)
            else:
                if text:
                    tries = 0
                    provider.parse_body(text)
                    callback(text)
                    count = delay_start_second + 1
            provider.disable_update_now()
            continue

        if count % period == delay_start_second and tries < MAX_TRY_COUNT:
            try:
                text = await send()
            except _ERRORS as exc:
                count = 0
                tries += 1
                log.debug("%r", exc)
            else:
                if text:
                    tries = 0
                    provider.parse_body(text)
                    callback(text)
        count += 1
        await ticker.tick()


def download_timer_pro(
    provider: DownloadProvider, delay_start_second: int, callback: Callback
) -> asyncio.Task[None]:
    """Fetch the provider's address on its schedule, or at once when it asks.

    Regular requests stop after five failures in a row; an on-demand request
    is always made. Returns the running task.
    """
    return asyncio.create_task(
        _provider_loop(provider, delay_start_second, callback, _get_request)
    )


def post(provider: DownloadProvider, delay_start_second: int, callback: Callback) -> asyncio.Task[None]:
    """Like :func:`download_timer_pro`, but POSTs the provider's content."""
    if not isinstance(provider, PostContentProvider):
        raise TypeError("provider must also supply content()")
    return asyncio.create_task(
        _provider_loop(provider, delay_start_second, callback, _post_request)
    )