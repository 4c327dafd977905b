"""The price list: ticker download, user marks and floor prices, sorting."""

from __future__ import annotations

import asyncio
import dataclasses
import json
import logging
import os
from pathlib import Path

from cryptoinfo.httpclient import DownloadProvider, common_headers, download_timer_pro
from cryptoinfo.listmodel import ListModel, Signal
from cryptoinfo.price.data import PriceItem, Private, parse_privates, parse_raw_items
from cryptoinfo.price.sort import SortDir, SortKey, parse_sort_key
from cryptoinfo.utility import local_time_now

log = logging.getLogger(__name__)

TICKER_URL = "https://api.alternative.me/v1/ticker/?limit="
MIN_UPDATE_INTERVAL = 5
_FLOOR_EPSILON = 0.00001

_FLOAT_KEYS = {
    SortKey.PER_24H: lambda item: item.percent_change_24h,
    SortKey.PER_7D: lambda item: item.percent_change_7d,
    SortKey.VOLUME_24H: lambda item: item.volume_24h_usd,
    SortKey.PRICE: lambda item: item.price_usd,
    SortKey.FLOOR: lambda item: item.floor_price,
}


class PriceModel(ListModel[PriceItem], DownloadProvider):
    """Coin prices from the ticker feed, merged with the user's own notes.

    The model is its own download provider: ``start`` runs the refresh loop,
    each response body is cached by ``parse_body`` and shown by
    ``update_model``.
    """

    def __init__(
        self,
        private_path: str | os.PathLike[str],
        item_max_count: int = 100,
        update_interval: int = 30,
    ) -> None:
        super().__init__(PriceItem)
        self.private_path = Path(private_path)
        self.privates: list[Private] = []
        self.sort_key = SortKey.MARKED
        self.sort_dir = SortDir.default()
        self.bull_percent = 0.0
        self.item_max_count = 0
        self.update_time = ""

        self.bull_percent_changed = Signal()
        self.item_max_count_changed = Signal()
        self.update_time_changed = Signal()
        self.manually_refresh = Signal()

        self._pending: list[PriceItem] | None = None
        self._url = ""
        self._update_now = False
        self._update_interval = update_interval

        self.set_url(item_max_count)
        self.load_private()

    # -- persistence of the user's notes -------------------------------------

    def load_private(self) -> None:
        """Read the saved marks and floor prices, if there are any."""
        try:
            text = self.private_path.read_text(encoding="utf-8")
        except OSError:
            return
        try:
            self.privates = parse_privates(text)
        except ValueError as exc:
            log.debug("%r", exc)

    def save_private(self) -> None:
        """Store the marks and floor prices of the current items."""
        self.privates = [
            Private(symbol=item.symbol, marked=item.marked, floor_price=item.floor_price)
            for item in self
            if item.marked or item.floor_price >= _FLOOR_EPSILON
        ]
        text = json.dumps([p.to_dict() for p in self.privates], indent=2, ensure_ascii=False)
        try:
            self.private_path.write_text(text, encoding="utf-8")
        except OSError:
            log.warning("save %s failed", self.private_path)

    def _private_for(self, symbol: str) -> Private | None:
        wanted = symbol.lower()
        return next((p for p in self.privates if p.symbol.lower() == wanted), None)

    # -- feed handling -------------------------------------------------------

    def cache_items(self, text: str) -> None:
        """Parse a ticker response and keep its items until ``update_model``."""
        try:
            entries = parse_raw_items(text)
        except ValueError as exc:
            log.debug("%r", exc)
            return

        bull = bear = 0
        pending: list[PriceItem] = []
        for index, item in enumerate(entries):
            if index >= self.item_max_count:
                break
            if item.percent_change_24h > 0.0:
                bull += 1
            else:
                bear += 1
            item.index = index
            private = self._private_for(item.symbol)
            if private is not None:
                item.marked = private.marked
                item.floor_price = private.floor_price
            pending.append(item)
        self._pending = pending

        if bull + bear > 0:
            self.bull_percent = bull / (bull + bear)
            self.bull_percent_changed.emit()

    def update_model(self) -> None:
        """Show the cached items, re-sorted; does nothing when none are cached."""
        pending, self._pending = self._pending, None
        if pending is None:
            return
        self.set_all(pending)
        self.update_time = local_time_now("%H:%M:%S")
        self.sort_by_key(self.sort_key)
        self.update_time_changed.emit()

    # -- user actions --------------------------------------------------------

    def sort_by_key(self, key: int) -> None:
        """Sort by ``key`` in the current direction and remember the key."""
        if self.is_empty():
            return
        sort_key = parse_sort_key(key)
        data = self.items()
        if sort_key is SortKey.SYMBOL:
            data.sort(key=lambda item: item.symbol)
        elif sort_key is SortKey.INDEX:
            data.sort(key=lambda item: item.index)
        elif sort_key is SortKey.MARKED:
            data.sort(key=lambda item: item.index, reverse=True)
            data.sort(key=lambda item: item.marked)
        else:
            data.sort(key=_FLOAT_KEYS[sort_key])

        if self.sort_dir is not SortDir.UP:
            data.reverse()
        self.sort_key = sort_key
        self.items_changed(0, len(self) - 1)

    def search_and_view_at_beginning(self, text: str) -> None:
        """Move the first item whose symbol matches ``text`` to the top."""
        wanted = text.lower()
        index = next((i for i, item in enumerate(self) if item.symbol.lower() == wanted), None)
        if index is not None:
            self.swap_row(0, index)

    def _update_item(self, index: int, **changes: object) -> None:
        if not 0 <= index < len(self):
            return
        self.set(index, dataclasses.replace(self[index], **changes))
        self.save_private()

    def set_marked(self, index: int, marked: bool) -> None:
        self._update_item(index, marked=marked)

    def set_floor_price(self, index: int, price: float) -> None:
        self._update_item(index, floor_price=price)

    def set_url(self, limit: int) -> None:
        """Request ``limit`` coins from the ticker."""
        self.item_max_count = limit
        self._url = TICKER_URL + str(limit)

    def refresh(self) -> None:
        """Ask for a download right away."""
        self.manually_refresh.emit()
        self._update_now = True

    def toggle_sort_dir(self) -> None:
        self.sort_dir = self.sort_dir.toggled()

    def set_update_interval(self, interval: int) -> None:
        self._update_interval = max(MIN_UPDATE_INTERVAL, interval)

    # -- download provider ---------------------------------------------------

    def url(self) -> str:
        return self._url

    def update_interval(self) -> int:
        return self._update_interval

    def update_now(self) -> bool:
        return self._update_now

    def disable_update_now(self) -> None:
        self._update_now = False

    def parse_body(self, text: str) -> None:
        self.cache_items(text)

    def headers(self) -> dict[str, str]:
        return common_headers()

    def start(self) -> asyncio.Task[None]:
        """Run the refresh loop in the background; returns its task."""
        return download_timer_pro(self, 1, lambda _text: self.update_model())