"""Win and loss counts of contract trades by outcome category."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from cryptoinfo.listmodel import ListModel, Signal
from cryptoinfo.translator import Translator

log = logging.getLogger(__name__)

CATEGORIES = ("盈利小于100%", "盈利大于100%", "亏损小于50%", "亏损大于50%")
_I32 = (-(2**31), 2**31 - 1)


@dataclass
class ContractStatsItem:
    ctype: str = ""
    win_lose_count: int = 0
    float_value: float = 0.0


def _parse(entry: object) -> ContractStatsItem | None:
    if not isinstance(entry, dict):
        return None
    ctype, count, value = entry.get("ctype"), entry.get("win_lose_count"), entry.get("float_value")
    if not isinstance(ctype, str):
        return None
    if not isinstance(count, int) or isinstance(count, bool) or not _I32[0] <= count <= _I32[1]:
        return None
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    return ContractStatsItem(ctype, count, float(value))


class ContractStatsModel(ListModel[ContractStatsItem]):
    """The four outcome categories, loaded from ``path`` or freshly created."""

    def __init__(self, path: str | os.PathLike[str], translator: Translator | None = None) -> None:
        super().__init__(ContractStatsItem)
        self.path = Path(path)
        self.translator = translator or Translator()
        self.win_lose_counts = 0
        self.win_lose_counts_changed = Signal()

        self.load()
        if len(self) != len(CATEGORIES):
            self.clear()
            for ctype in CATEGORIES:
                self.append(ContractStatsItem(ctype=self.translator.tr(ctype)))
        self._count()

    def _count(self) -> None:
        self.win_lose_counts = sum(item.win_lose_count for item in self)
        self.win_lose_counts_changed.emit()

    def load(self) -> None:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return
        if not isinstance(raw, list):
            return
        items = [_parse(entry) for entry in raw]
        if any(item is None for item in items):
            return
        for item in items:
            self.append(item)

    def save(self) -> None:
        text = json.dumps([asdict(item) for item in self], indent=2, ensure_ascii=False)
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError:
            log.warning("save %s failed", self.path)

    def set_item(self, index: int, ctype: str, win_lose_count: int, float_value: float) -> None:
        self.set(index, ContractStatsItem(ctype, win_lose_count, float_value))
        self._count()
        self.updated.emit()