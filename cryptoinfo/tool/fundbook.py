"""Record of how funds are spread over asset classes at points in time."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from cryptoinfo.listmodel import ListModel

log = logging.getLogger(__name__)

_NUMBER_FIELDS = ("crypto", "stock", "saving", "other")


@dataclass
class FundBookItem:
    time: str = ""
    crypto: float = 0.0
    stock: float = 0.0
    saving: float = 0.0
    other: float = 0.0


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _parse(entry: object) -> FundBookItem | None:
    if not isinstance(entry, dict) or not isinstance(entry.get("time"), str):
        return None
    values = {}
    for key in _NUMBER_FIELDS:
        value = entry.get(key)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return None
        values[key] = float(value)
    return FundBookItem(time=entry["time"], **values)


class FundBookModel(ListModel[FundBookItem]):
    """Fund records stored as JSON at ``path``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(FundBookItem)
        self.path = Path(path)

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

    def add_item(self, time: str, crypto: float, stock: float, saving: float, other: float) -> None:
        self.append(FundBookItem(time, crypto, stock, saving, other))

    def set_item(
        self, index: int, time: str, crypto: float, stock: float, saving: float, other: float
    ) -> None:
        self.set(index, FundBookItem(time, crypto, stock, saving, other))

    def up_item(self, index: int) -> None:
        if index == 0:
            return
        self.swap_row(index - 1, index)

    def down_item(self, index: int) -> None:
        if index >= len(self) - 1:
            return
        self.swap_row(index, index + 1)

    def remove_item(self, index: int) -> None:
        self.remove_rows(index, 1)

    def up_join_item(self, index: int) -> bool:
        """Add the record at ``index`` into the one above it, keeping its time."""
        if index <= 0 or index >= len(self):
            return False
        upper, lower = self[index - 1], self[index]
        joined = FundBookItem(
            time=upper.time,
            **{key: getattr(upper, key) + getattr(lower, key) for key in _NUMBER_FIELDS},
        )
        self.set(index - 1, joined)
        self.remove_rows(index, 1)
        return True

    def stats(self) -> str:
        """``"total, crypto,stock,saving,other"`` summed over every record."""
        sums = [sum(getattr(item, key) for item in self) for key in _NUMBER_FIELDS]
        total = sum(sums)
        return f"{_fmt(total)}, " + ",".join(_fmt(v) for v in sums)