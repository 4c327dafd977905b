"""Trade journal: buys and sells grouped by asset."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from pathlib import Path

from cryptoinfo.listmodel import ListModel

log = logging.getLogger(__name__)


@dataclass
class HandBookItem:
    """An asset whose trades are recorded."""

    name: str = ""


@dataclass
class HandBookSubItem:
    """One trade: a sell when ``is_sell``, otherwise a buy."""

    is_sell: bool = False
    time: str = ""
    total_price: float = 0.0
    count: float = 0.0


def _fmt(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _new_sub_model(items: Iterable[HandBookSubItem] = ()) -> ListModel[HandBookSubItem]:
    model: ListModel[HandBookSubItem] = ListModel(HandBookSubItem)
    for item in items:
        model.append(item)
    return model


def _parse_sub(sub: object) -> HandBookSubItem | None:
    if not isinstance(sub, dict):
        return None
    is_sell, time = sub.get("is_sell"), sub.get("time")
    total_price, count = sub.get("total_price"), sub.get("count")
    if not isinstance(is_sell, bool) or not isinstance(time, str):
        return None
    if not _is_number(total_price) or not _is_number(count):
        return None
    return HandBookSubItem(is_sell, time, float(total_price), float(count))


def _parse_entry(entry: object) -> tuple[str, list[HandBookSubItem]] | None:
    if not isinstance(entry, dict):
        return None
    name, datas = entry.get("name"), entry.get("datas")
    if not isinstance(name, str) or not isinstance(datas, list):
        return None
    subs = [_parse_sub(sub) for sub in datas]
    if any(sub is None for sub in subs):
        return None
    return name, subs  # type: ignore[return-value]


def _payment_income(trades: Iterable[HandBookSubItem]) -> tuple[float, float]:
    payment = income = 0.0
    for trade in trades:
        if trade.is_sell:
            income += trade.total_price
        else:
            payment += trade.total_price
    return payment, income


class HandBookModel(ListModel[HandBookItem]):
    """Assets and their trades stored as JSON at ``path``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(HandBookItem)
        self.path = Path(path)
        self.sub_models: list[ListModel[HandBookSubItem]] = []

    def load(self) -> None:
        """Append the saved assets; a missing or malformed file adds nothing."""
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return
        if not isinstance(raw, list):
            return
        entries = [_parse_entry(entry) for entry in raw]
        if any(entry is None for entry in entries):
            return
        for name, subs in entries:  # type: ignore[misc]
            self.append(HandBookItem(name=name))
            self.sub_models.append(_new_sub_model(subs))

    def save(self) -> None:
        raw = [
            {
                "name": item.name,
                "datas": [
                    {
                        "is_sell": sub.is_sell,
                        "total_price": sub.total_price,
                        "count": sub.count,
                        "time": sub.time,
                    }
                    for sub in sub_model
                ],
            }
            for item, sub_model in zip(self, self.sub_models)
        ]
        try:
            self.path.write_text(json.dumps(raw, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError:
            log.warning("save %s failed", self.path)

    def add_item(self, name: str) -> None:
        """Append an asset called ``name`` with no trades."""
        self.append(HandBookItem(name=name))
        self.sub_models.append(_new_sub_model())

    def set_item(self, index: int, name: str) -> None:
        self.set(index, HandBookItem(name=name))

    def remove_item(self, index: int) -> None:
        self.remove_rows(index, 1)
        if 0 <= index < len(self.sub_models):
            del self.sub_models[index]

    def up_item(self, index: int) -> None:
        self.up_row(index)
        if 0 < index < len(self.sub_models):
            subs = self.sub_models
            subs[index - 1], subs[index] = subs[index], subs[index - 1]

    def down_item(self, index: int) -> None:
        self.down_row(index)
        if 0 <= index and index + 1 < len(self.sub_models):
            subs = self.sub_models
            subs[index], subs[index + 1] = subs[index + 1], subs[index]

    def _sub_model(self, index: int) -> ListModel[HandBookSubItem] | None:
        if 0 <= index < len(self.sub_models):
            return self.sub_models[index]
        return None

    def sub_model_len(self, index: int) -> int:
        sub_model = self._sub_model(index)
        return 0 if sub_model is None else len(sub_model)

    def sub_model_item(self, index: int, sub_index: int) -> HandBookSubItem:
        """The trade at ``sub_index`` of asset ``index``, or an empty one."""
        sub_model = self._sub_model(index)
        if sub_model is None:
            return HandBookSubItem()
        return sub_model.item(sub_index)

    def add_sub_model_item(
        self, index: int, is_sell: bool, time: str, total_price: float, count: float
    ) -> None:
        sub_model = self._sub_model(index)
        if sub_model is not None:
            sub_model.append(HandBookSubItem(is_sell, time, total_price, count))

    def remove_sub_model_item(self, index: int, sub_index: int) -> None:
        sub_model = self._sub_model(index)
        if sub_model is not None:
            sub_model.remove_rows(sub_index, 1)

    def up_join_sub_model_item(self, index: int, sub_index: int) -> bool:
        """Merge trade ``sub_index`` into the one above it if both are of one kind."""
        sub_model = self._sub_model(index)
        if sub_model is None or sub_index <= 0 or sub_index >= len(sub_model):
            return False
        lower, upper = sub_model[sub_index], sub_model[sub_index - 1]
        if lower.is_sell != upper.is_sell:
            return False
        upper.total_price = lower.total_price + upper.total_price
        upper.count = lower.count + upper.count
        sub_model.remove_rows(sub_index, 1)
        return True

    def up_sub_model_item(self, index: int, sub_index: int) -> None:
        sub_model = self._sub_model(index)
        if sub_model is None or sub_index <= 0:
            return
        sub_model.swap_row(sub_index - 1, sub_index)

    def down_sub_model_item(self, index: int, sub_index: int) -> None:
        sub_model = self._sub_model(index)
        if sub_model is None or sub_index >= len(sub_model):
            return
        sub_model.swap_row(sub_index, sub_index + 1)

    def set_sub_model_item(
        self,
        index: int,
        sub_index: int,
        is_sell: bool,
        time: str,
        total_price: float,
        count: float,
    ) -> None:
        sub_model = self._sub_model(index)
        if sub_model is None or not 0 <= sub_index < len(sub_model):
            return
        sub_model.set(sub_index, HandBookSubItem(is_sell, time, total_price, count))

    def stats(self, index: int) -> str:
        """``"payment,income,count_diff"`` for asset ``index``, or ``""``."""
        sub_model = self._sub_model(index)
        if sub_model is None:
            return ""
        payment, income = _payment_income(sub_model)
        count_diff = sum(t.count if t.is_sell else -t.count for t in sub_model)
        return f"{_fmt(payment)},{_fmt(income)},{_fmt(count_diff)}"

    def pie_chart_stats(self, index: int) -> str:
        """``"name,payment,income"`` for asset ``index``, or ``""``."""
        sub_model = self._sub_model(index)
        if sub_model is None or not 0 <= index < len(self):
            return ""
        payment, income = _payment_income(sub_model)
        return f"{self[index].name},{_fmt(payment)},{_fmt(income)}"

    def balance(self) -> str:
        """``"payment,income"`` over every trade of every asset."""
        payment, income = _payment_income(t for m in self.sub_models for t in m)
        return f"{_fmt(payment)},{_fmt(income)}"

    def as_dicts(self) -> list[dict[str, object]]:
        return [
            {"name": item.name, "datas": [asdict(sub) for sub in sub_model]}
            for item, sub_model in zip(self, self.sub_models)
        ]