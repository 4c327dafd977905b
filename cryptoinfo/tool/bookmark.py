"""Bookmarks grouped into named folders."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from cryptoinfo.listmodel import ListModel

log = logging.getLogger(__name__)


@dataclass
class BookMarkItem:
    """A folder of bookmarks."""

    name: str = ""


@dataclass
class BookMarkSubItem:
    """A single bookmark."""

    name: str = ""
    url: str = ""


def _new_sub_model(items: Iterable[BookMarkSubItem] = ()) -> ListModel[BookMarkSubItem]:
    model: ListModel[BookMarkSubItem] = ListModel(BookMarkSubItem)
    for item in items:
        model.append(item)
    return model


def _parse_entry(entry: object) -> tuple[str, list[BookMarkSubItem]] | None:
    if not isinstance(entry, dict):
        return None
    name, datas = entry.get("name"), entry.get("datas")
    if not isinstance(name, str) or not isinstance(datas, list):
        return None
    subs = []
    for sub in datas:
        if not (
            isinstance(sub, dict)
            and isinstance(sub.get("name"), str)
            and isinstance(sub.get("url"), str)
        ):
            return None
        subs.append(BookMarkSubItem(name=sub["name"], url=sub["url"]))
    return name, subs


class BookMarkModel(ListModel[BookMarkItem]):
    """Bookmark folders stored as JSON at ``path``; each folder has its own list."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(BookMarkItem)
        self.path = Path(path)
        self.sub_models: list[ListModel[BookMarkSubItem]] = []

    def load(self) -> None:
        """Append the saved folders; a missing or malformed file adds nothing."""
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
            self.append(BookMarkItem(name=name))
            self.sub_models.append(_new_sub_model(subs))

    def save(self) -> None:
        raw = [
            {
                "name": item.name,
                "datas": [{"name": sub.name, "url": sub.url} for sub in sub_model],
            }
            for item, sub_model in zip(self, self.sub_models)
        ]
        try:
            self.path.write_text(json.dumps(raw, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError:
            log.warning("save %s failed", self.path)

    def add_item(self, name: str) -> None:
        """Append an empty folder called ``name``."""
        self.append(BookMarkItem(name=name))
        self.sub_models.append(_new_sub_model())

    def set_item(self, index: int, name: str) -> None:
        self.set(index, BookMarkItem(name=name))

    def remove_item(self, index: int) -> None:
        self.remove_rows(index, 1)
        if 0 <= index < len(self.sub_models):
            del self.sub_models[index]

    def up_item(self, index: int) -> None:
        if index <= 0:
            return
        self.swap_row(index - 1, index)
        if index < len(self.sub_models):
            subs = self.sub_models
            subs[index - 1], subs[index] = subs[index], subs[index - 1]

    def down_item(self, index: int) -> None:
        if index < 0 or index >= len(self) - 1:
            return
        self.swap_row(index, index + 1)
        if index + 1 < len(self.sub_models):
            subs = self.sub_models
            subs[index], subs[index + 1] = subs[index + 1], subs[index]

    def _sub_model(self, index: int) -> ListModel[BookMarkSubItem] | None:
        if 0 <= index < len(self.sub_models):
            return self.sub_models[index]
        return None

    def sub_model_len(self, index: int) -> int:
        sub_model = self._sub_model(index)
        return 0 if sub_model is None else len(sub_model)

    def sub_model_item(self, index: int, sub_index: int) -> BookMarkSubItem:
        """The bookmark at ``sub_index`` of folder ``index``, or an empty one."""
        sub_model = self._sub_model(index)
        if sub_model is None:
            return BookMarkSubItem()
        return sub_model.item(sub_index)

    def add_sub_model_item(self, index: int, name: str, url: str) -> None:
        sub_model = self._sub_model(index)
        if sub_model is not None:
            sub_model.append(BookMarkSubItem(name=name, url=url))

    def remove_sub_model_item(self, index: int, sub_index: int) -> None:
        sub_model = self._sub_model(index)
        if sub_model is not None:
            sub_model.remove_rows(sub_index, 1)

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

    def set_sub_model_item(self, index: int, sub_index: int, name: str, url: str) -> None:
        sub_model = self._sub_model(index)
        if sub_model is None or not 0 <= sub_index < len(sub_model):
            return
        sub_model.set(sub_index, BookMarkSubItem(name=name, url=url))