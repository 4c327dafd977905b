"""Markdown notes kept as files in one directory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from cryptoinfo.listmodel import ListModel, Signal

log = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


@dataclass
class NoteItem:
    """A note, named after its file without the extension."""

    name: str = ""


def _is_utf8(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class NoteModel(ListModel[NoteItem]):
    """The notes of ``directory``; ``text`` holds the note last loaded or saved."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        super().__init__(NoteItem)
        self.directory = Path(directory)
        self.text = ""
        self.text_changed = Signal()

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}{NOTE_SUFFIX}"

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self)

    def load_names(self) -> None:
        """Append one item per ``name.ext`` file of the directory, sorted by name."""
        if not self.directory.exists():
            return
        try:
            names = os.listdir(self.directory)
        except OSError as exc:
            log.debug("%r", exc)
            return
        for file_name in names:
            if not _is_utf8(file_name):
                log.debug("skipping undecodable file name %r", file_name)
                continue
            parts = file_name.split(".")
            if len(parts) != 2:
                continue
            self.append(NoteItem(name=parts[0]))
        self.items().sort(key=lambda item: item.name)

    def load(self, index: int) -> None:
        """Read note ``index`` into ``text``; an unreadable note reads as empty."""
        if not self._valid(index):
            return
        path = self._path(self[index].name)
        try:
            self.text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.text = ""
            log.debug("%r", exc)
        self.text_changed.emit()

    def save(self, index: int, text: str) -> None:
        """Make ``text`` the content of note ``index``."""
        if not self._valid(index):
            return
        path = self._path(self[index].name)
        self.text = text
        self.text_changed.emit()
        try:
            path.write_text(self.text, encoding="utf-8")
        except OSError:
            log.warning("save %s failed", path)

    def add_item(self, name: str) -> None:
        """Create an empty note; ``-copy`` is appended until the name is free."""
        if not name:
            return
        taken = {item.name for item in self}
        while name in taken:
            name = f"{name}-copy"
        try:
            self._path(name).write_text("", encoding="utf-8")
        except OSError as exc:
            log.debug("%r", exc)
            return
        self.append(NoteItem(name=name))

    def set_item(self, index: int, name: str) -> None:
        """Rename note ``index``, unless another note already has ``name``."""
        if not self._valid(index):
            return
        old_path = self._path(self[index].name)
        new_path = self._path(name)
        if old_path == new_path:
            return
        if any(item.name == name for item in self):
            return
        try:
            os.rename(old_path, new_path)
        except OSError as exc:
            log.debug("%r", exc)
            return
        self.set(index, NoteItem(name=name))

    def remove_item(self, index: int) -> None:
        """Delete note ``index`` and its file."""
        if not self._valid(index):
            return
        path = self._path(self[index].name)
        try:
            os.remove(path)
        except OSError as exc:
            log.debug("%r", exc)
            return
        self.remove_rows(index, 1)