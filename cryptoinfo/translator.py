"""Interface text translation."""

from __future__ import annotations

from collections.abc import Mapping


class Translator:
    """Translates interface strings when the Chinese interface is off."""

    def __init__(self, use_chinese: bool = True, lang_map: Mapping[str, str] | None = None) -> None:
        self.use_chinese = use_chinese
        self.lang_map: dict[str, str] = dict(lang_map or {})

    def tr(self, text: str) -> str:
        """The translation of ``text``, or ``text`` itself when none applies."""
        if self.use_chinese:
            return text
        return self.lang_map.get(text, text)