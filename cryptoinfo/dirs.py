"""Per-user directories where the application keeps its files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import PlatformDirs

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppDirs:
    """The configuration and data directories of the application."""

    config_dir: Path
    data_dir: Path

    @property
    def addrbook_dir(self) -> Path:
        return self.data_dir / "addrbook"

    @property
    def notes_dir(self) -> Path:
        return self.data_dir / "notes"

    def create(self) -> bool:
        """Create every directory; return True when all of them exist."""
        ok = True
        for directory in (self.data_dir, self.addrbook_dir, self.notes_dir, self.config_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError:
                log.warning("create %s failed!!!", directory)
                ok = False
        return ok


def default_app_dirs(name: str = "cryptoinfo") -> AppDirs:
    """The platform's standard directories for an application called ``name``."""
    dirs = PlatformDirs(appname=name, appauthor=False)
    return AppDirs(config_dir=Path(dirs.user_config_dir), data_dir=Path(dirs.user_data_dir))