"""Time formatting, file helpers and other small application services."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import NoReturn

log = logging.getLogger(__name__)

VERSION = "v1.9.5"

_UTC_PLUS_8 = timezone(timedelta(hours=8))

PathLike = str | os.PathLike


def local_time_now(fmt: str) -> str:
    """The current local time formatted with ``fmt``."""
    return datetime.now().strftime(fmt)


def utc_seconds_to_local_string(sec: int, fmt: str) -> str:
    """Format a Unix timestamp in UTC+8 with ``fmt``."""
    return datetime.fromtimestamp(sec, tz=_UTC_PLUS_8).strftime(fmt)


def time_from_utc_seconds(sec: int) -> str:
    """A Unix timestamp as ``YYYY-MM-DD HH:MM`` in UTC+8."""
    return utc_seconds_to_local_string(sec, "%Y-%m-%d %H:%M")


def copy_to_clipboard(text: str) -> bool:
    """Put ``text`` on the system clipboard; False when there is none."""
    try:
        import tkinter
    except ImportError:
        return False
    try:
        root = tkinter.Tk()
        try:
            root.withdraw()
            root.clipboard_clear()
            root.clipboard_append(text)
            root.update()
        finally:
            root.destroy()
    except tkinter.TclError as exc:
        log.debug("copy to clipboard error: %r", exc)
        return False
    return True


def move_file(src: PathLike, dst: PathLike) -> bool:
    """Rename ``src`` to ``dst``."""
    try:
        os.rename(src, dst)
    except OSError:
        return False
    return True


def move_files(src_dir: PathLike, dst_dir: PathLike) -> bool:
    """Move every file below ``src_dir`` to the same place below ``dst_dir``.

    Sub-directories of the source are left behind, emptied.
    """
    src, dst = Path(src_dir), Path(dst_dir)
    try:
        if not dst.exists():
            dst.mkdir(parents=True)
        entries = list(os.scandir(src))
    except OSError:
        return False

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            return False
        if is_dir:
            if not move_files(src / entry.name, dst / entry.name):
                return False
            continue
        target = dst / entry.name
        try:
            os.rename(entry.path, target)
        except OSError as exc:
            log.warning("%s -> %s failed! error: %r", entry.path, target, exc)
            return False
    return True


def remove_dir(path: PathLike) -> bool:
    """Remove a directory tree; a missing path counts as removed."""
    target = Path(path)
    if not target.exists():
        return True
    try:
        shutil.rmtree(target)
    except OSError:
        return False
    return True


def copy_dir(src_dir: PathLike, dst_dir: PathLike) -> bool:
    """Copy directory ``src_dir`` into ``dst_dir``, overwriting existing files."""
    src, dst = Path(src_dir), Path(dst_dir)
    try:
        if not dst.exists():
            dst.mkdir(parents=True)
        shutil.copytree(src, dst / src.name, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        log.warning("copy dir %s => %s failed. error: %r", src_dir, dst_dir, exc)
        return False
    log.debug("copy dir %s => %s successfully", src_dir, dst_dir)
    return True


def exit_app(code: int) -> NoReturn:
    """Leave the application with exit status ``code``."""
    sys.exit(code)


def process_cmd(cmd: str, args: str) -> bool:
    """Start ``cmd`` with the comma-separated ``args``, without waiting for it."""
    try:
        subprocess.Popen([cmd, *args.split(",")])
    except OSError:
        return False
    return True


def app_version() -> str:
    return VERSION