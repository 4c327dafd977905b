import sys
from datetime import datetime

import pytest

from cryptoinfo.utility import (
    app_version,
    copy_dir,
    exit_app,
    local_time_now,
    move_file,
    move_files,
    process_cmd,
    remove_dir,
    time_from_utc_seconds,
    utc_seconds_to_local_string,
)


def test_time_from_utc_seconds_epoch_is_utc_plus_8():
    assert time_from_utc_seconds(0) == "1970-01-01 08:00"


@pytest.mark.parametrize("sec", [0, 1_600_000_000, 1_700_000_123])
def test_custom_format_agrees_with_default(sec):
    assert utc_seconds_to_local_string(sec, "%Y-%m-%d %H:%M") == time_from_utc_seconds(sec)


def test_local_time_now_format():
    text = local_time_now("%H:%M:%S")
    assert len(text) == 8
    assert datetime.strptime(text, "%H:%M:%S").second < 60


def test_move_file(tmp_path):
    src = tmp_path / "a.txt"
    src.write_text("data")
    dst = tmp_path / "b.txt"
    assert move_file(src, dst) is True
    assert not src.exists()
    assert dst.read_text() == "data"


def test_move_file_missing(tmp_path):
    assert move_file(tmp_path / "none", tmp_path / "other") is False


def test_move_files_recursive(tmp_path):
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "one.txt").write_text("1")
    (src / "sub" / "two.txt").write_text("2")
    dst = tmp_path / "dst"

    assert move_files(src, dst) is True
    assert (dst / "one.txt").read_text() == "1"
    assert (dst / "sub" / "two.txt").read_text() == "2"
    assert not (src / "one.txt").exists()
    assert (src / "sub").is_dir()
    assert list((src / "sub").iterdir()) == []


def test_move_files_missing_source(tmp_path):
    assert move_files(tmp_path / "none", tmp_path / "dst") is False


def test_remove_dir(tmp_path):
    target = tmp_path / "tree"
    (target / "inner").mkdir(parents=True)
    (target / "inner" / "f").write_text("x")
    assert remove_dir(target) is True
    assert not target.exists()


def test_remove_dir_missing_is_ok(tmp_path):
    assert remove_dir(tmp_path / "none") is True


def test_remove_dir_on_file_fails(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    assert remove_dir(target) is False
    assert target.exists()


def test_copy_dir_into_destination(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "f.txt").write_text("new")
    dst = tmp_path / "dst"
    (dst / "src").mkdir(parents=True)
    (dst / "src" / "f.txt").write_text("old")

    assert copy_dir(src, dst) is True
    assert (dst / "src" / "f.txt").read_text() == "new"
    assert (src / "f.txt").read_text() == "new"


def test_copy_dir_missing_source(tmp_path):
    assert copy_dir(tmp_path / "none", tmp_path / "dst") is False


def test_exit_app_raises_system_exit():
    with pytest.raises(SystemExit) as info:
        exit_app(3)
    assert info.value.code == 3


def test_process_cmd_missing_program():
    assert process_cmd("/nonexistent/program-xyz", "a,b") is False


def test_process_cmd_starts_program():
    assert process_cmd(sys.executable, "-c,pass") is True


def test_app_version():
    assert app_version() == "v1.9.5"