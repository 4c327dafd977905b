from cryptoinfo.dirs import AppDirs, default_app_dirs


def test_create_makes_all_directories(tmp_path):
    dirs = AppDirs(config_dir=tmp_path / "conf", data_dir=tmp_path / "data")
    assert dirs.create() is True
    assert (tmp_path / "conf").is_dir()
    assert (tmp_path / "data" / "addrbook").is_dir()
    assert (tmp_path / "data" / "notes").is_dir()


def test_create_is_idempotent(tmp_path):
    dirs = AppDirs(config_dir=tmp_path / "conf", data_dir=tmp_path / "data")
    dirs.create()
    assert dirs.create() is True


def test_create_reports_failure(tmp_path):
    blocker = tmp_path / "data"
    blocker.write_text("not a directory")
    dirs = AppDirs(config_dir=tmp_path / "conf", data_dir=blocker)
    assert dirs.create() is False
    assert (tmp_path / "conf").is_dir()


def test_sub_directories(tmp_path):
    dirs = AppDirs(config_dir=tmp_path, data_dir=tmp_path / "d")
    assert dirs.addrbook_dir == tmp_path / "d" / "addrbook"
    assert dirs.notes_dir == tmp_path / "d" / "notes"


def test_default_app_dirs_use_application_name():
    dirs = default_app_dirs("cryptoinfo")
    assert "cryptoinfo" in str(dirs.config_dir)
    assert "cryptoinfo" in str(dirs.data_dir)