import pytest

from rerun.errors import HistoryError
from rerun.modules.history import HistoryStore


def test_path_keyed_by_executable_name(tmp_path):
    store = HistoryStore.for_command("/usr/bin/git", tmp_path)
    assert store.path == tmp_path / "history" / "git"


def test_path_for_odd_executable(tmp_path):
    assert HistoryStore.for_command("..", tmp_path).path == tmp_path / "history" / "_"


def test_missing_file_loads_empty(tmp_path):
    assert HistoryStore(tmp_path / "nope").load() == []


def test_save_creates_dirs_and_overwrites(tmp_path):
    store = HistoryStore.for_command("ls", tmp_path)
    store.save(["a", "b c"])
    store.save(["only"])
    assert store.path.read_text(encoding="utf-8") == "only\n"
    assert store.load() == ["only"]
    assert not store.path.with_name("ls.tmp").exists()


def test_unreadable_history_raises_history_error(tmp_path):
    path = tmp_path / "hist"
    path.mkdir()
    with pytest.raises(HistoryError):
        HistoryStore(path).load()


def test_unwritable_history_raises_history_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(HistoryError):
        HistoryStore(blocker / "sub" / "hist").save(["a"])


def test_only_newline_separates_entries(tmp_path):
    store = HistoryStore(tmp_path / "hist")
    lines = ["echo a\x0cb", "x y", "carriage\rreturn", "", "last"]
    store.save(lines)
    assert store.load() == lines


def test_empty_history_file_loads_empty(tmp_path):
    path = tmp_path / "hist"
    path.write_text("", encoding="utf-8")
    assert HistoryStore(path).load() == []
