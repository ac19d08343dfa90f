import os

import pytest

from cshell.history import History
from cshell.reveal import BLUE, GREEN, RESET
from cshell.seek import Match, parse_seek_args, search, seek_command
from cshell.state import ShellState


@pytest.fixture
def tree(tmp_path):
    root = tmp_path.resolve() / "root"
    (root / "a").mkdir(parents=True)
    (root / "a" / "abc.txt").write_text("inside")
    (root / "abc").mkdir()
    (root / "abc" / "abc1").write_text("child")
    (root / ".hidden").mkdir()
    (root / ".hidden" / "abc").write_text("secret")
    (root / "other.txt").write_text("nothing")
    return root


@pytest.fixture
def state(tree, monkeypatch):
    monkeypatch.chdir(tree)
    return ShellState(str(tree), username="user", history=History(tree.parent / "log.txt"), aliases={})


def test_search_finds_prefix_matches(tree):
    paths = {m.path for m in search(str(tree), "abc")}
    assert paths == {"./a/abc.txt", "./abc", "./abc/abc1"}


def test_search_children_before_parent(tree):
    paths = [m.path for m in search(str(tree), "abc")]
    assert paths.index("./abc/abc1") < paths.index("./abc")


def test_search_real_paths(tree):
    for match in search(str(tree), "abc"):
        assert match.real_path == str(tree) + match.path[1:]
        assert match.is_dir == os.path.isdir(match.real_path)


def test_search_dirs_only(tree):
    assert search(str(tree), "abc", dirs_only=True) == [Match("./abc", f"{tree}/abc", True)]


def test_search_files_only(tree):
    matches = search(str(tree), "abc", files_only=True)
    assert {m.path for m in matches} == {"./a/abc.txt", "./abc/abc1"}
    assert not any(m.is_dir for m in matches)


def test_search_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        search(str(tmp_path / "missing"), "x")


def test_parse_seek_args():
    assert parse_seek_args(["-d", "-e", "name", "dir", "extra"]) == (True, False, True, "name", "dir")
    assert parse_seek_args(["name"]) == (False, False, False, "name", ".")


def test_seek_invalid_flags(state, capsys):
    assert seek_command(state, ["-d", "-f", "abc"]) == []
    assert capsys.readouterr().out == "Invalid Flags"


def test_seek_no_match(state, capsys):
    assert seek_command(state, ["zzz"]) == []
    assert capsys.readouterr().out == "No Match Found!"


def test_seek_prints_coloured(state, capsys):
    seek_command(state, ["-d", "abc"])
    assert capsys.readouterr().out == f"{BLUE}./abc{RESET}\n"


def test_seek_execute_file_prints_contents(state, capsys):
    matches = seek_command(state, ["-e", "other"])
    out = capsys.readouterr().out
    assert [m.path for m in matches] == ["./other.txt"]
    assert out == f"{GREEN}./other.txt{RESET}\nnothing\n"


def test_seek_execute_directory_hops(state, tree):
    seek_command(state, ["-e", "-d", "abc"])
    assert state.cwd == str(tree / "abc")
    assert os.getcwd() == str(tree / "abc")


def test_seek_in_home_directory(state, tree, monkeypatch):
    monkeypatch.chdir(tree.parent)
    matches = seek_command(state, ["other", "~"])
    assert [m.real_path for m in matches] == [f"{tree}/other.txt"]