import pytest

from cshell.history import LOG_SIZE, History


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logcommands.txt"


def test_add_records_and_persists(log_path):
    history = History(log_path)
    assert history.add("ls -a\n")
    assert history.add("pwd")
    assert history.entries() == ["ls -a", "pwd"]
    assert log_path.read_text().splitlines() == ["ls -a", "pwd"]


def test_consecutive_duplicate_skipped(log_path):
    history = History(log_path)
    history.add("echo hi")
    assert not history.add("  echo hi  ")
    assert history.entries() == ["echo hi"]


def test_non_consecutive_duplicate_kept(log_path):
    history = History(log_path)
    for command in ["a", "b", "a"]:
        history.add(command)
    assert history.entries() == ["a", "b", "a"]


def test_commands_mentioning_log_skipped(log_path):
    history = History(log_path)
    assert not history.add("log purge")
    assert not history.add("cat catalog")
    assert history.entries() == []


def test_empty_command_skipped(log_path):
    history = History(log_path)
    assert not history.add("\n")
    assert history.entries() == []


def test_bounded_size(log_path):
    history = History(log_path)
    commands = [f"cmd{i}" for i in range(LOG_SIZE + 5)]
    for command in commands:
        history.add(command)
    assert history.entries() == commands[-LOG_SIZE:]
    assert log_path.read_text().splitlines() == commands


def test_load_round_trip(log_path):
    first = History(log_path)
    for command in ["one", "two", "three"]:
        first.add(command)
    assert History(log_path).entries() == first.entries()


def test_load_keeps_last_lines(log_path):
    lines = [f"line{i}" for i in range(30)]
    log_path.write_text("\n".join(lines) + "\n")
    history = History(log_path, size=4)
    assert history.entries() == lines[-4:]


def test_format(log_path):
    history = History(log_path)
    history.add("ls")
    history.add("pwd")
    assert history.format() == "1) ls\n2) pwd\n"


def test_purge(log_path):
    history = History(log_path)
    history.add("ls")
    history.purge()
    assert history.entries() == []
    assert log_path.read_text() == ""


def test_get(log_path):
    history = History(log_path)
    history.add("first")
    history.add("second")
    assert history.get(2) == "second"
    with pytest.raises(IndexError, match="Invalid index!"):
        history.get(0)
    with pytest.raises(IndexError):
        history.get(3)