import os

import pytest

from cshell.redirection import (
    Redirection,
    is_custom_command,
    parse_redirection,
    redirection_handler,
)


def test_parse_output_truncate():
    assert parse_redirection("echo hi > out.txt") == Redirection("echo hi", None, "out.txt", False)


def test_parse_output_append():
    assert parse_redirection("echo hi >> out.txt") == Redirection("echo hi", None, "out.txt", True)


def test_parse_append_without_space():
    assert parse_redirection("echo hi >>out.txt").output_file == "out.txt"


def test_parse_input_and_output():
    assert parse_redirection("cat < in.txt > out.txt") == Redirection(
        "cat", "in.txt", "out.txt", False
    )


def test_parse_input_and_append():
    spec = parse_redirection("cat < in.txt >> out.txt")
    assert spec.append is True
    assert spec.output_file == "out.txt"
    assert spec.input_file == "in.txt"


def test_parse_input_only():
    assert parse_redirection("cat < in.txt") == Redirection("cat", "in.txt", None, False)


def test_parse_missing_output_file():
    with pytest.raises(ValueError):
        parse_redirection("echo hi >")


def test_parse_missing_command():
    with pytest.raises(ValueError):
        parse_redirection("> out.txt")


def test_custom_command_rules():
    assert is_custom_command("hop ..") is True
    assert is_custom_command("log") is True
    assert is_custom_command("proclore 1") is False


def test_output_goes_to_file(tmp_path, capsys):
    target = tmp_path / "out.txt"
    redirection_handler(f"say > {target}", lambda command: print("hello"))
    assert target.read_text() == "hello\n"
    assert capsys.readouterr().out == ""


def test_append_keeps_earlier_output(tmp_path):
    target = tmp_path / "out.txt"
    redirection_handler(f"say > {target}", lambda command: print("one"))
    redirection_handler(f"say >> {target}", lambda command: print("two"))
    assert target.read_text() == "one\ntwo\n"


def test_truncate_replaces_output(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old content\n")
    redirection_handler(f"say > {target}", lambda command: print("new"))
    assert target.read_text() == "new\n"


def test_descriptor_level_output_is_redirected(tmp_path):
    target = tmp_path / "out.txt"
    redirection_handler(f"raw > {target}", lambda command: os.write(1, b"raw\n"))
    assert target.read_text() == "raw\n"


def test_stdout_restored_afterwards(tmp_path, capsys):
    target = tmp_path / "out.txt"
    redirection_handler(f"say > {target}", lambda command: print("inside"))
    print("outside")
    assert capsys.readouterr().out == "outside\n"


def test_input_file_contents_become_arguments(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("x y")
    calls = []
    redirection_handler(f"hop < {source}", calls.append)
    assert calls == ["hop x y"]


def test_input_ignored_for_proclore(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("123")
    calls = []
    redirection_handler(f"proclore < {source}", calls.append)
    assert calls == ["proclore"]


def test_missing_input_file_runs_nothing(tmp_path, capsys):
    calls = []
    redirection_handler(f"hop < {tmp_path / 'absent.txt'}", calls.append)
    assert calls == []
    assert "Error opening input file" in capsys.readouterr().err


def test_unopenable_output_runs_nothing(tmp_path, capsys):
    calls = []
    redirection_handler(f"say > {tmp_path / 'no' / 'such' / 'out.txt'}", calls.append)
    assert calls == []
    assert "Error opening output file" in capsys.readouterr().err


def test_handler_returns_parsed_spec(tmp_path):
    target = tmp_path / "out.txt"
    spec = redirection_handler(f"say >> {target}", lambda command: None)
    assert spec.append is True
    assert spec.output_file == str(target)