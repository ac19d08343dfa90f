import os
import signal

import pytest

from cshell.history import History
from cshell.signals import handle_eof, handle_sigint, handle_sigtstp, install_handlers
from cshell.state import ForegroundJob, ShellState


@pytest.fixture
def state(tmp_path):
    return ShellState(str(tmp_path), "tester", History(tmp_path / "log.txt"))


def _spawn(*argv):
    return os.posix_spawnp(argv[0], list(argv), dict(os.environ))


def _kill(pid):
    try:
        os.kill(pid, signal.SIGKILL)
        os.waitpid(pid, 0)
    except (ProcessLookupError, ChildProcessError):
        pass


def test_sigint_without_foreground(state, capsys):
    assert handle_sigint(state) is None
    assert capsys.readouterr().out == "No foreground process to interrupt.\n"


def test_sigint_interrupts_foreground(state, capsys):
    pid = _spawn("sleep", "30")
    try:
        state.foreground = ForegroundJob(pid, "sleep 30")
        assert handle_sigint(state) == pid
        _, status = os.waitpid(pid, 0)
        assert os.WIFSIGNALED(status)
        assert os.WTERMSIG(status) == signal.SIGINT
        assert capsys.readouterr().out == f"Process {pid} interrupted by Ctrl-C\n"
    finally:
        _kill(pid)


def test_sigtstp_without_foreground(state, capsys):
    assert handle_sigtstp(state) is None
    assert capsys.readouterr().out == "No foreground process to stop.\n"


def test_sigtstp_moves_job_to_background(state):
    pid = _spawn("sleep", "30")
    try:
        state.foreground = ForegroundJob(pid, "sleep 30")
        assert handle_sigtstp(state) == pid
        assert state.foreground is None
        job = state.background.find(pid)
        assert job.state == "Stopped"
        assert job.command == "sleep 30"
        _, status = os.waitpid(pid, os.WUNTRACED)
        assert os.WIFSTOPPED(status)
    finally:
        _kill(pid)


def test_eof_kills_jobs_and_exits(state, capsys):
    pid = _spawn("sleep", "30")
    try:
        state.background.enqueue(pid, "sleep 30", "Running")
        with pytest.raises(SystemExit) as info:
            handle_eof(state)
        assert info.value.code == 0
        assert state.background.is_empty()
        _, status = os.waitpid(pid, 0)
        assert os.WTERMSIG(status) == signal.SIGKILL
        assert capsys.readouterr().out == "Namaste!\n"
    finally:
        _kill(pid)


def test_install_handlers_routes_sigint(state, capsys):
    old_int = signal.getsignal(signal.SIGINT)
    old_tstp = signal.getsignal(signal.SIGTSTP)
    try:
        install_handlers(state)
        signal.getsignal(signal.SIGINT)(signal.SIGINT, None)
        signal.getsignal(signal.SIGTSTP)(signal.SIGTSTP, None)
        out = capsys.readouterr().out
        assert out == "No foreground process to interrupt.\nNo foreground process to stop.\n"
    finally:
        signal.signal(signal.SIGINT, old_int)
        signal.signal(signal.SIGTSTP, old_tstp)