import io
import subprocess
import sys

import pytest

from pyrecutils.cli import main


class FakeRun:
    def __init__(self, stdout="", returncode=0, stderr=""):
        self.calls = []
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr

    def __call__(self, args, input=None, **kwargs):
        self.calls.append((list(args), input))
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "test.rec").write_text("%rec: books\n\nTitle: A\n")
    return tmp_path


def feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


@pytest.mark.parametrize("word", ["q", "Quit", "exit"])
def test_quit_words_exit_zero(monkeypatch, word):
    feed(monkeypatch, word + "\n")
    assert main([]) == 0


def test_end_of_input_exits_zero(monkeypatch, capsys):
    feed(monkeypatch, "")
    assert main([]) == 0
    assert "recfix: Check test.rec for errors" in capsys.readouterr().out


def test_invalid_choice_reported(monkeypatch, capsys):
    feed(monkeypatch, "9\nq\n")
    assert main([]) == 0
    assert "Invalid input." in capsys.readouterr().out


def test_check_success(workdir, monkeypatch, capsys):
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    feed(monkeypatch, "1\nq\n")
    assert main([]) == 0
    assert fake.calls[0][0] == ["recfix", "--check", "test.rec"]
    assert "Recfix found no validation errors in test.rec" in capsys.readouterr().out


def test_check_failure_goes_to_stderr(workdir, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeRun(returncode=1, stderr="bad record"))
    feed(monkeypatch, "1\nq\n")
    assert main([]) == 0
    assert "bad record" in capsys.readouterr().err


def test_info_failure_exits_one(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(returncode=1, stderr="oops"))
    feed(monkeypatch, "2\nq\n")
    assert main([]) == 1


def test_format_uses_template_file(workdir, monkeypatch, capsys):
    fake = FakeRun(stdout="rendered shows\n")
    monkeypatch.setattr(subprocess, "run", fake)
    feed(monkeypatch, "7\nq\n")
    assert main(["--template", "shows.rect"]) == 0
    args, stdin = fake.calls[0]
    assert args == ["recfmt", "--file", "shows.rect"]
    assert "Title: Jem and the Holograms" in stdin
    out = capsys.readouterr().out
    assert "rendered shows" in out


def test_set_then_select_books(workdir, monkeypatch):
    fake = FakeRun(stdout="")
    monkeypatch.setattr(subprocess, "run", fake)
    feed(monkeypatch, "6\nq\n")
    assert main([]) == 0
    assert [call[0][0] for call in fake.calls] == ["recset", "recsel", "recfmt"]