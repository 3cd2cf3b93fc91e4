import subprocess

import pytest

from pyrecutils.records import OptionFlags, RecutilsError, SelectionParams
from pyrecutils.setfields import ActionType, FieldAction, set_args, set_fields


class FakeRun:
    def __init__(self, stdout="", returncode=0, stderr=""):
        self.calls = []
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr

    def __call__(self, args, input=None, **kwargs):
        self.calls.append((list(args), input))
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


@pytest.mark.parametrize(
    "action_type, flag",
    [
        (ActionType.SET, "-s"),
        (ActionType.ADD, "-a"),
        (ActionType.SET_ADD, "-S"),
        (ActionType.RENAME, "-r"),
    ],
)
def test_value_actions(action_type, flag):
    args = set_args("test.rec", ["Status"], FieldAction(action_type, "Read"))
    assert args == ["-f", "Status", flag, "Read", "test.rec"]


@pytest.mark.parametrize("action_type, flag", [(ActionType.DELETE, "-d"), (ActionType.COMMENT, "-c")])
def test_bare_actions_ignore_value(action_type, flag):
    args = set_args("test.rec", ["Status", "Id"], FieldAction(action_type, "ignored"))
    assert args == ["-f", "Status,Id", flag, "test.rec"]


def test_action_type_accepts_name_string():
    assert FieldAction("SetAdd", "Read").action_type is ActionType.SET_ADD


def test_unknown_action_type_rejected():
    with pytest.raises(ValueError):
        FieldAction("Explode")


def test_selection_and_options_order():
    args = set_args(
        "test.rec",
        ["Status"],
        FieldAction(ActionType.SET, "Read"),
        SelectionParams(record_type="books", expression="Id = 2", number=(1,)),
        OptionFlags(case_insensitive=True, force=True, no_external=True),
    )
    assert args == [
        "-f", "Status", "-s", "Read",
        "-t", "books", "-e", "Id = 2", "-n", "1",
        "-i", "--force", "--no-external",
        "test.rec",
    ]


def test_set_fields_runs_recset(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "test.rec").write_text("Title: A\n")
    fake = FakeRun(returncode=1, stderr="field is read-only")
    monkeypatch.setattr(subprocess, "run", fake)
    with pytest.raises(RecutilsError, match="Failed to execute recset command") as info:
        set_fields("test.rec", ["Status"], FieldAction(ActionType.SET_ADD, "Read"),
                   SelectionParams(record_type="books"))
    assert "field is read-only" in str(info.value)
    assert fake.calls[0][0] == ["recset", "-f", "Status", "-S", "Read", "-t", "books", "test.rec"]


def test_set_fields_invalid_path_runs_nothing(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    with pytest.raises(RecutilsError, match="invalid character"):
        set_fields("bad name.rec", ["Status"], FieldAction(ActionType.DELETE))
    assert fake.calls == []


def test_set_fields_failure_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "test.rec").write_text("Title: A\n")
    monkeypatch.setattr(subprocess, "run", FakeRun(returncode=1, stderr="boom"))
    with pytest.raises(RecutilsError, match="Failed to execute recset command"):
        set_fields("test.rec", ["Status"], FieldAction(ActionType.DELETE))