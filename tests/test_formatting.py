import subprocess
from unittest import mock

import pytest

from pyrecutils.formatting import format_args, format_records
from pyrecutils.records import Field, Record, RecutilsError, recs_to_string


def _done(stdout="", code=0, stderr=""):
    return subprocess.CompletedProcess([], code, stdout=stdout, stderr=stderr)


def test_format_args_inline():
    template = "{{Title}}: Status is now {{Status}}\n"
    assert format_args(template, False) == [template]


def test_format_args_file():
    assert format_args("template.rect", True) == ["--file", "template.rect"]


def test_format_records_returns_output():
    records = [Record([Field("Title", "Jem and the Holograms")])]
    with mock.patch("subprocess.run", return_value=_done("Jem and the Holograms\n")) as run:
        result = format_records(records, "{{Title}}\n", False)
    assert result == "Jem and the Holograms\n"
    assert run.call_args.args[0] == ["recfmt", "{{Title}}\n"]
    assert run.call_args.kwargs["input"] == recs_to_string(records)


def test_format_records_error():
    with mock.patch("subprocess.run", return_value=_done(code=1, stderr="no file")):
        with pytest.raises(RecutilsError, match="Failed to execute recfmt command"):
            format_records([], "template.rect", True)