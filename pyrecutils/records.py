"""Records, fields, option flags and the helpers shared by the tool wrappers."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from dataclasses import field as _dc_field
from pathlib import Path

_ALLOWED_PATH_PUNCTUATION = "._-/"


class RecutilsError(Exception):
    """Raised when a recutils tool fails or a file path is rejected."""


@dataclass(frozen=True)
class Field:
    """A single ``Name: value`` pair of a record."""

    name: str
    value: str


@dataclass
class Record:
    """An ordered list of fields."""

    fields: list[Field] = _dc_field(default_factory=list)


@dataclass(frozen=True)
class OptionFlags:
    """Command-line switches shared by the recutils tools."""

    force: bool = False
    no_external: bool = False
    no_auto: bool = False
    case_insensitive: bool = False
    unique: bool = False


@dataclass(frozen=True)
class SelectionParams:
    """Criteria that pick the records a tool works on."""

    record_type: str = ""
    expression: str = ""
    quick: str = ""
    number: Sequence[int] = ()
    random: int = 0
    join: str = ""


def recs_to_string(records: Iterable[Record]) -> str:
    """Render records in rec format, each followed by a blank line."""
    parts = []
    for record in records:
        parts.extend(f"{f.name}: {f.value}\n" for f in record.fields)
        parts.append("\n")
    return "".join(parts)


def _parse_field(line: str) -> Field:
    name, _, value = line.partition(":")
    return Field(name.strip(), value.strip())


def string_to_recs(text: str) -> list[Record]:
    """Parse rec-format text into records; blank-line separated, empty ones dropped."""
    records = []
    for chunk in text.split("\n\n"):
        fields = [_parse_field(line) for line in chunk.split("\n") if line.strip()]
        if fields:
            records.append(Record(fields))
    return records


def validate_local_filepath(filename: str) -> Path:
    """Check that *filename* is a plain path to an existing file under the cwd.

    Returns the resolved path; raises RecutilsError otherwise.
    """
    for char in filename:
        if not (char.isalpha() or char.isdecimal() or char in _ALLOWED_PATH_PUNCTUATION):
            raise RecutilsError(
                f"Filepath invalid: filename contains invalid character: {char!r}"
            )
    try:
        current = os.path.realpath(os.getcwd())
    except OSError as exc:
        raise RecutilsError(
            f"Filepath invalid: failed to get current directory: {exc}"
        ) from exc
    try:
        resolved = Path(filename).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise RecutilsError(f"Filepath invalid: failed to resolve symlink: {exc}") from exc
    try:
        relative = os.path.relpath(resolved, current)
    except ValueError as exc:
        raise RecutilsError(
            f"Filepath invalid: failed to get relative path: {exc}"
        ) from exc
    if relative.startswith(".."):
        raise RecutilsError(
            f"Filepath invalid: file {filename} is outside the current directory"
        )
    return resolved


def run_tool(
    args: Sequence[str], stdin: str | None = None, message: str = "Command failed"
) -> str:
    """Run a recutils tool and return its standard output.

    On failure raises RecutilsError with *message* followed by the tool's stderr.
    """
    try:
        completed = subprocess.run(
            list(args),
            input=stdin,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise RecutilsError(f"{message}:\n{exc}") from exc
    if completed.returncode != 0:
        raise RecutilsError(f"{message}:\n{completed.stderr}")
    return completed.stdout


def _selection_args(params: SelectionParams) -> list[str]:
    args: list[str] = []
    if params.record_type:
        args += ["-t", params.record_type]
    if params.expression:
        args += ["-e", params.expression]
    if params.quick:
        args += ["-q", params.quick]
    if params.number:
        args += ["-n", ",".join(str(n) for n in params.number)]
    if params.random > 0:
        args += ["-m", str(params.random)]
    return args