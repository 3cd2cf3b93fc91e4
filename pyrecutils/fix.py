"""Checking and repairing rec data with recfix."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .records import (
    OptionFlags,
    Record,
    recs_to_string,
    run_tool,
    string_to_recs,
    validate_local_filepath,
)

_ERROR_MESSAGE = "Recfix found validation errors"


class FixAction(Enum):
    """The operation recfix performs."""

    CHECK = "--check"
    AUTO = "--auto"
    SORT = "--sort"


def fix_args(action: FixAction = FixAction.CHECK, options: OptionFlags = OptionFlags()) -> list[str]:
    """Build the recfix argument list."""
    args = []
    if options.force:
        args.append("--force")
    if options.no_external:
        args.append("--no-external")
    args.append(FixAction(action).value)
    return args


def fix_records(
    records: Iterable[Record],
    action: FixAction = FixAction.CHECK,
    options: OptionFlags = OptionFlags(),
) -> list[Record]:
    """Run recfix over in-memory records and return what it prints."""
    output = run_tool(
        ["recfix", *fix_args(action, options)],
        stdin=recs_to_string(records),
        message=_ERROR_MESSAGE,
    )
    return string_to_recs(output)


def fix_file(
    path: str, action: FixAction = FixAction.CHECK, options: OptionFlags = OptionFlags()
) -> None:
    """Run recfix on a rec file in the current directory."""
    validate_local_filepath(path)
    run_tool(["recfix", *fix_args(action, options), path], message=_ERROR_MESSAGE)