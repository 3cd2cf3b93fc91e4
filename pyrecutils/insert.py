"""Adding records with recins."""

from __future__ import annotations

from collections.abc import Iterable

from .records import (
    OptionFlags,
    Record,
    SelectionParams,
    _selection_args,
    recs_to_string,
    run_tool,
    string_to_recs,
    validate_local_filepath,
)

_ERROR_MESSAGE = "Failed to execute recins command"


def insert_args(params: SelectionParams, options: OptionFlags = OptionFlags()) -> list[str]:
    """Build the recins argument list; verbose reporting is always on."""
    args = _selection_args(params)
    if options.case_insensitive:
        args.append("-i")
    if options.force:
        args.append("--force")
    if options.no_external:
        args.append("--no-external")
    if options.no_auto:
        args.append("--no-auto")
    args.append("--verbose")
    return args


def insert_records(
    records: Iterable[Record],
    new_records: Iterable[Record],
    params: SelectionParams = SelectionParams(),
    options: OptionFlags = OptionFlags(),
) -> list[Record]:
    """Insert *new_records* into in-memory records and return the result."""
    output = run_tool(
        ["recins", "-r", recs_to_string(new_records), *insert_args(params, options)],
        stdin=recs_to_string(records),
        message=_ERROR_MESSAGE,
    )
    return string_to_recs(output)


def insert_into_file(
    path: str,
    new_records: Iterable[Record],
    params: SelectionParams = SelectionParams(),
    options: OptionFlags = OptionFlags(),
) -> None:
    """Insert *new_records* into a rec file in the current directory."""
    validate_local_filepath(path)
    run_tool(
        ["recins", "-r", recs_to_string(new_records), *insert_args(params, options), path],
        message=_ERROR_MESSAGE,
    )