"""Selecting records from a rec file with recsel."""

from __future__ import annotations

from collections.abc import Sequence

from .records import (
    OptionFlags,
    Record,
    SelectionParams,
    run_tool,
    string_to_recs,
)

_ERROR_MESSAGE = "Failed to execute recsel command"


def select_args(
    path: str,
    sort_by: Sequence[str] | None = None,
    group_by: Sequence[str] | None = None,
    params: SelectionParams = SelectionParams(),
    options: OptionFlags = OptionFlags(),
) -> list[str]:
    """Build the recsel argument list, ending with the file path.

    ``None`` leaves sorting or grouping out; an empty sequence still passes the flag.
    """
    args: list[str] = []
    if sort_by is not None:
        args += ["-S", ",".join(sort_by)]
    if group_by is not None:
        args += ["-G", ",".join(group_by)]
    if params.record_type:
        args += ["-t", params.record_type]
    if params.expression:
        args += ["-e", params.expression]
    if params.quick:
        args += ["-q", params.quick]
    if params.join:
        args += ["-j", params.join]
    if params.number:
        args += ["-n", ",".join(str(n) for n in params.number)]
    if params.random > 0:
        args += ["-m", str(params.random)]
    if options.case_insensitive:
        args.append("-i")
    args.append(path)
    return args


def select_from_file(
    path: str,
    sort_by: Sequence[str] | None = None,
    group_by: Sequence[str] | None = None,
    params: SelectionParams = SelectionParams(),
    options: OptionFlags = OptionFlags(),
) -> list[Record]:
    """Return the records of *path* that match the selection."""
    output = run_tool(
        ["recsel", *select_args(path, sort_by, group_by, params, options)],
        message=_ERROR_MESSAGE,
    )
    return string_to_recs(output)