"""Removing or commenting out records with recdel."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

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

_ERROR_MESSAGE = "Failed to execute recdel command"


class DeleteStyle(Enum):
    """Whether matched records are removed or commented out."""

    REMOVE = "remove"
    COMMENT = "comment"


def delete_args(
    params: SelectionParams,
    options: OptionFlags = OptionFlags(),
    style: DeleteStyle = DeleteStyle.REMOVE,
) -> list[str]:
    """Build the recdel argument list: selection first, then options."""
    args = _selection_args(params)
    if options.case_insensitive:
        args.append("-i")
    if options.force:
        args.append("--force")
    if options.no_external:
        args.append("--no-external")
    if style is DeleteStyle.COMMENT:
        args.append("-c")
    return args


def delete_records(
    records: Iterable[Record],
    params: SelectionParams,
    options: OptionFlags = OptionFlags(),
    style: DeleteStyle = DeleteStyle.REMOVE,
) -> list[Record]:
    """Delete matching records from in-memory records and return the rest."""
    output = run_tool(
        ["recdel", *delete_args(params, options, style)],
        stdin=recs_to_string(records),
        message=_ERROR_MESSAGE,
    )
    return string_to_recs(output)


def delete_from_file(
    path: str,
    params: SelectionParams,
    options: OptionFlags = OptionFlags(),
    style: DeleteStyle = DeleteStyle.REMOVE,
) -> None:
    """Delete matching records from a rec file in the current directory."""
    validate_local_filepath(path)
    run_tool(["recdel", *delete_args(params, options, style), path], message=_ERROR_MESSAGE)