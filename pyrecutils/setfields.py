"""Changing field values with recset."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .records import (
    OptionFlags,
    SelectionParams,
    _selection_args,
    run_tool,
    validate_local_filepath,
)

_ERROR_MESSAGE = "Failed to execute recset command"


class ActionType(Enum):
    """What recset does to the selected fields."""

    SET = "Set"
    ADD = "Add"
    SET_ADD = "SetAdd"
    RENAME = "Rename"
    DELETE = "Delete"
    COMMENT = "Comment"


_VALUE_FLAGS = {
    ActionType.SET: "-s",
    ActionType.ADD: "-a",
    ActionType.SET_ADD: "-S",
    ActionType.RENAME: "-r",
}
_BARE_FLAGS = {
    ActionType.DELETE: "-d",
    ActionType.COMMENT: "-c",
}


@dataclass(frozen=True)
class FieldAction:
    """An action and its value; the value is unused for delete and comment."""

    action_type: ActionType
    value: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "action_type", ActionType(self.action_type))

    def args(self) -> list[str]:
        """The recset flags for this action."""
        if self.action_type in _VALUE_FLAGS:
            return [_VALUE_FLAGS[self.action_type], self.value]
        return [_BARE_FLAGS[self.action_type]]


def set_args(
    path: str,
    fields: Sequence[str],
    action: FieldAction,
    params: SelectionParams = SelectionParams(),
    options: OptionFlags = OptionFlags(),
) -> list[str]:
    """Build the recset argument list, ending with the file path."""
    args = ["-f", ",".join(fields), *action.args(), *_selection_args(params)]
    if options.case_insensitive:
        args.append("-i")
    if options.force:
        args.append("--force")
    if options.no_external:
        args.append("--no-external")
    args.append(path)
    return args


def set_fields(
    path: str,
    fields: Sequence[str],
    action: FieldAction,
    params: SelectionParams = SelectionParams(),
    options: OptionFlags = OptionFlags(),
) -> None:
    """Apply *action* to *fields* of the selected records in a rec file."""
    validate_local_filepath(path)
    run_tool(
        ["recset", *set_args(path, fields, action, params, options)],
        message=_ERROR_MESSAGE,
    )