"""Rendering records through a template with recfmt."""

from __future__ import annotations

from collections.abc import Iterable

from .records import Record, recs_to_string, run_tool


def format_args(template: str, template_is_filename: bool = False) -> list[str]:
    """Build the recfmt argument list for an inline template or a template file."""
    if template_is_filename:
        return ["--file", template]
    return [template]


def format_records(
    records: Iterable[Record], template: str, template_is_filename: bool = False
) -> str:
    """Return the records rendered through *template*."""
    return run_tool(
        ["recfmt", *format_args(template, template_is_filename)],
        stdin=recs_to_string(records),
        message="Failed to execute recfmt command",
    )