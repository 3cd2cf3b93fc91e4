"""Record-type summaries and record descriptors from recinf."""

from __future__ import annotations

from dataclasses import dataclass, field

from .records import RecutilsError, run_tool, validate_local_filepath

_ERROR_MESSAGE = "failed to execute recinf command"

_LIST_DIRECTIVES = {
    "%key:": "key",
    "%mandatory:": "mandatory",
    "%singular:": "singular",
    "%allowed:": "allowed",
    "%prohibited:": "prohibited",
    "%unique:": "unique",
    "%auto:": "auto",
    "%sort:": "sort",
}


@dataclass
class FieldType:
    """A field type declaration: field name, type and any further arguments."""

    name: str
    value: str
    enum: list[str] = field(default_factory=list)


@dataclass
class RecordInfo:
    """What recinf reports about one record type."""

    rec_name: str = ""
    count: int = 0
    doc: list[str] = field(default_factory=list)
    typedefs: list[FieldType] = field(default_factory=list)
    types: list[FieldType] = field(default_factory=list)
    key: list[str] = field(default_factory=list)
    mandatory: list[str] = field(default_factory=list)
    singular: list[str] = field(default_factory=list)
    allowed: list[str] = field(default_factory=list)
    unique: list[str] = field(default_factory=list)
    prohibited: list[str] = field(default_factory=list)
    auto: list[str] = field(default_factory=list)
    sort: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)


def parse_summary(text: str) -> list[RecordInfo]:
    """Parse recinf's ``<count> <type>`` lines."""
    infos = []
    for line in text.strip().splitlines():
        if not line.strip():
            continue
        count_text, _, name = line.strip().partition(" ")
        try:
            count = int(count_text)
        except ValueError:
            count = 0
        infos.append(RecordInfo(rec_name=name.strip(), count=count))
    return infos


def _split_type(line: str, directive: str) -> list[str]:
    parts = line[len(directive):].split()
    if len(parts) < 2:
        raise RecutilsError(f"malformed descriptor line: {line!r}")
    return parts


def apply_descriptor(info: RecordInfo, text: str) -> RecordInfo:
    """Fill *info* from the lines of a record descriptor and return it."""
    for line in text.strip().split("\n"):
        lowered = line.lower()
        if lowered.startswith("%type:"):
            name, value, *enum = _split_type(line, "%type:")
            info.types.append(FieldType(name, value, enum))
        elif lowered.startswith("%typedef:"):
            name, value, *_ = _split_type(line, "%typedef:")
            info.typedefs.append(FieldType(name, value))
        elif lowered.startswith("%doc:"):
            info.doc.append(line[len("%doc:"):].strip())
        elif line.startswith("#"):
            info.comments.append(line[1:].strip())
        else:
            for directive, attribute in _LIST_DIRECTIVES.items():
                if lowered.startswith(directive):
                    setattr(info, attribute, line[len(directive):].split())
                    break
    return info


def file_info(path: str) -> list[RecordInfo]:
    """Describe every record type in a rec file in the current directory."""
    validate_local_filepath(path)
    infos = parse_summary(run_tool(["recinf", path], message=_ERROR_MESSAGE))
    for info in infos:
        descriptor = run_tool(
            ["recinf", "-d", "-t", info.rec_name, path], message=_ERROR_MESSAGE
        )
        apply_descriptor(info, descriptor)
    return infos