"""Object interface over rec files on disk and records held in memory."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from .delete import DeleteStyle, delete_from_file, delete_records
from .fix import FixAction, fix_file, fix_records
from .formatting import format_records
from .info import RecordInfo, file_info
from .insert import insert_into_file, insert_records
from .records import OptionFlags, Record, SelectionParams, recs_to_string
from .selection import select_from_file
from .setfields import FieldAction, set_fields


@dataclass
class RecordSet:
    """Records held in memory; operations return a new set."""

    records: list[Record] = field(default_factory=list)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def fix(
        self, action: FixAction = FixAction.CHECK, options: OptionFlags = OptionFlags()
    ) -> RecordSet:
        """Run recfix over the records."""
        return RecordSet(fix_records(self.records, action, options))

    def delete(
        self,
        params: SelectionParams,
        options: OptionFlags = OptionFlags(),
        style: DeleteStyle = DeleteStyle.REMOVE,
    ) -> RecordSet:
        """Delete or comment out matching records."""
        return RecordSet(delete_records(self.records, params, options, style))

    def insert(
        self,
        new_records: Iterable[Record],
        params: SelectionParams = SelectionParams(),
        options: OptionFlags = OptionFlags(),
    ) -> RecordSet:
        """Insert *new_records*, which may itself be a RecordSet."""
        return RecordSet(insert_records(self.records, new_records, params, options))

    def format(self, template: str, template_is_filename: bool = False) -> str:
        """Render the records through a recfmt template."""
        return format_records(self.records, template, template_is_filename)

    def to_string(self) -> str:
        """The records in rec format."""
        return recs_to_string(self.records)


@dataclass(frozen=True)
class Recfile:
    """A rec file in the current directory; modifying methods return self."""

    path: str

    def fix(
        self, action: FixAction = FixAction.CHECK, options: OptionFlags = OptionFlags()
    ) -> Recfile:
        """Check, repair or sort the file."""
        fix_file(self.path, action, options)
        return self

    def delete(
        self,
        params: SelectionParams,
        options: OptionFlags = OptionFlags(),
        style: DeleteStyle = DeleteStyle.REMOVE,
    ) -> Recfile:
        """Delete or comment out matching records in the file."""
        delete_from_file(self.path, params, options, style)
        return self

    def insert(
        self,
        new_records: Iterable[Record],
        params: SelectionParams = SelectionParams(),
        options: OptionFlags = OptionFlags(),
    ) -> Recfile:
        """Insert records into the file."""
        insert_into_file(self.path, new_records, params, options)
        return self

    def select(
        self,
        sort_by: Sequence[str] | None = None,
        group_by: Sequence[str] | None = None,
        params: SelectionParams = SelectionParams(),
        options: OptionFlags = OptionFlags(),
    ) -> RecordSet:
        """Select matching records from the file."""
        return RecordSet(select_from_file(self.path, sort_by, group_by, params, options))

    def set(
        self,
        fields: Sequence[str],
        action: FieldAction,
        params: SelectionParams = SelectionParams(),
        options: OptionFlags = OptionFlags(),
    ) -> Recfile:
        """Change fields of the matching records in the file."""
        set_fields(self.path, fields, action, params, options)
        return self

    def info(self) -> list[RecordInfo]:
        """Describe every record type in the file."""
        return file_info(self.path)