"""Interactive menu that exercises each recutils wrapper on a rec file."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from dataclasses import asdict

from .delete import DeleteStyle
from .fix import FixAction
from .info import RecordInfo
from .recfile import Recfile, RecordSet
from .records import Field, Record, RecutilsError, SelectionParams
from .setfields import ActionType, FieldAction

MENU = """
1) recfix: Check {path} for errors
2) recinf: Get information about all records in {path}
3) recsel: Select first TV show record in {path}
4) recdel: Delete book 'Junkyard Jam Band' from {path}
5) recins: Re-add book 'Junkyard Jam Band' to {path}
6) recset: Set Status of all books in {path} to 'Read'
7) recfmt: Format TV show records using {template}"""

PROMPT = "\nEnter the number of a function to test or 'q' to quit: "
QUIT_WORDS = {"q", "Q", "quit", "Quit", "exit", "Exit"}


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def _print_counts(infos: list[RecordInfo]) -> None:
    for info in infos:
        print(f"{info.rec_name}: {info.count}")


def _check(recfile: Recfile, template: str) -> int:
    try:
        recfile.fix(FixAction.CHECK)
    except RecutilsError as exc:
        _error(f"\nError in {recfile.path}: {exc}")
    else:
        print(f"\n✓ Recfix found no validation errors in {recfile.path}.")
    print("\n⏺ Recfix command complete.")
    return 0


def _info(recfile: Recfile, template: str) -> int:
    try:
        infos = recfile.info()
    except RecutilsError as exc:
        _error(f"Error: {exc}")
        return 1
    print("\nResult:\n")
    print(json.dumps([asdict(info) for info in infos], indent=2))
    print("\n⏺ Recinf command complete.")
    return 0


def _select(recfile: Recfile, template: str) -> int:
    try:
        selected = recfile.select(params=SelectionParams(record_type="tvshows", number=(1,)))
    except RecutilsError as exc:
        _error(f"Error: {exc}")
    else:
        print(f"\nSelected records from {recfile.path}:\n")
        print(selected.to_string())
        try:
            selected.fix(FixAction.CHECK)
        except RecutilsError as exc:
            _error(f"Error: {exc}")
        else:
            print("✓ Recsel found no validation errors in selected records.")
    print("⏺ Recsel command complete.")
    return 0


def _delete(recfile: Recfile, template: str) -> int:
    params = SelectionParams(record_type="books", expression="Title='Junkyard Jam Band'")
    try:
        recfile.delete(params, style=DeleteStyle.REMOVE).fix(FixAction.CHECK)
    except RecutilsError as exc:
        _error(f"\nError: {exc}")
    else:
        print("\n⏺ Recdel command complete. To re-add this entry, select option 5.")
        print(f"✓ Recfix found no validation errors in {recfile.path}.")
    return 0


def _insert(recfile: Recfile, template: str) -> int:
    new_book = Record(
        [
            Field("Title", "Junkyard Jam Band"),
            Field("Status", "Not-reading"),
            Field("Id", "2"),
            Field("PublicationYear", "2016"),
            Field("CreatedAt", "2025-06-03T11:32:16-05:00"),
        ]
    )
    try:
        before = recfile.info()
        print(f"\nCurrent count of records in {recfile.path}:")
        _print_counts(before)
        print(f"\nAdding a new record to {recfile.path}...")
        recfile.insert([new_book], SelectionParams(record_type="books"))
        after = recfile.info()
    except RecutilsError as exc:
        _error(
            "Are you trying to add a record that already exists? Run option 4 first.\n"
            f"Error: {exc}"
        )
    else:
        print(f"\nNew count of records in {recfile.path}:")
        _print_counts(after)
    print("\n⏺ Recins command complete.")
    return 0


def _set(recfile: Recfile, template: str) -> int:
    try:
        recfile.set(
            ["Status"],
            FieldAction(ActionType.SET_ADD, "Read"),
            SelectionParams(record_type="books"),
        )
        books = recfile.select(params=SelectionParams(record_type="books"))
        rendered = books.format("{{Title}}: Status is now {{Status}}\n")
    except RecutilsError as exc:
        _error(f"Error: {exc}")
    else:
        print(f"\nUpdated records in {recfile.path}:\n")
        print(rendered)
    print("\n⏺ Recset command complete.")
    return 0


def _format(recfile: Recfile, template: str) -> int:
    shows = RecordSet(
        [
            Record(
                [
                    Field("Title", "Jem and the Holograms"),
                    Field("SeasonCount", "3"),
                    Field("Id", "2"),
                ]
            ),
            Record(
                [
                    Field("Title", "My Little Pony 'n Friends"),
                    Field("SeasonCount", "2"),
                    Field("Id", "3"),
                ]
            ),
        ]
    )
    print("\nRecords to format:")
    print(json.dumps([asdict(record) for record in shows], indent=2))
    try:
        rendered = shows.format(template, template_is_filename=True)
    except RecutilsError as exc:
        _error(f"\nError: {exc}")
        rendered = ""
    print("\nFormatted output:")
    print(rendered)
    print("\n⏺ Recfmt command complete.")
    return 0


_ACTIONS: dict[str, Callable[[Recfile, str], int]] = {
    "1": _check,
    "2": _info,
    "3": _select,
    "4": _delete,
    "5": _insert,
    "6": _set,
    "7": _format,
}


def main(argv: list[str] | None = None) -> int:
    """Run the menu until the user quits; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="pyrecutils", description="Try the recutils wrappers on a rec file."
    )
    parser.add_argument("--file", default="test.rec", help="rec file to work on")
    parser.add_argument("--template", default="template.rect", help="recfmt template file")
    args = parser.parse_args(argv)
    recfile = Recfile(args.file)

    while True:
        print(MENU.format(path=args.file, template=args.template))
        try:
            words = input(PROMPT).split()
        except EOFError:
            return 0
        choice = words[0] if words else ""
        if choice in QUIT_WORDS:
            return 0
        action = _ACTIONS.get(choice)
        if action is None:
            print("\nInvalid input.")
            continue
        status = action(recfile, args.template)
        if status:
            return status


if __name__ == "__main__":
    sys.exit(main())