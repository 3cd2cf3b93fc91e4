# pyrecutils

pyrecutils runs the GNU recutils tools (`recsel`, `recins`, `recdel`, `recset`,
`recfix`, `recfmt`, `recinf`) from Python. Those tools do the actual work, so
they must be installed and on your `PATH`.

## Records in memory

A `RecordSet` (in `pyrecutils.recfile`) holds `Record` objects. Each `Record`
is an ordered list of `Field(name, value)` pairs. A `RecordSet` can be iterated
and has a length. Its operations send the records to a tool on standard input
and return a new `RecordSet` built from the tool's output.

```python
from pyrecutils.records import Field, Record, OptionFlags, SelectionParams
from pyrecutils.recfile import RecordSet
from pyrecutils.fix import FixAction
from pyrecutils.delete import DeleteStyle

shows = RecordSet([
    Record([Field("Title", "Jem and the Holograms"), Field("SeasonCount", "3")]),
    Record([Field("Title", "My Little Pony 'n Friends"), Field("SeasonCount", "2")]),
])

print(shows.to_string())
checked = shows.fix(FixAction.CHECK, OptionFlags())
fewer = shows.delete(SelectionParams(expression="SeasonCount = 2"),
                     OptionFlags(), DeleteStyle.REMOVE)
more = shows.insert([Record([Field("Title", "Jayce")])])
text = shows.format("{{Title}} ran for {{SeasonCount}} seasons\n")
```

Set `template_is_filename=True` and `format` reads the template from a file
(`recfmt --file`).

`pyrecutils.records` also provides `recs_to_string` and `string_to_recs`, which
convert between records and rec text. `string_to_recs` splits records on blank
lines. It splits each line at its first `:` into name and value, and it drops
empty records.

## Recfiles on disk

`Recfile(path)` runs the tools on a file. Before it starts a tool, it checks the
path. The path may contain only letters, digits and `._-/`, the file must exist,
and the path, with symlinks followed, must lie inside the current directory.
`fix`, `delete`, `insert` and `set` change the file and return the same
`Recfile`, so calls can be chained. `select` returns a `RecordSet`, and `info`
returns a list of `RecordInfo`.

```python
from pyrecutils.recfile import Recfile
from pyrecutils.records import SelectionParams, OptionFlags
from pyrecutils.setfields import FieldAction, ActionType
from pyrecutils.delete import DeleteStyle
from pyrecutils.fix import FixAction

books = Recfile("test.rec")
selected = books.select(sort_by=["Title"],
                        params=SelectionParams(record_type="books"))
books.set(["Status"], FieldAction(ActionType.SET_ADD, "Read"),
          SelectionParams(record_type="books"), OptionFlags())
books.delete(SelectionParams(record_type="books",
                             expression="Title='Junkyard Jam Band'"),
             OptionFlags(), DeleteStyle.REMOVE).fix(FixAction.CHECK)
for info in books.info():
    print(info.rec_name, info.count, info.key, info.mandatory)
```

`SelectionParams` has the fields `record_type`, `expression`, `quick`, `number`,
`random` and `join`. Only `select` uses `join`. `OptionFlags` has the fields
`force`, `no_external`, `no_auto`, `case_insensitive` and `unique`. Each tool
gets only the flags it accepts, and no tool is given `unique`.
`FixAction` is `CHECK`, `AUTO` or `SORT`. `ActionType` is `SET`, `ADD`,
`SET_ADD`, `RENAME`, `DELETE` or `COMMENT`.

The same operations are also available as plain functions: `fix_records`,
`fix_file`, `delete_records`, `delete_from_file`, `insert_records`,
`insert_into_file`, `select_from_file`, `set_fields`, `format_records` and
`file_info`. Each module also has a `*_args` function that returns the argument
list it would pass to the tool.

When a tool exits with an error, or a path is refused, the call raises
`pyrecutils.records.RecutilsError`. The message includes the tool's error
output.

## Interactive demo

Go to a directory that holds a `test.rec` with `books` and `tvshows` records.
Option 7 also needs a `template.rect` in the same directory. Then run:

```
pyrecutils-demo
```

The demo shows a numbered menu with one entry per tool and runs the choice you
enter. `q` or `quit` ends it. You can pick other files with
`--file` and `--template`.

## What it does not do

pyrecutils does not read or write rec files by itself. Every selection, check
and edit goes through the recutils tools. `string_to_recs` handles only simple
one-line `Name: value` fields. It does not understand multi-line values or
record descriptors.