# argtable

You describe a command line as a table of argument entries. `argtable` parses `argv` against that table and renders usage and glossary text from the same table.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Declaring a table

A table is a sequence of entries from `argtable.core`. The last entry is an `End`. It marks the end of the table and collects the errors from parsing.

```python
from argtable.core import lit0, lit1, litn, end

verbose = lit0("v", "verbose", "verbose output")
cflag = lit1("cC", None, "either -c or -C")
delta = litn("dD", "delta", 2, 4, "-d|-D|--delta 2..4 occurrences")
help_ = lit0(None, "help", "print this help and exit")
errors = end(20)

table = [verbose, cflag, delta, help_, errors]
```

Each entry takes the following:

- **Short options:** a string of option characters. `"bB"` accepts both `-b` and `-B`.
- **Long options:** a comma-separated list of names. `"hello,world"` accepts both `--hello` and `--world`. An unambiguous prefix of a long name is also accepted.
- **`mincount` / `maxcount`:** the allowed number of occurrences.

The entry types are:

| Entry | Created by | What it does |
|---|---|---|
| `Lit` | `lit0`, `lit1`, `litn` | A switch without a value. Its `count` holds the number of times it was seen. |
| `Rem` | `rem` | A remark. It appears only in syntax and glossary output. |
| `End` | `end` | Terminates the table. Its `errors` holds up to `maxcount` `ErrorRecord`s, and its `count` is the number of errors. |

### Entries that take a value

Entries that take values can be built by subclassing `Arg`:

- Pass `ArgFlag.HASVALUE` for a required value, or `ArgFlag.HASOPTVALUE` for an optional one.
- Override `reset`, `scan` and `check`.

`scan` and `check` return `None` on success, or an error code such as a member of `CountErrorCode`. An entry with neither short nor long options is *untagged*. It receives the non-option arguments, in order.

## Parsing

```python
from argtable.parser import parse, nullcheck

nerrors = parse(["prog", "-cDd"], table)
print(nerrors, cflag.count, delta.count)   # 0 1 2
```

`parse` works as follows:

- It resets every entry first, so a table can be parsed again.
- `argv[0]` is the program name.
- Options and operands may be mixed, and a lone `--` ends option scanning.
- The occurrence limits are checked only when scanning produced no errors.

The return value is the number of recorded errors. Each `ErrorRecord` has these fields:

- **`error`:** a `ParseErrorCode`, a `CountErrorCode`, or the offending character for an unknown short option.
- **`parent`:** the entry the error belongs to.
- **`argval`:** the offending word.

When `End` is full, its last record is replaced by `ParseErrorCode.ELIMIT`.

`nullcheck(table)` returns `True` if the table is `None` or if any entry up to the terminator is `None`.

## Usage and help text

```python
from argtable.printing import format_syntax, format_glossary, format_glossary_gnu

print("Usage: prog" + format_syntax(table, "\n"), end="")   # Usage: prog -cd[v] [--help]
print(format_glossary(table, "  %-25s %s\n"), end="")
print(format_glossary_gnu(table), end="")
```

The formatting functions in `argtable.printing` are:

| Function | Output |
|---|---|
| `format_syntax(table, suffix)` | A compact usage line. Switches without values are bundled GNU style: mandatory ones as `-cd`, optional ones in `[...]`. Every other entry is shown once by its first option tag. Optional occurrences appear in brackets, and `...` means more than two. |
| `format_syntaxv(table, suffix)` | A usage line that lists every alternative tag, joined by `\|`. |
| `format_glossary(table, fmt)` | One line per entry that has a glossary, produced with `fmt % (syntax, glossary)`. The default format is `"  %-20s %s\n"`. |
| `format_glossary_gnu(table)` | A glossary in GNU layout: a 25-column option field, with the description wrapped at column 80. |
| `format_wrapped(lmargin, rmargin, text)` | Wraps text between the two margins. Lines break at whitespace, or inside a word if they must. The first line is not indented. |
| `format_option(shortopts, longopts, datatype, suffix)` | The syntax of a single option. |

Each `format_*` function has a `print_*` counterpart, for example `print_syntax` and `print_wrapped`. It writes the same text to `file`, which defaults to standard output.

## Lower-level pieces

- **`argtable.getopt.OptionScanner`:** iterates over `OptionEvent`s from an `argv`, in the style of `getopt_long`. Each event kind is `SHORT`, `LONG`, `UNKNOWN` or `MISSING_ARGUMENT`. After iteration, `operands` holds the non-option arguments.
- **`argtable.hashtable.HashTable`:** a chained hash table with caller-supplied hash and equality functions. It supports `insert`, `search`, `remove`, `change`, `len()`, `in`, iteration over keys, and `items()`.
- **`HashTable.iterator()`:** returns a `HashTableIterator`, a cursor with these methods:
  - `key` and `value`, which read the current entry.
  - `advance`, which moves to the next entry.
  - `remove`, which deletes the current entry and moves on.
  - `search`, which jumps to a given key.

## What it does not do

- There is no function that turns the recorded errors into messages. Inspect `End.errors` and report them yourself.
- Only switch (`Lit`), remark (`Rem`) and terminator (`End`) entries are provided. There are no ready-made entries for integers, floats, strings, regular expressions, files or dates; build them by subclassing `Arg` as described above.
- There is no sub-command registry and no dispatcher.
- There is no command-line program.