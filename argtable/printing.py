"""Render argument tables as usage syntax, glossaries and wrapped text.

The ``format_*`` functions return strings; the matching ``print_*``
functions write the same text to a file (standard output by default).
"""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Sequence, TextIO

from .core import Arg, ArgFlag

_WHITESPACE = frozenset(" \t\n\v\f\r")

# An option's rendered syntax is held in a fixed-size field.
_SYNTAX_LIMIT = 198

_DEFAULT_GLOSSARY_FORMAT = "  %-20s %s\n"


def _entries(table: Sequence[Optional[Arg]]) -> Iterator[Arg]:
    """Yield the entries of ``table`` before its terminator (or a gap)."""
    for entry in table:
        if entry is None or entry.flag & ArgFlag.TERMINATOR:
            return
        yield entry


def _has_optvalue(entry: Arg) -> bool:
    return bool(entry.flag & ArgFlag.HASOPTVALUE)


def _value(datatype: str, optvalue: bool) -> str:
    return f"[{datatype}]" if optvalue else datatype


def _option_syntax(
    shortopts: Optional[str],
    longopts: Optional[str],
    datatype: Optional[str],
    optvalue: bool,
) -> str:
    """Abbreviated syntax: only the first short or long option is shown."""
    if shortopts is not None:
        text = "-" + shortopts[:1]
        if datatype is not None:
            text += " " + _value(datatype, optvalue)
    elif longopts is not None:
        text = "--" + longopts.split(",", 1)[0]
        if datatype is not None:
            text += "=" + _value(datatype, optvalue)
    elif datatype is not None:
        text = _value(datatype, optvalue)
    else:
        text = ""
    return text[:_SYNTAX_LIMIT]


def _option_syntaxv(
    shortopts: Optional[str],
    longopts: Optional[str],
    datatype: Optional[str],
    optvalue: bool,
    separator: str,
    prefix: str = "",
) -> str:
    """Verbose syntax: every short and long option, joined by ``separator``."""
    text = prefix
    if shortopts is not None:
        text += separator.join("-" + ch for ch in shortopts)
    if shortopts is not None and longopts is not None:
        text += separator
    if longopts:
        names = longopts.split(",")
        trailing = len(names) > 1 and names[-1] == ""
        if trailing:
            names.pop()
        text += separator.join("--" + name for name in names)
        if trailing:
            text += separator
    if datatype is not None:
        if longopts is not None:
            text += "="
        elif shortopts is not None:
            text += " "
        text += _value(datatype, optvalue)
    return text[:_SYNTAX_LIMIT]


def _occurrences(syntax: str, mincount: int, maxcount: int) -> str:
    """Mandatory instances verbatim, optional ones bracketed."""
    parts = [" " + syntax] * max(mincount, 0)
    spare = maxcount - mincount
    if spare == 1:
        parts.append(f" [{syntax}]")
    elif spare == 2:
        parts.extend([f" [{syntax}]"] * 2)
    elif spare != 0:
        parts.append(f" [{syntax}]...")
    return "".join(parts)


def _gnu_switches(table: Sequence[Optional[Arg]]) -> str:
    """Short switches without values, bundled GNU style: -ab[cd]."""
    entries = [
        e for e in _entries(table)
        if e.shortopts is not None and not e.flag & ArgFlag.HASVALUE
    ]
    mandatory = "".join(e.shortopts[:1] for e in entries if e.mincount >= 1)
    optional = "".join(e.shortopts[:1] for e in entries if e.mincount <= 0)
    text = " -" + mandatory if mandatory else ""
    if optional:
        text += ("[" if mandatory else " [-") + optional + "]"
    return text


def format_option(
    shortopts: Optional[str],
    longopts: Optional[str],
    datatype: Optional[str],
    suffix: Optional[str] = None,
) -> str:
    """Every option tag joined by ``|``, then the datatype and ``suffix``."""
    syntax = _option_syntaxv(shortopts, longopts, datatype, False, "|")
    return syntax + (suffix or "")


def format_syntax(table: Sequence[Optional[Arg]], suffix: Optional[str] = None) -> str:
    """Compact usage line: bundled switches, then each other option once."""
    parts = [_gnu_switches(table)]
    for entry in _entries(table):
        if entry.shortopts is not None and not entry.flag & ArgFlag.HASVALUE:
            continue
        syntax = _option_syntax(
            entry.shortopts, entry.longopts, entry.datatype, _has_optvalue(entry)
        )
        if syntax:
            parts.append(_occurrences(syntax, entry.mincount, entry.maxcount))
    if suffix is not None:
        parts.append(suffix)
    return "".join(parts)


def format_syntaxv(table: Sequence[Optional[Arg]], suffix: Optional[str] = None) -> str:
    """Verbose usage line listing every alternative tag of every entry."""
    parts = []
    for entry in _entries(table):
        syntax = _option_syntaxv(
            entry.shortopts, entry.longopts, entry.datatype, _has_optvalue(entry), "|"
        )
        parts.append(_occurrences(syntax, entry.mincount, entry.maxcount))
    if suffix is not None:
        parts.append(suffix)
    return "".join(parts)


def format_glossary(table: Sequence[Optional[Arg]], fmt: Optional[str] = None) -> str:
    """One ``fmt % (syntax, glossary)`` line per entry that has a glossary."""
    fmt = fmt or _DEFAULT_GLOSSARY_FORMAT
    lines = []
    for entry in _entries(table):
        if entry.glossary is None:
            continue
        syntax = _option_syntaxv(
            entry.shortopts, entry.longopts, entry.datatype, _has_optvalue(entry), ", "
        )
        lines.append(fmt % (syntax, entry.glossary))
    return "".join(lines)


def format_wrapped(lmargin: int, rmargin: int, text: str) -> str:
    """Wrap ``text`` into the column ``lmargin``..``rmargin``.

    Lines break at whitespace where possible, otherwise inside a word.
    The first line is not indented; following lines get ``lmargin`` spaces.
    """
    if lmargin < 0 or rmargin < lmargin:
        raise ValueError("margins must satisfy 0 <= lmargin <= rmargin")
    textlen = len(text)
    colwidth = rmargin - lmargin + 1

    def at(i: int) -> str:
        return text[i] if i < textlen else ""

    out: list[str] = []
    line_start = 0
    line_end = textlen
    while line_end > line_start:
        while at(line_start) in _WHITESPACE and at(line_start) not in ("", "\n"):
            line_start += 1

        if line_end - line_start > colwidth:
            line_end = line_start + colwidth
            while line_end > line_start and at(line_end) not in _WHITESPACE:
                line_end -= 1
            if line_end == line_start:
                line_end = line_start + colwidth
            else:
                while (
                    line_end > line_start
                    and at(line_end) in _WHITESPACE
                    and at(line_start) != "\n"
                ):
                    line_end -= 1
                line_end += 1

        while line_start < line_end:
            ch = text[line_start]
            line_start += 1
            if ch == "\n":
                break
            out.append(ch)
        out.append("\n")

        if line_end < textlen:
            out.append(" " * lmargin)
            line_end = textlen
    return "".join(out)


def format_glossary_gnu(table: Sequence[Optional[Arg]]) -> str:
    """Glossary in GNU layout: a 25-column option field, text wrapped at 80."""
    parts = []
    for entry in _entries(table):
        if entry.glossary is None:
            continue
        indent = "    " if entry.shortopts is None and entry.longopts is not None else ""
        syntax = _option_syntaxv(
            entry.shortopts,
            entry.longopts,
            entry.datatype,
            _has_optvalue(entry),
            ", ",
            prefix=indent,
        )
        if len(syntax) > 25:
            parts.append("  %-25s %s\n" % (syntax, ""))
            syntax = ""
        parts.append("  %-25s " % syntax)
        parts.append(format_wrapped(28, 79, entry.glossary))
    parts.append("\n")
    return "".join(parts)


def _out(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def print_option(
    shortopts: Optional[str],
    longopts: Optional[str],
    datatype: Optional[str],
    suffix: Optional[str] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Write ``format_option`` output to ``file``."""
    _out(file).write(format_option(shortopts, longopts, datatype, suffix))


def print_syntax(
    table: Sequence[Optional[Arg]],
    suffix: Optional[str] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Write ``format_syntax`` output to ``file``."""
    _out(file).write(format_syntax(table, suffix))


def print_syntaxv(
    table: Sequence[Optional[Arg]],
    suffix: Optional[str] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Write ``format_syntaxv`` output to ``file``."""
    _out(file).write(format_syntaxv(table, suffix))


def print_glossary(
    table: Sequence[Optional[Arg]],
    fmt: Optional[str] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Write ``format_glossary`` output to ``file``."""
    _out(file).write(format_glossary(table, fmt))


def print_glossary_gnu(table: Sequence[Optional[Arg]], file: Optional[TextIO] = None) -> None:
    """Write ``format_glossary_gnu`` output to ``file``."""
    _out(file).write(format_glossary_gnu(table))


def print_wrapped(
    lmargin: int, rmargin: int, text: str, file: Optional[TextIO] = None
) -> None:
    """Write ``format_wrapped`` output to ``file``."""
    _out(file).write(format_wrapped(lmargin, rmargin, text))