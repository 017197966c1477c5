"""Parse a command line against an argument table.

A table is a sequence of entries (``Arg`` instances) whose last meaningful
entry is an ``End``. Tagged options are scanned first; the remaining
operands are then offered, in order, to the untagged entries. Errors are
collected by the ``End`` entry, and their number is returned.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .core import Arg, ArgFlag, End, ParseErrorCode
from .getopt import EventKind, HasArg, LongOption, OptionScanner


def _split_table(table: Sequence[Arg]) -> tuple[list[Arg], End]:
    """Return the entries before the terminator and the terminator itself."""
    for position, entry in enumerate(table):
        if entry.flag & ArgFlag.TERMINATOR:
            if not isinstance(entry, End):
                raise TypeError("the table terminator must be an End entry")
            return list(table[:position]), entry
    raise ValueError("argument table has no terminating End entry")


def _short_has_arg(entry: Arg) -> HasArg:
    colons = bool(entry.flag & ArgFlag.HASVALUE) + bool(entry.flag & ArgFlag.HASOPTVALUE)
    return (HasArg.NO, HasArg.REQUIRED, HasArg.OPTIONAL)[colons]


def _long_has_arg(entry: Arg) -> HasArg:
    if entry.flag & ArgFlag.HASOPTVALUE:
        return HasArg.OPTIONAL
    if entry.flag & ArgFlag.HASVALUE:
        return HasArg.REQUIRED
    return HasArg.NO


def _build_options(entries: Sequence[Arg]) -> tuple[dict[str, HasArg], list[LongOption]]:
    shortopts: dict[str, HasArg] = {}
    longopts: list[LongOption] = []
    for index, entry in enumerate(entries):
        for ch in entry.shortopts or "":
            shortopts.setdefault(ch, _short_has_arg(entry))
        for name in (entry.longopts or "").split(","):
            if name:
                longopts.append(LongOption(name, _long_has_arg(entry), index))
    return shortopts, longopts


def _find_short(entries: Sequence[Arg], ch: str) -> Optional[Arg]:
    return next((e for e in entries if e.shortopts and ch in e.shortopts), None)


def _scan_into(entry: Arg, value: Optional[str], endentry: End) -> None:
    if not entry.scannable:
        return
    error = entry.scan(value)
    if error is not None:
        endentry.register(error, entry, value)


def _parse_tagged(argv: Sequence[str], entries: Sequence[Arg], endentry: End) -> list[str]:
    shortopts, longopts = _build_options(entries)
    scanner = OptionScanner(argv, shortopts, longopts)
    for event in scanner:
        if event.kind is EventKind.LONG:
            assert isinstance(event.option, LongOption)
            entry = entries[event.option.index]
            if event.argument == "" and entry.flag & ArgFlag.HASVALUE:
                # Still scan the empty value so that counts are enforced.
                endentry.register(ParseErrorCode.EMISSARG, endentry, event.token)
            _scan_into(entry, event.argument, endentry)
        elif event.kind is EventKind.UNKNOWN:
            if isinstance(event.option, str):
                endentry.register(event.option, endentry, None)
            else:
                endentry.register(ParseErrorCode.ELONGOPT, endentry, event.token)
        elif event.kind is EventKind.MISSING_ARGUMENT:
            endentry.register(ParseErrorCode.EMISSARG, endentry, event.token)
        else:
            assert isinstance(event.option, str)
            found = _find_short(entries, event.option)
            if found is None:
                endentry.register(event.option, endentry, None)
            else:
                _scan_into(found, event.argument, endentry)
    return scanner.operands


def _parse_untagged(operands: Sequence[str], entries: Sequence[Arg], endentry: End) -> None:
    untagged = [
        e for e in entries
        if e.shortopts is None and e.longopts is None and e.scannable
    ]
    pos = 0
    pending: Optional[tuple[object, Arg, str]] = None
    for entry in untagged:
        while pos < len(operands):
            error = entry.scan(operands[pos])
            if error is not None:
                # Tentative: a later entry may still accept this operand.
                pending = (error, entry, operands[pos])
                break
            pos += 1
            pending = None
        if pos >= len(operands):
            return

    if pending is not None:
        error, parent, argval = pending
        endentry.register(error, parent, argval)
        pos += 1

    for operand in operands[pos:]:
        endentry.register(ParseErrorCode.ENOMATCH, endentry, operand)


def _check(entries: Sequence[Arg], endentry: End) -> None:
    for entry in [*entries, endentry]:
        error = entry.check()
        if error is not None:
            endentry.register(error, entry, None)


def parse(argv: Sequence[str], table: Sequence[Arg]) -> int:
    """Parse ``argv`` (program name first) into ``table``.

    Returns the number of errors recorded in the table's ``End`` entry.
    """
    entries, endentry = _split_table(table)
    for entry in [*entries, endentry]:
        entry.reset()

    if not argv:
        _check(entries, endentry)
        return endentry.count

    operands = _parse_tagged(list(argv), entries, endentry)
    _parse_untagged(operands, entries, endentry)

    if endentry.count == 0:
        _check(entries, endentry)
    return endentry.count


def nullcheck(table: Optional[Sequence[Optional[Arg]]]) -> bool:
    """Return True if the table, or any entry up to its terminator, is None."""
    if table is None:
        return True
    for entry in table:
        if entry is None:
            return True
        if entry.flag & ArgFlag.TERMINATOR:
            return False
    return False