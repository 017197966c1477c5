"""Argument table entries: the shared option header, literal switches,
remarks and the error collector that terminates every table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


class ArgFlag(enum.IntFlag):
    """Modifier bits carried by every table entry."""

    NONE = 0
    TERMINATOR = 0x1
    HASVALUE = 0x2
    HASOPTVALUE = 0x4


class ParseErrorCode(enum.IntEnum):
    """Errors raised by the parser itself, recorded against the end entry."""

    ELIMIT = 1
    EMALLOC = 2
    ENOMATCH = 3
    ELONGOPT = 4
    EMISSARG = 5


class CountErrorCode(enum.IntEnum):
    """Errors reported by individual entries while scanning or checking."""

    MINCOUNT = 1
    MAXCOUNT = 2
    BADINT = 3
    OVERFLOW = 4
    BADDOUBLE = 5
    BADDATE = 6
    REGNOMATCH = 7


@dataclass(frozen=True)
class ErrorRecord:
    """One recorded parse error.

    ``error`` is an error code, or the offending character for an
    unrecognised short option; ``parent`` is the entry the error belongs to.
    """

    error: Union[int, str]
    parent: object
    argval: Optional[str]


class Arg:
    """Common properties of every entry of an argument table.

    ``scan`` and ``check`` return ``None`` on success and an error code
    otherwise. Entries whose ``scannable`` attribute is false never receive
    values from the command line.
    """

    scannable = True

    def __init__(
        self,
        shortopts: Optional[str],
        longopts: Optional[str],
        datatype: Optional[str],
        glossary: Optional[str],
        mincount: int,
        maxcount: int,
        flag: ArgFlag = ArgFlag.NONE,
    ) -> None:
        self.shortopts = shortopts
        self.longopts = longopts
        self.datatype = datatype
        self.glossary = glossary
        self.mincount = mincount
        self.maxcount = maxcount
        self.flag = ArgFlag(flag)

    def reset(self) -> None:
        """Forget values from a previous parse; the base entry holds none."""

    def scan(self, value: Optional[str]) -> Optional[int]:
        """Accept one command-line value; the base entry accepts anything."""
        return None

    def check(self) -> Optional[int]:
        """Validate the entry after parsing; the base entry is always valid."""
        return None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shortopts={self.shortopts!r}, "
            f"longopts={self.longopts!r}, datatype={self.datatype!r}, "
            f"mincount={self.mincount}, maxcount={self.maxcount})"
        )


class Rem(Arg):
    """A remark: contributes text to syntax and glossary output only."""

    scannable = False

    def __init__(self, datatype: Optional[str], glossary: Optional[str]) -> None:
        super().__init__(None, None, datatype, glossary, 1, 1)


class Lit(Arg):
    """A switch without a value that counts its occurrences."""

    def __init__(
        self,
        shortopts: Optional[str],
        longopts: Optional[str],
        mincount: int,
        maxcount: int,
        glossary: Optional[str],
    ) -> None:
        super().__init__(
            shortopts, longopts, None, glossary, mincount, max(maxcount, mincount)
        )
        self.count = 0

    def reset(self) -> None:
        self.count = 0

    def scan(self, value: Optional[str]) -> Optional[int]:
        if self.count < self.maxcount:
            self.count += 1
            return None
        return CountErrorCode.MAXCOUNT

    def check(self) -> Optional[int]:
        if self.count < self.mincount:
            return CountErrorCode.MINCOUNT
        return None


class End(Arg):
    """Terminates a table and collects up to ``maxcount`` errors."""

    scannable = False

    def __init__(self, maxcount: int) -> None:
        super().__init__(None, None, None, None, 1, maxcount, ArgFlag.TERMINATOR)
        self.errors: list[ErrorRecord] = []

    @property
    def count(self) -> int:
        """Number of errors recorded."""
        return len(self.errors)

    def reset(self) -> None:
        self.errors.clear()

    def register(
        self, error: Union[int, str], parent: object, argval: Optional[str]
    ) -> None:
        """Record an error; once full, the last slot reports the overflow."""
        if len(self.errors) < self.maxcount:
            self.errors.append(ErrorRecord(error, parent, argval))
        elif self.errors:
            self.errors[-1] = ErrorRecord(ParseErrorCode.ELIMIT, self, None)


def lit0(shortopts: Optional[str], longopts: Optional[str], glossary: Optional[str]) -> Lit:
    """An optional switch that may appear at most once."""
    return Lit(shortopts, longopts, 0, 1, glossary)


def lit1(shortopts: Optional[str], longopts: Optional[str], glossary: Optional[str]) -> Lit:
    """A switch that must appear exactly once."""
    return Lit(shortopts, longopts, 1, 1, glossary)


def litn(
    shortopts: Optional[str],
    longopts: Optional[str],
    mincount: int,
    maxcount: int,
    glossary: Optional[str],
) -> Lit:
    """A switch that must appear between ``mincount`` and ``maxcount`` times."""
    return Lit(shortopts, longopts, mincount, maxcount, glossary)


def rem(datatype: Optional[str], glossary: Optional[str]) -> Rem:
    """A remark entry."""
    return Rem(datatype, glossary)


def end(maxcount: int) -> End:
    """The terminating entry of a table, holding at most ``maxcount`` errors."""
    return End(maxcount)