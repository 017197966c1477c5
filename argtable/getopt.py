"""A GNU-style option scanner with argument permutation.

Options are scanned from ``argv[1:]`` (``argv[0]`` is the program name).
Non-option arguments are collected, in order, into ``operands``; a lone
``--`` ends option scanning and everything after it becomes an operand.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Union


class HasArg(enum.IntEnum):
    """Whether an option takes a value."""

    NO = 0
    REQUIRED = 1
    OPTIONAL = 2


@dataclass(frozen=True)
class LongOption:
    """A long option name, its value requirement and the entry it belongs to."""

    name: str
    has_arg: HasArg
    index: int


class EventKind(enum.Enum):
    SHORT = "short"
    LONG = "long"
    UNKNOWN = "unknown"
    MISSING_ARGUMENT = "missing_argument"


@dataclass(frozen=True)
class OptionEvent:
    """One result of scanning.

    ``token`` is the command-line word the option was found in. ``option``
    is the short option character or the matched ``LongOption``; it is
    ``None`` for an unrecognised or ambiguous long option.
    """

    kind: EventKind
    token: str
    option: Union[str, LongOption, None] = None
    argument: Optional[str] = None


class OptionScanner:
    """Iterate over the options found in ``argv``.

    ``shortopts`` maps option characters to their ``HasArg``; ``longopts``
    is an iterable of ``LongOption``. After iteration, ``operands`` holds
    the non-option arguments.
    """

    def __init__(
        self,
        argv: Sequence[str],
        shortopts: Mapping[str, HasArg],
        longopts: Iterable[LongOption],
    ) -> None:
        self._argv = tuple(argv)
        self._shortopts = dict(shortopts)
        self._longopts = tuple(longopts)
        self.operands: list[str] = []

    def _short_kind(self, ch: str) -> Optional[HasArg]:
        if ch == ":":
            return None
        return self._shortopts.get(ch)

    def __iter__(self) -> Iterator[OptionEvent]:
        args = self._argv
        operands: list[str] = []
        self.operands = operands
        i = 1
        while i < len(args):
            token = args[i]
            if not token.startswith("-") or (token == "-" and "-" not in self._shortopts):
                operands.append(token)
                i += 1
                continue
            if token == "--":
                operands.extend(args[i + 1:])
                break
            nxt = i + 1
            pos = 0 if token == "-" else 1
            while pos < len(token):
                ch = token[pos]
                if ch == "-" and pos >= 1:
                    rest = token[pos + 1:]
                    if not rest:
                        yield OptionEvent(EventKind.MISSING_ARGUMENT, token)
                    else:
                        event, nxt = self._scan_long(rest, token, args, nxt)
                        yield event
                    break
                pos += 1
                has_arg = self._short_kind(ch)
                if has_arg is None:
                    yield OptionEvent(EventKind.UNKNOWN, token, ch)
                    continue
                if has_arg is HasArg.NO:
                    yield OptionEvent(EventKind.SHORT, token, ch)
                    continue
                attached = token[pos:]
                if attached:
                    yield OptionEvent(EventKind.SHORT, token, ch, attached)
                elif has_arg is HasArg.OPTIONAL:
                    yield OptionEvent(EventKind.SHORT, token, ch)
                elif nxt < len(args):
                    yield OptionEvent(EventKind.SHORT, token, ch, args[nxt])
                    nxt += 1
                else:
                    yield OptionEvent(EventKind.MISSING_ARGUMENT, token, ch)
                break
            i = nxt

    def _scan_long(
        self, text: str, token: str, args: Sequence[str], nxt: int
    ) -> tuple[OptionEvent, int]:
        name, sep, value = text.partition("=")
        argument = value if sep else None

        match = next((o for o in self._longopts if o.name == name), None)
        if match is None:
            partial = [o for o in self._longopts if o.name.startswith(name)]
            if not partial:
                return OptionEvent(EventKind.UNKNOWN, token), nxt
            match = partial[0]
            if any(
                o.has_arg != match.has_arg or o.index != match.index
                for o in partial[1:]
            ):
                return OptionEvent(EventKind.UNKNOWN, token), nxt

        if match.has_arg is HasArg.NO and sep:
            return OptionEvent(EventKind.MISSING_ARGUMENT, token, match), nxt
        if match.has_arg is HasArg.REQUIRED and not sep:
            if nxt >= len(args):
                return OptionEvent(EventKind.MISSING_ARGUMENT, token, match), nxt
            argument = args[nxt]
            nxt += 1
        return OptionEvent(EventKind.LONG, token, match, argument), nxt