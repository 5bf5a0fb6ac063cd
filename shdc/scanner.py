"""Tokenize the command line into flag events against an OptionSchema."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Union
from shdc.options import OptionSchema


@dataclass(frozen=True)
class FlagNoArg:
    code: str


@dataclass(frozen=True)
class FlagWithArg:
    code: str
    value: str


@dataclass(frozen=True)
class StrayPositional:
    text: str


@dataclass(frozen=True)
class UnknownFlag:
    text: str


@dataclass(frozen=True)
class InvalidUsage:
    text: str


ScanEvent = Union[FlagNoArg, FlagWithArg, StrayPositional, UnknownFlag, InvalidUsage]


class ArgScanner:
    """Restartable sequence of ScanEvents over a snapshot of argv.

    argv excludes the program name. Unknown or malformed flags are
    reported as events and scanning continues with the next token.
    """

    def __init__(self, argv: Sequence[str], schema: OptionSchema):
        self.argv = tuple(argv)
        self.schema = schema

    def __iter__(self) -> Iterator[ScanEvent]:
        index = 0
        while index < len(self.argv):
            token = self.argv[index]
            index += 1

            if not token.startswith("-"):
                yield StrayPositional(token)
                continue

            if token.startswith("--"):
                name, sep, inline = token[2:].partition("=")
                opt = self.schema.by_name(name)
                if opt is None:
                    yield UnknownFlag(token)
                elif not opt.takes_value:
                    yield InvalidUsage(token) if sep else FlagNoArg(opt.short)
                elif sep:
                    yield FlagWithArg(opt.short, inline)
                elif index < len(self.argv):
                    yield FlagWithArg(opt.short, self.argv[index])
                    index += 1
                else:
                    yield InvalidUsage(token)
                continue

            opt = self.schema.by_short(token[1:2]) if len(token) > 1 else None
            if opt is None:
                yield UnknownFlag(token)
            elif len(token) > 2:
                yield InvalidUsage(token)
            elif not opt.takes_value:
                yield FlagNoArg(opt.short)
            elif index < len(self.argv):
                yield FlagWithArg(opt.short, self.argv[index])
                index += 1
            else:
                yield InvalidUsage(token)
