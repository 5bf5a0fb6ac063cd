"""Static table of the command-line flags understood by shdc."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class Arity(Enum):
    NONE = "none"
    REQUIRED = "required-value"


@dataclass(frozen=True)
class OptionDescriptor:
    name: str
    short: str       # single character, e.g. "i" for -i
    arity: Arity
    help: str
    metavar: str | None = None

    @property
    def takes_value(self) -> bool:
        return self.arity is Arity.REQUIRED


class OptionSchema:
    """Ordered, read-only collection of option descriptors."""

    def __init__(self, options: tuple[OptionDescriptor, ...]):
        self._options = tuple(options)
        self._by_short = {opt.short: opt for opt in self._options}
        self._by_name = {opt.name: opt for opt in self._options}
        if len(self._by_short) != len(self._options) or len(self._by_name) != len(self._options):
            raise ValueError("duplicate option name or short code in schema")

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def by_short(self, code: str) -> OptionDescriptor | None:
        return self._by_short.get(code)

    def by_name(self, name: str) -> OptionDescriptor | None:
        return self._by_name.get(name)


OPTIONS = OptionSchema((
    OptionDescriptor("help", "h", Arity.NONE, "print this help text"),
    OptionDescriptor("input", "i", Arity.REQUIRED, "input source file", "GLSL file"),
    OptionDescriptor("output", "o", Arity.REQUIRED, "output source file", "C header"),
    OptionDescriptor(
        "slang", "l", Arity.REQUIRED,
        "output shader language(s), any of: glsl330 glsl100 glsl300es hlsl5 metal_macos metal_ios",
        "LANG:LANG...",
    ),
    OptionDescriptor("bytecode", "b", Arity.NONE, "output bytecode (HLSL and Metal)"),
    OptionDescriptor("dump", "d", Arity.NONE, "dump debugging information to stderr"),
))
