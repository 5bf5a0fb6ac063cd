"""Target shader languages and the colon-separated --slang list."""

from __future__ import annotations
import enum
import sys
from typing import TYPE_CHECKING, TextIO
from shdc.exit_codes import EXIT_FAILURE

if TYPE_CHECKING:
    from shdc.args import ArgsState


class Slang(enum.Flag):
    GLSL330 = enum.auto()
    GLSL100 = enum.auto()
    GLSL300ES = enum.auto()
    HLSL5 = enum.auto()
    METAL_MACOS = enum.auto()
    METAL_IOS = enum.auto()

    @property
    def canonical(self) -> str:
        """Lowercase name as written on the command line (single members only)."""
        return self.name.lower()

    @property
    def bit(self) -> int:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Slang | None:
        for lang in cls:
            if lang.canonical == name:
                return lang
        return None

    @classmethod
    def from_str(cls, text: str) -> Slang:
        """Decode 'glsl330:hlsl5' into a mask, raising ValueError on unknown names."""
        mask = cls(0)
        for item in text.split(":"):
            if not item:
                continue
            lang = cls.from_name(item)
            if lang is None:
                raise ValueError(f"unknown shader language '{item}'")
            mask |= lang
        return mask


def slang_members(mask: Slang) -> list[Slang]:
    """Single languages contained in mask, in enumeration order."""
    return [lang for lang in Slang if lang in mask]


def slang_to_str(mask: Slang) -> str:
    return ":".join(lang.canonical for lang in slang_members(mask))


def parse_slang(state: ArgsState, text: str, stream: TextIO | None = None) -> bool:
    """Parse a --slang value into state.slang_mask.

    The mask is reset first, then every known segment is OR-ed in. The
    first unknown segment stops the parse and marks the state invalid;
    bits from segments before it are left in place.
    """
    stream = stream if stream is not None else sys.stderr
    state.slang_mask = Slang(0)
    for item in text.split(":"):
        if not item:
            continue
        lang = Slang.from_name(item)
        if lang is None:
            print(f"error: unknown shader language '{item}'", file=stream)
            state.valid = False
            state.exit_code = EXIT_FAILURE
            return False
        state.slang_mask |= lang
    return True
