"""Parse the shdc command line into an Args configuration.

The scan runs as a small state machine: every event either updates the
parse state, parses the --slang list, or prints help. Help and an unknown
shader language end the parse early; otherwise the validator runs once at
the end. No exception leaves parse_args(): callers check Args.valid and
use Args.exit_code as the process exit code.
"""

from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO
from shdc.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from shdc.help import print_help
from shdc.options import OPTIONS, OptionSchema
from shdc.scanner import (
    ArgScanner, FlagNoArg, FlagWithArg, StrayPositional, UnknownFlag, InvalidUsage,
)
from shdc.slang import Slang, parse_slang, slang_to_str


@dataclass(frozen=True)
class Args:
    input: str = ""
    output: str = ""
    slang_mask: Slang = Slang(0)
    emit_byte_code: bool = False
    debug_dump: bool = False
    valid: bool = False
    exit_code: int = EXIT_SUCCESS


@dataclass
class ArgsState:
    """Mutable fields filled in while the command line is scanned."""
    input: str = ""
    output: str = ""
    slang_mask: Slang = Slang(0)
    emit_byte_code: bool = False
    debug_dump: bool = False
    valid: bool = False
    exit_code: int = EXIT_SUCCESS

    def freeze(self) -> Args:
        return Args(
            input=self.input,
            output=self.output,
            slang_mask=self.slang_mask,
            emit_byte_code=self.emit_byte_code,
            debug_dump=self.debug_dump,
            valid=self.valid,
            exit_code=self.exit_code,
        )


def validate(state: ArgsState, stream: TextIO | None = None) -> None:
    """Check that input, output and slang are all set, reporting every miss."""
    stream = stream if stream is not None else sys.stderr
    err = False
    if not state.input:
        print("error: no input file (--input [path])", file=stream)
        err = True
    if not state.output:
        print("error: no output file (--output [path])", file=stream)
        err = True
    if not state.slang_mask:
        print("error: no shader languages (--slang ...)", file=stream)
        err = True
    if err:
        state.valid = False
        state.exit_code = EXIT_FAILURE
    else:
        state.valid = True
        state.exit_code = EXIT_SUCCESS


def parse_args(
    argv: Sequence[str],
    schema: OptionSchema = OPTIONS,
    stream: TextIO | None = None,
) -> Args:
    """Parse argv (without the program name) into an Args value."""
    stream = stream if stream is not None else sys.stderr
    state = ArgsState()

    for event in ArgScanner(argv, schema):
        if isinstance(event, StrayPositional):
            print(f"got argument without flag: {event.text}", file=stream)
        elif isinstance(event, UnknownFlag):
            print(f"unknown flag {event.text}", file=stream)
        elif isinstance(event, InvalidUsage):
            print(f"invalid use of flag {event.text}", file=stream)
        elif isinstance(event, FlagWithArg):
            if event.code == "i":
                state.input = event.value
            elif event.code == "o":
                state.output = event.value
            elif event.code == "l":
                if not parse_slang(state, event.value, stream):
                    # parse_slang() already reported the error
                    return state.freeze()
        elif isinstance(event, FlagNoArg):
            if event.code == "b":
                state.emit_byte_code = True
            elif event.code == "d":
                state.debug_dump = True
            elif event.code == "h":
                print_help(schema, stream)
                state.valid = False
                state.exit_code = EXIT_SUCCESS
                return state.freeze()
        else:
            raise TypeError(f"Unknown scan event type: {type(event)}")

    validate(state, stream)
    return state.freeze()


def dump_args(args: Args, stream: TextIO | None = None) -> None:
    stream = stream if stream is not None else sys.stderr
    print("args:", file=stream)
    print(f"  valid: {args.valid}", file=stream)
    print(f"  exit_code: {args.exit_code}", file=stream)
    print(f"  input:  '{args.input}'", file=stream)
    print(f"  output: '{args.output}'", file=stream)
    print(f"  slang:  '{slang_to_str(args.slang_mask)}'", file=stream)
    print(f"  byte_code: {args.emit_byte_code}", file=stream)
    print(f"  debug_dump: {args.debug_dump}", file=stream)
