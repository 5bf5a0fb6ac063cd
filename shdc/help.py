"""Help text for the shdc command line."""

from __future__ import annotations
import argparse
import sys
from typing import TextIO
from shdc.options import OptionSchema

HELP_WIDTH = 80

HELP_PREAMBLE = (
    "Shader compiler / code generator for sokol_gfx.h based on GLslang + SPIRV-Cross\n"
    "https://github.com/floooh/sokol-tools\n\n"
    "Usage: shdc -i input -o output -l slang [options]\n\n"
    "Where [input] is exactly one .glsl file, and [output] is a C header\n"
    "with embedded shader source code and/or byte code, and code-generated\n"
    "uniform-block and shader-descripton C structs ready for use with sokol_gfx.h\n\n"
    "The input source file may contains custom '@-tags' to group the\n"
    "source code for several shaders and reusable code blocks into one file:\n\n"
    "  - @block name: a general reusable code block\n"
    "  - @vs name: a named vertex shader code block\n"
    "  - @fs name: a named fragment shader code block\n"
    "  - @end: ends a @vs, @fs or @block code block\n"
    "  - @include block_name: include a code block in a @vs or @fs block\n"
    "  - @program name vs_name fs_name: a named, linked shader program\n\n"
    "An input file must contain at least one @vs block, one @fs block\n"
    "and one @program declaration."
)


def _formatter(prog: str) -> argparse.HelpFormatter:
    return argparse.RawDescriptionHelpFormatter(prog, width=HELP_WIDTH)


def format_help(schema: OptionSchema) -> str:
    """Build the help document: preamble prose, then one entry per option.

    The argparse parser built here is only used for layout; the command
    line itself is scanned by ArgScanner.
    """
    parser = argparse.ArgumentParser(
        prog="shdc",
        usage=argparse.SUPPRESS,
        description=HELP_PREAMBLE,
        formatter_class=_formatter,
        add_help=False,
    )
    group = parser.add_argument_group("Options")
    for opt in schema:
        flags = [f"-{opt.short}", f"--{opt.name}"]
        # argparse expands %-formats in help text
        help_text = opt.help.replace("%", "%%")
        if opt.takes_value:
            group.add_argument(*flags, metavar=opt.metavar or opt.name.upper(), help=help_text)
        else:
            group.add_argument(*flags, action="store_true", help=help_text)
    return parser.format_help()


def print_help(schema: OptionSchema, stream: TextIO | None = None) -> None:
    stream = stream if stream is not None else sys.stderr
    print(format_help(schema), end="", file=stream)
