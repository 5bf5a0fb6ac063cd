"""Command-line interface for the shdc shader compiler."""

import sys
from shdc.args import Args, dump_args, parse_args


def run(argv: list[str]) -> Args:
    """Parse argv, dumping the result on --dump and exiting when it is not valid."""
    args = parse_args(argv)
    if args.debug_dump:
        dump_args(args)
    if not args.valid:
        sys.exit(args.exit_code)
    return args


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    # Shader parsing and code generation consume the parsed Args.
    run(argv)


if __name__ == "__main__":
    main()
