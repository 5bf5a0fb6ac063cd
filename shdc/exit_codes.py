"""Process exit codes returned by shdc."""

# Success, or --help was requested.
EXIT_SUCCESS: int = 0
# Bad command line: unknown shader language or missing input/output/slang.
EXIT_FAILURE: int = 10
