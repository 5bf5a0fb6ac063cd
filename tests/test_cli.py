"""Tests for the shdc entry point."""

import sys
import pytest

from shdc.cli import main, run
from shdc.slang import Slang


class TestMain:
    def test_valid_returns_none(self, capsys):
        """A valid command line returns None and prints nothing."""
        assert main(["-i", "a.glsl", "-o", "a.h", "-l", "glsl330"]) is None
        assert capsys.readouterr().err == ""

    def test_console_script_exits_zero(self, capsys):
        """sys.exit(main()) as run by the installed script exits with status 0."""
        with pytest.raises(SystemExit) as exc:
            sys.exit(main(["-i", "a", "-o", "b", "-l", "hlsl5"]))
        assert exc.value.code in (None, 0)
        assert capsys.readouterr().err == ""

    def test_failure_exit_code(self, capsys):
        """Missing input/output/slang exits with status 10."""
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 10
        assert "error: no input file" in capsys.readouterr().err

    def test_help_exit_code(self, capsys):
        """--help prints the help text and exits with status 0."""
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        assert "Options" in capsys.readouterr().err

    def test_dump(self, capsys):
        """--dump prints the parsed configuration to stderr."""
        main(["-i", "a", "-o", "b", "-l", "hlsl5", "-d"])
        assert "slang:  'hlsl5'" in capsys.readouterr().err

    def test_reads_sys_argv(self, monkeypatch, capsys):
        """Without argv, main() parses sys.argv[1:]."""
        monkeypatch.setattr("sys.argv", ["shdc", "-i", "x", "-o", "y", "-l", "bogus"])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 10
        assert "unknown shader language 'bogus'" in capsys.readouterr().err


class TestRun:
    def test_returns_args(self):
        """run() hands the parsed Args to the caller."""
        args = run(["-i", "a.glsl", "-o", "a.h", "-l", "glsl330:metal_ios"])
        assert args.valid
        assert args.input == "a.glsl"
        assert args.slang_mask == Slang.GLSL330 | Slang.METAL_IOS
