"""Tests for the bfrick command-line entry point."""

import pytest

from bfrick.api import transpile
from bfrick.cli import (
    EXIT_OK,
    EXIT_READ_ERROR,
    EXIT_UNBALANCED,
    EXIT_WRITE_ERROR,
    main,
)
from bfrick.render_types import RenderOptions


@pytest.fixture
def program(tmp_path):
    src = tmp_path / "prog.bf"
    src.write_text("+[-]>.")
    return src


class TestCli:
    def test_writes_rendered_file(self, program, tmp_path):
        out = tmp_path / "prog.rickroll"
        assert main([str(program), "-o", str(out)]) == EXIT_OK
        assert out.read_text() == transpile("+[-]>.")

    def test_indent_and_trace_flags(self, program, tmp_path):
        out = tmp_path / "prog.rickroll"
        code = main([str(program), "-o", str(out), "--indent", "4", "--trace"])
        assert code == EXIT_OK
        assert out.read_text() == transpile("+[-]>.", RenderOptions(indent=4, trace=True))

    def test_unreadable_input(self, tmp_path, capsys):
        code = main([str(tmp_path / "missing.bf"), "-o", str(tmp_path / "out")])
        assert code == EXIT_READ_ERROR
        assert "Unable to read file" in capsys.readouterr().err

    def test_unbalanced_program(self, tmp_path, capsys):
        src = tmp_path / "bad.bf"
        src.write_text("[[]")
        out = tmp_path / "bad.rickroll"
        assert main([str(src), "-o", str(out)]) == EXIT_UNBALANCED
        assert "left open" in capsys.readouterr().err
        assert not out.exists()

    def test_unwritable_output(self, program, tmp_path, capsys):
        out = tmp_path / "no-such-dir" / "prog.rickroll"
        assert main([str(program), "-o", str(out)]) == EXIT_WRITE_ERROR
        assert "Unable to write to file" in capsys.readouterr().err

    def test_output_required(self, program):
        with pytest.raises(SystemExit) as excinfo:
            main([str(program)])
        assert excinfo.value.code == 2

    def test_negative_indent_is_usage_error(self, program, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(program), "-o", str(tmp_path / "out"), "--indent", "-1"])
        assert excinfo.value.code == 2

    def test_ir_only_prints_commands(self, program, capsys):
        assert main([str(program), "--ir-only"]) == EXIT_OK
        stdout = capsys.readouterr().out
        assert "═══ IR ═══" in stdout
        assert "  592: Temp = assign Tape : Pointer" in stdout

    def test_stats(self, program, capsys):
        assert main([str(program), "--stats"]) == EXIT_OK
        stdout = capsys.readouterr().out
        assert "END_WHILE" in stdout
        assert "max depth" in stdout

    def test_ir_only_does_not_check_brackets(self, tmp_path, capsys):
        src = tmp_path / "bad.bf"
        src.write_text("]")
        assert main([str(src), "--ir-only"]) == EXIT_OK
        assert "end_while" in capsys.readouterr().out

    def test_undecodable_input(self, tmp_path, capsys):
        src = tmp_path / "binary.bf"
        src.write_bytes(b"+\xff\xfe[-]")
        out = tmp_path / "binary.rickroll"
        assert main([str(src), "-o", str(out)]) == EXIT_READ_ERROR
        assert "Unable to read file" in capsys.readouterr().err
        assert not out.exists()

    def test_undecodable_input_with_ir_only(self, tmp_path):
        src = tmp_path / "binary.bf"
        src.write_bytes(b"\xff")
        assert main([str(src), "--ir-only"]) == EXIT_READ_ERROR
