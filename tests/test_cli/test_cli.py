"""Tests for promptfit.cli.

Exercises the Typer CLI app via CliRunner.  Commands that tokenize use
``--tokenizer character`` so no tokenizer data has to be downloaded.
"""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from promptfit import __version__
from promptfit.cli import app

runner = CliRunner()


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "doc.txt"
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# main callback (--version)
# ---------------------------------------------------------------------------


class TestMainCallback:
    def test_version_flag_prints_version_and_exits(self) -> None:
        result = runner.invoke(app, ["--version", "info"])
        assert result.exit_code == 0
        assert "promptfit" in result.output
        assert __version__ in result.output

    def test_no_subcommand_exits_with_error(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code == 2

    def test_help_flag(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "trim" in result.output
        assert "split" in result.output


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------


class TestInfoCommand:
    def test_info_shows_version(self) -> None:
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert __version__ in result.output
        assert "pydantic" in result.output


# ---------------------------------------------------------------------------
# count / trim / split
# ---------------------------------------------------------------------------


class TestCountCommand:
    def test_counts_file_tokens(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "hello")
        result = runner.invoke(app, ["count", str(path), "--tokenizer", "character"])
        assert result.exit_code == 0
        assert "5 tokens" in result.output

    def test_reads_stdin(self) -> None:
        result = runner.invoke(app, ["count", "-", "-k", "character"], input="abc")
        assert result.exit_code == 0
        assert "3 tokens" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["count", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1

    def test_unknown_tokenizer_kind(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "hello")
        result = runner.invoke(app, ["count", str(path), "--tokenizer", "sentencepiece"])
        assert result.exit_code == 1


class TestTrimCommand:
    def test_prints_tail(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "hello world")
        result = runner.invoke(
            app, ["trim", str(path), "--max-tokens", "5", "--tokenizer", "character"]
        )
        assert result.exit_code == 0
        assert "world" in result.output
        assert "hello" not in result.output

    def test_invalid_max_tokens(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "hello world")
        result = runner.invoke(app, ["trim", str(path), "-t", "0", "-k", "character"])
        assert result.exit_code == 1

    def test_max_tokens_required(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "hello world")
        result = runner.invoke(app, ["trim", str(path)])
        assert result.exit_code == 2


class TestSplitCommand:
    def test_lists_chunks(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "abcdefghij")
        result = runner.invoke(
            app, ["split", str(path), "-c", "4", "-b", "1", "--tokenizer", "character"]
        )
        assert result.exit_code == 0
        assert "3 chunks" in result.output
        assert "abcd" in result.output
        assert "6-10" in result.output

    def test_bleed_not_smaller_than_chunk_size(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "abcdefghij")
        result = runner.invoke(app, ["split", str(path), "-c", "4", "-b", "4", "-k", "character"])
        assert result.exit_code == 1
