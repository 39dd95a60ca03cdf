"""
Unit tests for the command-line interface.
"""

import io

import pytest

from postformatter.cli import _output_name, main
from postformatter.formats import TargetFormat
from postformatter.unicode_maps import to_bold


class TestCli:
    """Tests for main()."""

    def test_show_formats(self, capsys):
        assert main(["--formats"]) == 0
        out = capsys.readouterr().out
        assert "Supported Formats:" in out
        assert "unicode" in out

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("<h1>Hi</h1>"))
        assert main([]) == 0
        assert capsys.readouterr().out == to_bold("HI") + "\n"

    def test_stdin_count(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("**abc**"))
        assert main(["--from", "markdown", "--count"]) == 0
        assert capsys.readouterr().out == "[OK] <stdin>: 3 / 3000\n"

    def test_count_over_limit(self, html_file, capsys):
        assert main([str(html_file), "--count", "--max-length", "10"]) == 0
        assert f"[OVER LIMIT] {html_file}:" in capsys.readouterr().out

    def test_stdout(self, markdown_file, capsys):
        assert main([str(markdown_file), "--from", "markdown", "--to", "markdown", "--stdout"]) == 0
        out = capsys.readouterr().out
        assert "POSTFORMATTER" in out
        assert "- Faster exports" in out
        assert "Done: 1 processed, 0 errors" in out

    def test_saves_output(self, html_file, tmp_path, capsys):
        out_dir = tmp_path / "out"
        assert main([str(html_file), "--to", "markdown", "-o", str(out_dir)]) == 0

        saved = out_dir / "draft.md"
        assert saved.read_text(encoding="utf-8").startswith("# Big News\n")
        assert f"[SAVED] {saved}" in capsys.readouterr().out

    def test_missing_file_counts_as_error(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.html"), "--stdout"]) == 1
        captured = capsys.readouterr()
        assert "[ERROR]" in captured.err
        assert "Done: 0 processed, 1 errors" in captured.out

    def test_rejects_non_positive_max_length(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("x"))
        with pytest.raises(SystemExit) as exc:
            main(["--max-length", "0"])
        assert exc.value.code == 2

    def test_unknown_format_rejected(self):
        with pytest.raises(SystemExit):
            main(["--to", "pdf"])


class TestOutputName:
    @pytest.mark.parametrize("path,target,expected", [
        ("drafts/post.html", TargetFormat.MARKDOWN, "post.md"),
        ("post.md", TargetFormat.UNICODE, "post.txt"),
        ("my post!.md", TargetFormat.HTML, "my post_.html"),
    ])
    def test_output_name(self, path, target, expected):
        assert _output_name(path, target) == expected
