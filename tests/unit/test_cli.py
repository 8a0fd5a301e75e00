"""
Unit tests for the command-line entry point.
"""

import json

import pytest

from text_metrics.__main__ import build_parser, main


class TestSingleInput:
    """--text, --input and stdin."""

    def test_text_argument(self, capsys):
        exit_code = main(["--text", "This is an absolutely amazing product", "--quiet"])
        report = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert report["word_count"] == 4
        assert report["sentiment"] == 1.0
        assert report["sentiment_label"] == "POSITIVE"
        assert report["complexity_level"] == "High"
        assert report["keywords"] == ["absolutely", "amazing", "product"]

    def test_keyword_limit(self, capsys):
        main(["--text", "testing testing coding coding coding", "--keywords", "1", "--quiet"])
        report = json.loads(capsys.readouterr().out)

        assert report["keywords"] == ["coding"]

    def test_input_file(self, tmp_path, capsys):
        input_path = tmp_path / "review.txt"
        input_path.write_text("Reading books makes people happy.", encoding="utf-8")

        exit_code = main(["--input", str(input_path), "--quiet"])
        report = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert report["word_count"] == 5
        assert report["complexity"] == pytest.approx(0.336)

    def test_missing_input_file(self, tmp_path):
        assert main(["--input", str(tmp_path / "missing.txt"), "--quiet"]) == 1

    def test_stdin(self, monkeypatch, capsys):
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO("Hello, World!!"))
        exit_code = main(["--quiet"])
        report = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert report["word_count"] == 2

    def test_output_file(self, tmp_path):
        output_path = tmp_path / "nested" / "out.json"
        exit_code = main(["--text", "good", "--output", str(output_path), "--quiet"])

        assert exit_code == 0
        assert json.loads(output_path.read_text(encoding="utf-8"))["sentiment_label"] == "POSITIVE"


class TestBatch:
    """--batch over a directory of .txt files."""

    def test_batch_directory(self, tmp_path):
        batch_dir = tmp_path / "texts"
        batch_dir.mkdir()
        (batch_dir / "a.txt").write_text("This movie was terrible", encoding="utf-8")
        (batch_dir / "b.txt").write_text("The food was really good", encoding="utf-8")
        (batch_dir / "ignored.md").write_text("amazing", encoding="utf-8")
        output_path = tmp_path / "batch.json"

        exit_code = main(["--batch", str(batch_dir), "--output", str(output_path), "--quiet"])
        summary = json.loads(output_path.read_text(encoding="utf-8"))

        assert exit_code == 0
        assert summary["total_files"] == 2
        assert summary["successful"] == 2
        assert summary["failed"] == 0
        assert [r["file"] for r in summary["results"]] == ["a.txt", "b.txt"]
        assert summary["results"][0]["result"]["sentiment_label"] == "NEGATIVE"

    def test_undecodable_file_fails(self, tmp_path):
        batch_dir = tmp_path / "texts"
        batch_dir.mkdir()
        (batch_dir / "bad.txt").write_bytes(b"\xff\xfe\xfa")
        output_path = tmp_path / "batch.json"

        exit_code = main(["--batch", str(batch_dir), "--output", str(output_path), "--quiet"])
        summary = json.loads(output_path.read_text(encoding="utf-8"))

        assert exit_code == 1
        assert summary["failed"] == 1
        assert summary["results"][0]["status"] == "error"

    def test_missing_directory(self, tmp_path):
        assert main(["--batch", str(tmp_path / "nope"), "--quiet"]) == 1


class TestParser:
    """Argument parsing."""

    def test_sources_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--text", "x", "--batch", "dir"])
