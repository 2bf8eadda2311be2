"""Tests for the command-line entry point."""
from __future__ import annotations

import io
from unittest.mock import patch

import pytest

from studycards import __main__ as cli
from studycards.config import Settings


@pytest.fixture(autouse=True)
def default_settings():
    with patch("studycards.config.load_settings", return_value=Settings()):
        yield


def _run(*args):
    with patch("sys.argv", ["studycards", *args]):
        cli.main()


class TestCommands:
    def test_unknown_command(self, capsys):
        with pytest.raises(SystemExit) as exc:
            _run("bogus")
        assert exc.value.code == 1
        assert "Unknown command: bogus" in capsys.readouterr().out

    def test_flashcards(self, tmp_path, capsys, biology_text):
        notes = tmp_path / "notes.txt"
        notes.write_text(biology_text)
        _run("flashcards", str(notes))
        out = capsys.readouterr().out
        assert "Q: What photosynthesis?" in out
        assert "4 flashcards" in out

    def test_flashcards_from_stdin(self, capsys, biology_text):
        with patch("sys.stdin", io.StringIO(biology_text)):
            _run("flashcards", "-")
        assert "Explain: Chlorophyll" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            _run("quiz", str(tmp_path / "missing.txt"))
        assert "Cannot read" in capsys.readouterr().out

    def test_quiz(self, tmp_path, capsys):
        notes = tmp_path / "notes.txt"
        notes.write_text("The mitochondria is the powerhouse of the cell.")
        _run("quiz", str(notes), "--seed", "4")
        out = capsys.readouterr().out
        assert "Question 1 of 1" in out
        assert "mitochondria" in out.split("Answer:")[1]

    def test_bad_seed(self, tmp_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("The mitochondria is the powerhouse of the cell.")
        with pytest.raises(SystemExit):
            _run("quiz", str(notes), "--seed", "x")

    def test_study(self, tmp_path, capsys, biology_text):
        notes = tmp_path / "notes.txt"
        notes.write_text(biology_text)
        with patch("builtins.input", return_value="1"):
            _run("study", str(notes), "--seed", "2")
        out = capsys.readouterr().out
        assert "Quiz Complete!" in out
        assert "/4" in out

    def test_study_quit(self, tmp_path, capsys, biology_text):
        notes = tmp_path / "notes.txt"
        notes.write_text(biology_text)
        with patch("builtins.input", return_value="q"):
            _run("study", str(notes))
        assert "Quiz Complete!" not in capsys.readouterr().out
