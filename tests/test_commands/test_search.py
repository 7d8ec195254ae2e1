"""Tests for search commands."""

from __future__ import annotations

import io
import json
import sys
from unittest.mock import MagicMock, patch

import pytest

from fuzzpick.app import main
from fuzzpick.commands.search import all_, best, read_candidates
from fuzzpick.exceptions import NeedleNotFoundError, ValidationError

DISCWORLD = ("Mort", "Sourcery", "Wyrd Sisters", "Pyramids", "Guards! Guards!")


class TestReadCandidates:
    def test_uses_arguments(self):
        assert read_candidates(("a", "b")) == ["a", "b"]

    def test_reads_stdin_skipping_blank_lines(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("Mort\n\n  \nPyramids\r\n"))
        assert read_candidates(()) == ["Mort", "Pyramids"]

    def test_rejects_interactive_stdin(self, monkeypatch):
        tty = MagicMock()
        tty.isatty.return_value = True
        monkeypatch.setattr(sys, "stdin", tty)
        with pytest.raises(ValidationError, match="No candidates given"):
            read_candidates(())


class TestBest:
    def test_prints_best_match(self, clean_env, capsys):
        best("gards", *DISCWORLD)
        assert capsys.readouterr().out == "Guards! Guards!\n"

    def test_json(self, clean_env, capsys):
        best("gards", *DISCWORLD, json=True)
        assert json.loads(capsys.readouterr().out) == ["Guards! Guards!"]

    def test_not_found(self, clean_env):
        with pytest.raises(NeedleNotFoundError):
            best("Going Postal", *DISCWORLD)

    def test_case_option(self, clean_env):
        with pytest.raises(NeedleNotFoundError):
            best("GARDS", *DISCWORLD, case="respect")

    def test_reads_stdin(self, clean_env, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("\n".join(DISCWORLD) + "\n"))
        best("gards")
        assert capsys.readouterr().out == "Guards! Guards!\n"

    def test_case_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("FUZZPICK_CASE", "respect")
        with pytest.raises(NeedleNotFoundError):
            best("GARDS", *DISCWORLD)


class TestAll:
    def test_prints_matches_ascending(self, clean_env, capsys):
        all_("yr", *DISCWORLD)
        assert capsys.readouterr().out == "Wyrd Sisters\nPyramids\n"

    def test_json(self, clean_env, capsys):
        all_("yr", *DISCWORLD, json=True)
        assert json.loads(capsys.readouterr().out) == ["Wyrd Sisters", "Pyramids"]

    def test_scores_json(self, clean_env, capsys):
        all_("yr", *DISCWORLD, scores=True, json=True)
        data = json.loads(capsys.readouterr().out)
        assert [d["candidate"] for d in data] == ["Wyrd Sisters", "Pyramids"]
        assert all(d["score"] == 100 for d in data)

    @patch("fuzzpick.commands.search.output_scores")
    def test_scores_table(self, mock_output, clean_env):
        all_("yr", *DISCWORLD, scores=True)
        mock_output.assert_called_once()
        data = mock_output.call_args.args[0]
        assert data == [
            {"candidate": "Wyrd Sisters", "score": 100},
            {"candidate": "Pyramids", "score": 100},
        ]
        assert mock_output.call_args.kwargs["as_json"] is False

    def test_scores_table_renders_to_stderr(self, clean_env, capsys):
        all_("yr", *DISCWORLD, scores=True)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Pyramids" in captured.err
        assert "Score" in captured.err

    def test_not_found(self, clean_env):
        with pytest.raises(NeedleNotFoundError):
            all_("Going Postal", *DISCWORLD)


class TestMain:
    def test_error_exit_code_and_hint(self, clean_env, capsys):
        with (
            patch.object(sys, "argv", ["fuzzpick", "best", "Going Postal", *DISCWORLD]),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()
        assert exc_info.value.code == 3
        err = capsys.readouterr().err
        assert "Unable to find needle in haystack" in err
        assert "Hint:" in err

    def test_validation_error_exit_code(self, clean_env, capsys):
        argv = ["fuzzpick", "all", "yr", "Mort", "--case", "loud"]
        with patch.object(sys, "argv", argv), pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 5
        assert "Unknown case mode" in capsys.readouterr().err
