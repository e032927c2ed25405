"""End-to-end tests for the CLI (cli/app.py).

The questionary prompt is replaced with a scripted answer; everything
else — default store, gateway, engine, Rich reporter — runs for real.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock

import pytest

from ott_proxy.cli import app as app_module
from ott_proxy.cli import exit_codes
from ott_proxy.cli import prompt as prompt_module
from ott_proxy.cli.app import cli, main
from ott_proxy.exceptions import OttProxyError


def _answer(monkeypatch: pytest.MonkeyPatch, answer: str | None) -> None:
    monkeypatch.setattr(prompt_module, "prompt_playback_confirmation", lambda: answer)


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

class TestArguments:
    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "ott-proxy" in capsys.readouterr().out

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_positional_arguments_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["vid_101"])
        assert exc_info.value.code == 2


# ---------------------------------------------------------------------------
# End-to-end scenarios
# ---------------------------------------------------------------------------

class TestEndToEnd:
    @pytest.mark.parametrize("answer", ["p", "P"])
    def test_confirmed_playback(
        self,
        answer: str,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _answer(monkeypatch, answer)

        assert main([]) == exit_codes.SUCCESS
        out = capsys.readouterr().out

        order = [
            "--- UI Metadata Loaded (from MongoDB) ---",
            "Title: System Design 101",
            "Description: HLD Basics",
            "Manifest: playlist.m3u8",
            "[BLOB Storage] Establishing high-bandwidth connection...",
            "[BLOB Storage] Buffering initial segments from: playlist.m3u8",
            "[Streaming] Video vid_101 is now playing via playlist.m3u8",
        ]
        positions = [out.index(line) for line in order]
        assert positions == sorted(positions)

    @pytest.mark.parametrize("answer", ["n", "", "yes", None])
    def test_declined_playback(
        self,
        answer: str | None,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _answer(monkeypatch, answer)

        assert main([]) == exit_codes.SUCCESS
        out = capsys.readouterr().out

        assert "Title: System Design 101" in out
        assert "Streaming cancelled. Keeping heavy resources idle." in out
        assert out.index("Title:") < out.index("Streaming cancelled.")
        assert "[BLOB Storage]" not in out
        assert "[Streaming]" not in out

    def test_prompt_called_after_metadata(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        seen: list[str] = []

        def fake_prompt() -> str:
            seen.append(capsys.readouterr().out)
            return "n"

        monkeypatch.setattr(prompt_module, "prompt_playback_confirmation", fake_prompt)
        main([])
        assert "Manifest: playlist.m3u8" in seen[0]


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exits_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "argv", ["ott-proxy"])
        _answer(monkeypatch, "n")
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_known_error_renders_message_and_hint(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def boom() -> int:
            raise OttProxyError("store offline", hint="retry later")

        monkeypatch.setattr(app_module, "main", boom)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "store offline" in err
        assert "retry later" in err

    def test_keyboard_interrupt(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def interrupt() -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", interrupt)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT
        assert "Aborted by user." in capsys.readouterr().err

    def test_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def crash() -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", crash)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        err = capsys.readouterr().err
        assert "RuntimeError: kaboom" in err


class TestEndOfInput:
    def test_closed_stdin_is_a_decline(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        questionary = MagicMock()
        questionary.text.return_value.ask.side_effect = EOFError
        monkeypatch.setattr(prompt_module, "_import_questionary", lambda: questionary)
        monkeypatch.setattr(sys, "argv", ["ott-proxy"])

        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert "Streaming cancelled. Keeping heavy resources idle." in captured.out
        assert "Unexpected error" not in captured.err
