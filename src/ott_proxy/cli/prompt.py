"""Interactive playback confirmation for the CLI layer.

Asks the viewer for a single line of input via questionary and hands
the raw answer back to the gateway, which alone decides whether it is
affirmative.
"""

from __future__ import annotations

from typing import Any

from ott_proxy.exceptions import missing_dependency

CONFIRMATION_MESSAGE: str = "Press 'P' to start streaming from BLOB storage:"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise missing_dependency("questionary") from exc
    return questionary


def prompt_playback_confirmation() -> str | None:
    """Read one answer from the viewer.

    Returns
    -------
    str | None
        The raw text typed by the viewer, or ``None`` when the prompt
        was aborted (Ctrl+C / EOF).  Both are passed through unchanged.

    Raises
    ------
    EnvironmentError
        If questionary is not installed.
    """
    questionary = _import_questionary()
    try:
        answer: str | None = questionary.text(CONFIRMATION_MESSAGE).ask()
    except EOFError:
        # Closed or exhausted stdin declines like an aborted prompt.
        return None
    return answer
