"""CLI application entry point for ott-proxy.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ott_proxy.exceptions.OttProxyError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — the gateway decides everything.
* "Not found" and "cancelled" are ordinary outcomes and exit with
  :data:`~ott_proxy.cli.exit_codes.SUCCESS`.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from ott_proxy.cli import exit_codes
from ott_proxy.cli.console import error_console
from ott_proxy.exceptions import OttProxyError
from ott_proxy.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The demo takes no positional arguments; only ``--help`` and
    ``--version`` are recognised.
    """
    parser = argparse.ArgumentParser(
        prog="ott-proxy",
        description="Play a video through a lazily-initialised streaming proxy.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_play(video_id: str) -> int:
    """Wire the default store, console reporter and prompt, then play."""
    from ott_proxy.cli import prompt
    from ott_proxy.cli.reporter import ConsolePlaybackReporter
    from ott_proxy.core.gateway import StreamingGateway
    from ott_proxy.core.metadata_store import default_store

    gateway = StreamingGateway(
        default_store(),
        prompt.prompt_playback_confirmation,
        ConsolePlaybackReporter(),
    )
    gateway.play(video_id)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ott-proxy CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    from ott_proxy.core.metadata_store import DEFAULT_VIDEO_ID

    parser = _build_parser()
    parser.parse_args(argv)
    return _handle_play(DEFAULT_VIDEO_ID)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except OttProxyError as exc:
        error_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            error_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        error_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
