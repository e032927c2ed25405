"""Process exit codes returned by the CLI.

Playback outcomes (found, not found, cancelled) are never exit codes:
every outcome the gateway reports ends the process with :data:`SUCCESS`.
The non-zero codes below belong to the error boundary in
:func:`ott_proxy.cli.app.cli` alone.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Run finished; any playback outcome, including "not found" and "cancelled"."""

GENERAL_ERROR: int = 1
"""An OttProxyError (e.g. a missing UI dependency) reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C outside the confirmation prompt (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception; reported as a bug."""
