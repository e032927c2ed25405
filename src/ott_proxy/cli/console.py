"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working even when it is not installed.  Narrative output goes to
stdout through :data:`console`; the error boundary writes to stderr
through :data:`error_console`.
"""

from __future__ import annotations

import sys
from typing import Any

from ott_proxy.exceptions import EnvironmentError, missing_dependency


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise missing_dependency("rich") from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console targeting stdout (or stderr).

	Soft wrapping keeps each message on one line regardless of the
	terminal width.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, soft_wrap=True, highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr: bool = stderr

	def print(
		self,
		*objects: object,
		style: str | None = None,
		markup: bool = True,
	) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, style=style, markup=markup)


console = _ConsoleProxy()
error_console = _ConsoleProxy(stderr=True)
