"""CLI console helpers with optional Rich support.

Two proxies are exposed:

* :data:`console` — stderr, Rich markup enabled; used for errors.
* :data:`output` — stdout, markup and highlighting disabled; used for
  the prompt and command reports, which carry user-supplied names.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from dept_roster.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool, markup: bool) -> None:
		self._stderr = stderr
		self._markup = markup

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		stream = sys.stderr if self._stderr else sys.stdout
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=stream, flush=True)
			return
		if self._markup:
			rich_console.print(*objects)
		else:
			rich_console.print(*objects, markup=False, highlight=False, emoji=False)
		stream.flush()


console = _ConsoleProxy(stderr=True, markup=True)
output = _ConsoleProxy(stderr=False, markup=False)
