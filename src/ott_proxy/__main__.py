"""Allow ``python -m ott_proxy`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ott_proxy`` behaves identically to the ``ott-proxy``
console script.
"""

from __future__ import annotations

from ott_proxy.cli.app import cli

if __name__ == "__main__":
    cli()
