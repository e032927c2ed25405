"""ott-proxy — lazy video playback behind a metadata proxy.

A small OTT streaming demo built around a strict layered architecture:
a metadata store, a streaming gateway that gates an expensive playback
engine, and a Rich-based CLI.
"""

from ott_proxy.version import __version__

__all__: list[str] = ["__version__"]
