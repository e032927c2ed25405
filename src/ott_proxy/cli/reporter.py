"""Console rendering of playback notifications.

:class:`ConsolePlaybackReporter` implements the core
:class:`~ott_proxy.core.protocols.PlaybackObserver` protocol and turns
each step into one or more human-readable lines on stdout.  Message
text is printed with markup disabled so bracketed prefixes such as
``[BLOB Storage]`` appear verbatim.
"""

from __future__ import annotations

from ott_proxy.cli.console import console
from ott_proxy.core.models import VideoMetadata

METADATA_HEADER: str = "--- UI Metadata Loaded (from MongoDB) ---"
METADATA_FOOTER: str = "-" * 42


class ConsolePlaybackReporter:
    """Rich-backed :class:`PlaybackObserver` writing to stdout."""

    def _line(self, text: str, style: str | None = None) -> None:
        console.print(text, style=style, markup=False)

    # ------------------------------------------------------------------
    # Gateway notifications
    # ------------------------------------------------------------------

    def metadata_loaded(self, video_id: str, metadata: VideoMetadata) -> None:
        console.print()
        self._line(METADATA_HEADER, style="bold cyan")
        self._line(f"Title: {metadata.title}")
        self._line(f"Description: {metadata.description}")
        self._line(f"Manifest: {metadata.manifest}")
        self._line(METADATA_FOOTER, style="dim")
        console.print()

    def metadata_not_found(self, video_id: str) -> None:
        self._line("Error: Video metadata not found in MongoDB.", style="bold red")

    def playback_cancelled(self, video_id: str) -> None:
        self._line(
            "Streaming cancelled. Keeping heavy resources idle.",
            style="yellow",
        )

    # ------------------------------------------------------------------
    # Engine notifications
    # ------------------------------------------------------------------

    def connection_opening(self, manifest: str) -> None:
        self._line("[BLOB Storage] Establishing high-bandwidth connection...")

    def buffering(self, manifest: str) -> None:
        self._line(f"[BLOB Storage] Buffering initial segments from: {manifest}")

    def playback_started(self, video_id: str, manifest: str) -> None:
        self._line(
            f"[Streaming] Video {video_id} is now playing via {manifest}",
            style="bold green",
        )
