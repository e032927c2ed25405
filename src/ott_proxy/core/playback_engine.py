"""Playback engine — the expensive real subject behind the gateway.

Constructing an engine simulates opening a high-bandwidth connection to
blob storage and buffering the first segments.  Nothing is actually
transferred; every step is a notification to the injected observer.
"""

from __future__ import annotations

from ott_proxy.core.protocols import PlaybackObserver


class PlaybackEngine:
    """Simulated streaming backend bound to a single manifest.

    Satisfies :class:`~ott_proxy.core.protocols.VideoStreamer`
    structurally.

    Parameters
    ----------
    manifest:
        Manifest reference the engine streams from for its whole life.
    observer:
        Receives the connection, buffering and playback notifications.
    """

    def __init__(self, manifest: str, observer: PlaybackObserver) -> None:
        self._manifest: str = manifest
        self._observer: PlaybackObserver = observer
        self._load_from_blob_storage()

    @property
    def manifest(self) -> str:
        """Manifest reference bound at construction."""
        return self._manifest

    def _load_from_blob_storage(self) -> None:
        self._observer.connection_opening(self._manifest)
        self._observer.buffering(self._manifest)

    def play_video(self, video_id: str) -> None:
        """Start (simulated) playback of *video_id*.  Always succeeds."""
        self._observer.playback_started(video_id, self._manifest)
