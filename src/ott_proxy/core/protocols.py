"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these contracts.  The CLI layer supplies the
concrete observer and confirmation source at construction time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from ott_proxy.core.models import VideoMetadata

ConfirmationSource = Callable[[], str | None]
"""Zero-argument callable returning the viewer's raw answer.

``None`` means the prompt was aborted and is treated as a decline.
"""


class VideoStreamer(Protocol):
    """Common subject contract shared by the engine and the gateway.

    Anything that can play a video by identifier satisfies this
    protocol structurally.
    """

    def play_video(self, video_id: str) -> object:
        """Play the video identified by *video_id*."""
        ...  # pragma: no cover


class PlaybackObserver(Protocol):
    """Receives every observable step of a playback request.

    Implementations decide how (or whether) to render each step; the
    core layer never writes to the terminal itself.
    """

    def metadata_loaded(self, video_id: str, metadata: VideoMetadata) -> None:
        """Metadata for *video_id* was resolved and should be displayed."""
        ...  # pragma: no cover

    def metadata_not_found(self, video_id: str) -> None:
        """No metadata exists for *video_id*."""
        ...  # pragma: no cover

    def connection_opening(self, manifest: str) -> None:
        """The playback engine is connecting to storage."""
        ...  # pragma: no cover

    def buffering(self, manifest: str) -> None:
        """The playback engine is buffering the first segments."""
        ...  # pragma: no cover

    def playback_started(self, video_id: str, manifest: str) -> None:
        """Playback of *video_id* has begun."""
        ...  # pragma: no cover

    def playback_cancelled(self, video_id: str) -> None:
        """The viewer declined playback of *video_id*."""
        ...  # pragma: no cover
