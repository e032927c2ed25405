"""Core / service layer — the proxy, its store, and the real subject.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All user-visible steps are reported through a ``PlaybackObserver``.
"""

from ott_proxy.core.gateway import AFFIRMATIVE_TOKEN, StreamingGateway, is_affirmative
from ott_proxy.core.metadata_store import (
    DEFAULT_CATALOGUE,
    DEFAULT_VIDEO_ID,
    MetadataStore,
    default_store,
)
from ott_proxy.core.models import PlaybackOutcome, VideoMetadata
from ott_proxy.core.playback_engine import PlaybackEngine
from ott_proxy.core.protocols import ConfirmationSource, PlaybackObserver, VideoStreamer

__all__: list[str] = [
    "AFFIRMATIVE_TOKEN",
    "ConfirmationSource",
    "DEFAULT_CATALOGUE",
    "DEFAULT_VIDEO_ID",
    "MetadataStore",
    "PlaybackEngine",
    "PlaybackObserver",
    "PlaybackOutcome",
    "StreamingGateway",
    "VideoMetadata",
    "VideoStreamer",
    "default_store",
    "is_affirmative",
]
