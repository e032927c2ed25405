"""In-memory metadata store — the cheap side of the proxy.

Stands in for a document database holding one record per video.  The
store is explicitly constructed and handed to the gateway; there is no
module-level instance.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ott_proxy.core.models import VideoMetadata
from ott_proxy.exceptions import MetadataNotFoundError

DEFAULT_VIDEO_ID: str = "vid_101"

DEFAULT_CATALOGUE: Mapping[str, VideoMetadata] = MappingProxyType(
    {
        DEFAULT_VIDEO_ID: VideoMetadata(
            title="System Design 101",
            description="HLD Basics",
            manifest="playlist.m3u8",
        ),
    }
)


class MetadataStore:
    """Read-only mapping from video identifier to :class:`VideoMetadata`.

    Parameters
    ----------
    records:
        Initial contents.  Copied on construction; the store exposes no
        mutation operations afterwards.
    """

    def __init__(self, records: Mapping[str, VideoMetadata]) -> None:
        self._records: Mapping[str, VideoMetadata] = MappingProxyType(dict(records))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def lookup(self, video_id: str) -> VideoMetadata | None:
        """Return the record for *video_id*, or ``None`` if unknown."""
        return self._records.get(video_id)

    def require(self, video_id: str) -> VideoMetadata:
        """Return the record for *video_id*, raising if it is unknown.

        Convenience for library callers that treat absence as an error.
        The gateway never calls this; it uses :meth:`lookup` and reports
        "not found" as an ordinary outcome.

        Raises
        ------
        MetadataNotFoundError
            If *video_id* is not in the store.
        """
        metadata = self.lookup(video_id)
        if metadata is None:
            raise MetadataNotFoundError(
                video_id,
                hint=f"Known videos: {', '.join(self.video_ids()) or 'none'}",
            )
        return metadata

    def video_ids(self) -> tuple[str, ...]:
        """Return all known identifiers in insertion order."""
        return tuple(self._records)

    def __contains__(self, video_id: object) -> bool:
        return video_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)


def default_store() -> MetadataStore:
    """Build a store pre-populated with :data:`DEFAULT_CATALOGUE`."""
    return MetadataStore(DEFAULT_CATALOGUE)
