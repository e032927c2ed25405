"""Domain models for ott-proxy.

Frozen dataclasses and enums only — immutable value objects with no
behaviour beyond data access and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Video metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoMetadata:
    """Lightweight descriptive record for a single video.

    Cheap to fetch and shown to the viewer before any playback
    resource is committed.
    """

    title: str
    """Human-readable video title."""

    description: str
    """Short description shown alongside the title."""

    manifest: str
    """Opaque reference to the streaming playlist (e.g. ``playlist.m3u8``)."""


# ---------------------------------------------------------------------------
# Playback outcome
# ---------------------------------------------------------------------------

class PlaybackOutcome(enum.Enum):
    """Result of a single :meth:`StreamingGateway.play` call."""

    NOT_FOUND = "not_found"
    """No metadata exists for the requested video."""

    CANCELLED = "cancelled"
    """The viewer declined; no playback resource was touched."""

    PLAYING = "playing"
    """Playback was delegated to the engine."""
