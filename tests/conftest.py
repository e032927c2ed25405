"""Shared pytest fixtures and configuration for the ott-proxy test suite.

Guidelines
----------
* No terminal interaction — questionary is always mocked.
* Core tests use :class:`RecordingObserver` instead of scraping output.
* Each test builds its own store and gateway; nothing is shared.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import pytest

from ott_proxy.core.gateway import StreamingGateway
from ott_proxy.core.metadata_store import MetadataStore, default_store
from ott_proxy.core.models import VideoMetadata


class RecordingObserver:
    """PlaybackObserver that records each notification as a tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def metadata_loaded(self, video_id: str, metadata: VideoMetadata) -> None:
        self.events.append(("metadata_loaded", video_id, metadata))

    def metadata_not_found(self, video_id: str) -> None:
        self.events.append(("metadata_not_found", video_id))

    def connection_opening(self, manifest: str) -> None:
        self.events.append(("connection_opening", manifest))

    def buffering(self, manifest: str) -> None:
        self.events.append(("buffering", manifest))

    def playback_started(self, video_id: str, manifest: str) -> None:
        self.events.append(("playback_started", video_id, manifest))

    def playback_cancelled(self, video_id: str) -> None:
        self.events.append(("playback_cancelled", video_id))

    def names(self) -> list[str]:
        return [event[0] for event in self.events]


def scripted_answers(answers: Iterable[str | None]) -> Callable[[], str | None]:
    """Return a confirmation source that replays *answers* in order."""
    iterator = iter(answers)
    return lambda: next(iterator)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def store() -> MetadataStore:
    return default_store()


@pytest.fixture
def make_gateway(
    store: MetadataStore,
    observer: RecordingObserver,
) -> Callable[..., StreamingGateway]:
    """Factory fixture: ``make_gateway("p", "n")`` scripts the answers."""

    def _make(*answers: str | None, **kwargs: Any) -> StreamingGateway:
        return StreamingGateway(store, scripted_answers(answers), observer, **kwargs)

    return _make


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from emitting colour codes into captured output."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
