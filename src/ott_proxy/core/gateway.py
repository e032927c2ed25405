"""Streaming gateway — the proxy in front of the playback engine.

The gateway answers every request from the cheap metadata store first
and only creates the expensive :class:`PlaybackEngine` once the viewer
has confirmed.  The engine lives in an optional slot that is filled at
most once per gateway and reused for every later playback.

Guarantees
----------
* No ``print()`` and no terminal I/O — every step goes to the observer.
* "Not found" and "declined" are returned as outcomes, never raised.
* The engine is never built without a confirmed request.
"""

from __future__ import annotations

from collections.abc import Callable

from ott_proxy.core.metadata_store import MetadataStore
from ott_proxy.core.models import PlaybackOutcome, VideoMetadata
from ott_proxy.core.playback_engine import PlaybackEngine
from ott_proxy.core.protocols import ConfirmationSource, PlaybackObserver

AFFIRMATIVE_TOKEN: str = "p"

EngineFactory = Callable[[str, PlaybackObserver], PlaybackEngine]


def is_affirmative(answer: str | None) -> bool:
    """Return ``True`` only for the ``p`` token (any case, padded or not)."""
    if answer is None:
        return False
    return answer.strip().lower() == AFFIRMATIVE_TOKEN


class StreamingGateway:
    """Proxy that gates and lazily creates the playback engine.

    Satisfies :class:`~ott_proxy.core.protocols.VideoStreamer`
    structurally via :meth:`play_video`.

    Parameters
    ----------
    store:
        Metadata source consulted before anything else.
    confirm:
        Asked once per found video; see :func:`is_affirmative`.
    observer:
        Receives every observable step, including those of the engine.
    engine_factory:
        Builds the engine on first confirmed use.  Defaults to
        :class:`PlaybackEngine`.
    """

    def __init__(
        self,
        store: MetadataStore,
        confirm: ConfirmationSource,
        observer: PlaybackObserver,
        *,
        engine_factory: EngineFactory = PlaybackEngine,
    ) -> None:
        self._store: MetadataStore = store
        self._confirm: ConfirmationSource = confirm
        self._observer: PlaybackObserver = observer
        self._engine_factory: EngineFactory = engine_factory
        self._engine: PlaybackEngine | None = None

    @property
    def engine(self) -> PlaybackEngine | None:
        """The engine, or ``None`` while no playback has been confirmed."""
        return self._engine

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def play(self, video_id: str) -> PlaybackOutcome:
        """Resolve metadata, ask for confirmation, then delegate playback.

        Returns
        -------
        PlaybackOutcome
            ``NOT_FOUND`` for unknown ids, ``CANCELLED`` when the viewer
            declines, ``PLAYING`` once the engine has been asked to play.
        """
        metadata = self._store.lookup(video_id)
        if metadata is None:
            self._observer.metadata_not_found(video_id)
            return PlaybackOutcome.NOT_FOUND

        self._observer.metadata_loaded(video_id, metadata)

        if not is_affirmative(self._confirm()):
            self._observer.playback_cancelled(video_id)
            return PlaybackOutcome.CANCELLED

        self._acquire_engine(metadata).play_video(video_id)
        return PlaybackOutcome.PLAYING

    play_video = play

    # ------------------------------------------------------------------
    # Lazy engine slot
    # ------------------------------------------------------------------

    def _acquire_engine(self, metadata: VideoMetadata) -> PlaybackEngine:
        """Return the engine, building it from *metadata* if the slot is empty.

        Later calls reuse the first engine even when *metadata* names a
        different manifest.
        """
        if self._engine is None:
            self._engine = self._engine_factory(metadata.manifest, self._observer)
        return self._engine
