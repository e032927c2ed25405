"""Custom exception hierarchy for ott-proxy.

Unknown videos and declined playback are *outcomes*, not errors — the
gateway reports them and returns normally.  The exceptions below cover
the remaining conditions that callers may need to handle explicitly.

Hierarchy
---------
OttProxyError
├── MetadataNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class OttProxyError(Exception):
    """Base exception for all ott-proxy errors.

    The CLI error boundary renders any subclass as a clean message
    without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Metadata --------------------------------------------------------------

class MetadataNotFoundError(OttProxyError):
    """Raised by :meth:`MetadataStore.require` for an unknown video identifier.

    Library-caller surface only; the playback flow never raises it.
    """

    def __init__(self, video_id: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"Video metadata not found for '{video_id}'.",
            hint=hint,
        )
        self.video_id: str = video_id


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(OttProxyError):
    """Raised when a required runtime dependency is not available."""


def missing_dependency(package: str) -> EnvironmentError:
    """Build the standard error for an uninstalled UI dependency."""
    return EnvironmentError(
        f"{package} is not installed.",
        hint=f"Install with: pip install {package}",
    )
