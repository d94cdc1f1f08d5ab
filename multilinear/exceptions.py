from __future__ import annotations


class MultilinearError(Exception):
    """Base class for multilinear-specific exceptions."""


class TensorError(MultilinearError, ValueError):
    """Structural work was requested on a failed (``Err``) tensor."""

    def __init__(self, message: str, *, reason: str | None = None):
        detail = f": {reason}" if reason else ""
        super().__init__(f"{message}{detail}")
        self.reason = reason


class DecodeError(MultilinearError, ValueError):
    """No tensor component could be decoded from the input."""

    def __init__(self, message: str, *, source: str | None = None):
        location = f" ({source})" if source else ""
        super().__init__(f"{message}{location}")
        self.source = source
