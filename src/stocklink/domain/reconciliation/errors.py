"""Errors raised while reconciling stock to source links."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a desired link record has the wrong shape.

    ``index`` is the position of the offending record in the submitted batch.
    """

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
