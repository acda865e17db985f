"""
structedit.errors: Exceptions raised by the update engine.

The engine is total over every input shape except one: an index that is
not a finite number.  That is a programmer error and is reported in
development mode only (see structedit.config).
"""

from typing import Any


class StructEditError(Exception):
    """Base class for structedit errors."""


class InvalidIndexError(StructEditError, TypeError):
    """A sequence index that is not a finite number."""

    def __init__(self, index: Any):
        self.index = index
        super().__init__(
            f'Expected "index" to be a finite number, but got {index!r} '
            f'of type "{type(index).__name__}" instead'
        )
