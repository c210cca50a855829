"""Error types raised while reading, splitting, and writing NZB manifests."""

from __future__ import annotations


class NzbSplitError(RuntimeError):
    """Base class for nzbsplit failures."""


class ParseError(NzbSplitError):
    """Raised when an NZB document cannot be read."""


class ConstraintViolation(NzbSplitError):
    """Raised when a size-capped split cannot satisfy its cap."""


class InvalidArgument(NzbSplitError, ValueError):
    """Raised for unusable user input such as an unknown size unit."""
