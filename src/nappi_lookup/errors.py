"""
Exceptions raised while loading and querying the NAPPI catalog.
"""


class CatalogError(Exception):
    """Base class for all catalog failures."""


class SourceUnavailableError(CatalogError):
    """The NAPPI file could not be opened or read."""

    def __init__(self, path, reason):
        self.path = str(path)
        super().__init__(f"NAPPI file unavailable: {self.path} ({reason})")


class MalformedRecordError(CatalogError):
    """A line is too short to hold every fixed-width field."""

    def __init__(self, line_no, length, required):
        self.line_no = line_no
        self.length = length
        self.required = required
        where = f"line {line_no}" if line_no is not None else "line"
        super().__init__(
            f"Malformed record on {where}: {length} bytes, at least {required} required"
        )


class CatalogNotLoadedError(CatalogError, RuntimeError):
    """A search was attempted before any catalog generation was published."""


class InvalidQueryError(CatalogError, ValueError):
    """A caller supplied search term failed validation."""
