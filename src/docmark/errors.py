"""Exception types for docmark.

Every error here is recoverable: the command layer turns it into a short
message for the user and carries on.
"""


class DocmarkError(Exception):
    """Base class for all docmark errors."""


class ConfigurationError(DocmarkError):
    """Raised when the delimiter configuration is invalid."""


class NoQueryError(DocmarkError):
    """Raised when a search is requested without any query text."""

    def __init__(self, message: str = "No passage text to search for") -> None:
        super().__init__(message)


class NoEngineSelected(DocmarkError):
    """Raised when the engine chooser is dismissed without a choice."""

    def __init__(self, message: str = "No search engine selected") -> None:
        super().__init__(message)


class UnknownEngineError(DocmarkError):
    """Raised when a search engine name is not in the registry."""


class NoEntryError(DocmarkError):
    """Raised when a listing action runs on a line without an entry."""

    def __init__(self, message: str = "No passage on this line") -> None:
        super().__init__(message)


class UnknownDocumentError(DocmarkError):
    """Raised when the host is asked for a document it does not hold."""
