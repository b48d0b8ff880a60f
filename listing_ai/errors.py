"""
Shared errors for listing analysis.
"""


class ListingAnalysisError(Exception):
    """Base exception for the listing analysis engine."""

    pass


class InvalidInputError(ListingAnalysisError, ValueError):
    """Raised when analyzer input is missing or malformed."""

    pass


class ResultStorageError(ListingAnalysisError):
    """Raised when the result store cannot read or write a record."""

    pass
