"""Exceptions raised by genepath.

Missing genes and unreachable targets are ordinary outcomes reported through
:class:`genepath.types.QueryResult`; only the conditions below are raised.
"""


class GenePathError(Exception):
    """Base class for genepath failures."""


class InputAbsentError(GenePathError):
    """Raised when the dictionary source is missing or holds no valid genes."""


class EmptyDictionaryError(GenePathError):
    """Raised when a suggestion is requested against zero candidates."""
