# esquery/errors.py
"""Exceptions raised by esquery."""


class QueryError(Exception):
    """Base class for esquery errors."""


class InvalidClauseError(QueryError, ValueError):
    """Raised when strict validation rejects a clause."""


class ClauseCapabilityError(QueryError, TypeError):
    """Raised when a criteria value cannot render itself as a clause."""
