# esquery/query/validation.py
"""Opt-in strict checks for clauses.

Clauses are never validated on construction. Call ``validate`` where a
malformed clause should fail fast instead of reaching the search engine.
"""

from esquery.errors import InvalidClauseError
from esquery.query.clauses import QueryClause, QuerySort, Range, to_decimal


def validate[N: (QueryClause, QuerySort)](node: N) -> N:
    """Check a clause or sort key and return it unchanged.

    Raises:
        InvalidClauseError: If the field path is empty, has an empty
            segment, or a range has a non-finite bound or gte > lte.
    """
    _validate_path(node.field)
    if isinstance(node, Range):
        _validate_bounds(node)
    return node


def _validate_bounds(node: Range) -> None:
    gte, lte = to_decimal(node.gte), to_decimal(node.lte)
    if not (gte.is_finite() and lte.is_finite()):
        raise InvalidClauseError(
            f"Range on {node.field!r} has a non-finite bound: gte={gte}, lte={lte}"
        )
    if gte > lte:
        raise InvalidClauseError(f"Range on {node.field!r} has gte > lte: {gte} > {lte}")


def _validate_path(path: str) -> None:
    if not path or not path.strip():
        raise InvalidClauseError("Field path must not be empty.")
    if any(not segment for segment in path.split(".")):
        raise InvalidClauseError(f"Field path has an empty segment: {path!r}")
