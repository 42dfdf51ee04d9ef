# esquery/__init__.py
"""esquery - Typed search criteria to search-engine leaf query clauses."""

from esquery.criteria import (
    FieldBinding,
    SearchField,
    ToClause,
    bindings,
    clauseable,
    extract,
    search_field,
)
from esquery.errors import ClauseCapabilityError, InvalidClauseError, QueryError
from esquery.query import (
    Match,
    Prefix,
    QueryClause,
    QuerySort,
    Range,
    SortDirection,
    Terms,
    asc,
    between,
    desc,
    dumps,
    match,
    prefix,
    serialize,
    serialize_all,
    terms,
    validate,
)
from esquery.values import AnyOf, BoundedRange, IntRange, LongRange, StartsWith, Text

__all__ = [
    # Clauses
    "QueryClause",
    "Match",
    "Range",
    "Terms",
    "Prefix",
    "QuerySort",
    "SortDirection",
    "match",
    "between",
    "terms",
    "prefix",
    "asc",
    "desc",
    # Serialization
    "serialize",
    "serialize_all",
    "dumps",
    "validate",
    # Criteria
    "ToClause",
    "FieldBinding",
    "search_field",
    "SearchField",
    "bindings",
    "extract",
    "clauseable",
    # Values
    "BoundedRange",
    "IntRange",
    "LongRange",
    "Text",
    "AnyOf",
    "StartsWith",
    # Errors
    "QueryError",
    "InvalidClauseError",
    "ClauseCapabilityError",
]
