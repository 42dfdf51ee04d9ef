from .clauses import (
    Match,
    Number,
    Prefix,
    QueryClause,
    QuerySort,
    Range,
    SortDirection,
    Terms,
    asc,
    between,
    desc,
    match,
    prefix,
    terms,
    to_decimal,
)
from .serializer import dumps, serialize, serialize_all
from .validation import validate

__all__ = [
    "QueryClause",
    "Match",
    "Range",
    "Terms",
    "Prefix",
    "QuerySort",
    "SortDirection",
    "Number",
    "match",
    "between",
    "terms",
    "prefix",
    "asc",
    "desc",
    "to_decimal",
    "serialize",
    "serialize_all",
    "dumps",
    "validate",
]
