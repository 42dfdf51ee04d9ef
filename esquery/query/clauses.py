# esquery/query/clauses.py
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

type Number = Decimal | int | float | str


@dataclass(frozen=True)
class QueryClause:
    """Base node for leaf query clauses."""

    field: str


@dataclass(frozen=True)
class Match(QueryClause):
    """Term match: field=value."""

    value: str


@dataclass(frozen=True)
class Range(QueryClause):
    """Inclusive range: gte <= field <= lte.

    Bounds are not checked against each other; see ``validate``.
    """

    gte: Decimal
    lte: Decimal


@dataclass(frozen=True)
class Terms(QueryClause):
    """Membership in a set of values, kept in caller order."""

    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class Prefix(QueryClause):
    """Prefix match with optional case folding."""

    value: str
    case_insensitive: bool = False


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class QuerySort:
    """Single sort key."""

    field: str
    direction: SortDirection = SortDirection.ASC


def to_decimal(value: Number) -> Decimal:
    """Coerce a bound to Decimal without going through binary floating point."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


# Factory functions (public API)
def match(field: str, value: str) -> Match:
    return Match(field, value)


def between(field: str, gte: Number, lte: Number) -> Range:
    return Range(field, to_decimal(gte), to_decimal(lte))


def terms(field: str, *values: str) -> Terms:
    return Terms(field, tuple(values))


def prefix(field: str, value: str, *, case_insensitive: bool = False) -> Prefix:
    return Prefix(field, value, case_insensitive)


def asc(field: str) -> QuerySort:
    return QuerySort(field, SortDirection.ASC)


def desc(field: str) -> QuerySort:
    return QuerySort(field, SortDirection.DESC)
