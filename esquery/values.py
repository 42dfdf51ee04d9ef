# esquery/values.py
"""Criteria value types that render themselves as clauses."""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from esquery.query.clauses import Match, Prefix, Range, Terms, to_decimal


@dataclass(frozen=True)
class BoundedRange:
    """Range with optional bounds.

    A missing bound is replaced by the type's sentinel, so an open range still
    renders a closed ``Range`` clause. Subclasses set ``minimum`` and
    ``maximum``.
    """

    lower_bound: int | Decimal | None = None
    upper_bound: int | Decimal | None = None

    minimum: ClassVar[Decimal | None] = None
    maximum: ClassVar[Decimal | None] = None

    def to_clause(self, field: str) -> Range:
        if self.minimum is None or self.maximum is None:
            raise TypeError(f"{type(self).__name__} does not define minimum/maximum sentinels")
        gte = self.minimum if self.lower_bound is None else to_decimal(self.lower_bound)
        lte = self.maximum if self.upper_bound is None else to_decimal(self.upper_bound)
        return Range(field, gte, lte)


@dataclass(frozen=True)
class IntRange(BoundedRange):
    """Range over 32-bit signed values."""

    minimum: ClassVar[Decimal] = Decimal(-(2**31))
    maximum: ClassVar[Decimal] = Decimal(2**31 - 1)


@dataclass(frozen=True)
class LongRange(BoundedRange):
    """Range over 64-bit signed values."""

    minimum: ClassVar[Decimal] = Decimal(-(2**63))
    maximum: ClassVar[Decimal] = Decimal(2**63 - 1)


@dataclass(frozen=True)
class Text:
    value: str

    def to_clause(self, field: str) -> Match:
        return Match(field, self.value)


@dataclass(frozen=True)
class AnyOf:
    """Match any of the given values. Order is kept, duplicates are not removed."""

    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # A bare string is one value, not a sequence of characters
        if isinstance(self.values, str):
            object.__setattr__(self, "values", (self.values,))
        else:
            object.__setattr__(self, "values", tuple(self.values))

    def to_clause(self, field: str) -> Terms:
        return Terms(field, self.values)


@dataclass(frozen=True)
class StartsWith:
    value: str
    case_insensitive: bool = False

    def to_clause(self, field: str) -> Prefix:
        return Prefix(field, self.value, self.case_insensitive)
