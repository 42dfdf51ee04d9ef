# esquery/criteria.py
"""Turn criteria records into ordered query clauses.

A criteria record is a dataclass or pydantic model whose optional fields are
bound to target paths::

    @clauseable
    @dataclass(frozen=True)
    class FundCriteria:
        risk: IntRange | None = search_field("risk_spectrum")
        return_ytd: IntRange | None = search_field("fund_statistics.return_ytd")
        note: str | None = None  # no path, not searched

    FundCriteria(risk=IntRange(1, 10)).to_clauses()
    # [Range(field='risk_spectrum', gte=Decimal('1'), lte=Decimal('10'))]

Fields are walked in declaration order. ``None`` values are skipped.
"""

import dataclasses
import logging
from dataclasses import dataclass
from functools import cache
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel
from pydantic import Field as PydanticField
from pydantic.fields import FieldInfo

from esquery.errors import ClauseCapabilityError
from esquery.query.clauses import QueryClause

logger = logging.getLogger(__name__)

SEARCH_FIELD = "search_field"


@runtime_checkable
class ToClause(Protocol):
    """A value that can render itself as a clause on a target path."""

    def to_clause(self, field: str) -> QueryClause: ...


@dataclass(frozen=True)
class FieldBinding:
    """A criteria attribute and the document path it searches."""

    name: str
    path: str


def search_field(path: str, *, default: Any = None) -> Any:
    """Declare a dataclass field that is searched on ``path``."""
    return dataclasses.field(default=default, metadata={SEARCH_FIELD: path})


def SearchField(path: str, *, default: Any = None, **kwargs: Any) -> Any:
    """Declare a pydantic field that is searched on ``path``.

    The path also shows up in the model's JSON schema under ``search_field``.
    """
    return PydanticField(default=default, json_schema_extra={SEARCH_FIELD: path}, **kwargs)


def _pydantic_path(info: FieldInfo) -> str | None:
    extra = info.json_schema_extra
    if isinstance(extra, dict):
        path = extra.get(SEARCH_FIELD)
        if isinstance(path, str):
            return path
    return None


@cache
def _bindings_for(cls: type) -> tuple[FieldBinding, ...]:
    if dataclasses.is_dataclass(cls):
        candidates = [(f.name, f.metadata.get(SEARCH_FIELD)) for f in dataclasses.fields(cls)]
    elif issubclass(cls, BaseModel):
        candidates = [(name, _pydantic_path(info)) for name, info in cls.model_fields.items()]
    else:
        raise TypeError(f"{cls.__name__} is not a dataclass or pydantic model")

    result = tuple(FieldBinding(name, path) for name, path in candidates if path is not None)
    logger.debug("Built %d field bindings for %s", len(result), cls.__name__)
    return result


def bindings(record: object) -> tuple[FieldBinding, ...]:
    """Return the ordered field bindings of a criteria record or type."""
    cls = record if isinstance(record, type) else type(record)
    return _bindings_for(cls)


def extract(record: object) -> list[QueryClause]:
    """Extract clauses from the present fields of ``record``, in declaration order.

    Raises:
        ClauseCapabilityError: If a present value has no ``to_clause``.
    """
    clauses: list[QueryClause] = []
    for binding in bindings(record):
        value = getattr(record, binding.name)
        if value is None:
            continue
        if not isinstance(value, ToClause):
            raise ClauseCapabilityError(
                f"{type(record).__name__}.{binding.name}: "
                f"{type(value).__name__} cannot be rendered as a query clause"
            )
        clauses.append(value.to_clause(binding.path))

    logger.debug("Extracted %d clauses from %s", len(clauses), type(record).__name__)
    return clauses


def clauseable[C: type](cls: C) -> C:
    """Class decorator that adds ``to_clauses()`` to a criteria type.

    Bindings are resolved when the class is decorated, so a bad target
    (anything but a dataclass or pydantic model) fails at import time.
    """
    _bindings_for(cls)

    def to_clauses(self) -> list[QueryClause]:
        return extract(self)

    cls.to_clauses = to_clauses  # type: ignore[attr-defined]
    return cls
