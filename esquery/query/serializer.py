# esquery/query/serializer.py
"""Render clauses and sort keys into the search engine's JSON query DSL."""

import json
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from esquery.query.clauses import (
    Match,
    Number,
    Prefix,
    QueryClause,
    QuerySort,
    Range,
    SortDirection,
    Terms,
    to_decimal,
)

logger = logging.getLogger(__name__)


def _decimal_text(value: Number) -> str:
    # Plain notation: Decimal("1E+3") -> "1000"
    return format(to_decimal(value), "f")


def serialize(node: QueryClause | QuerySort) -> dict[str, Any]:
    """Convert a clause or sort key to its wire shape."""
    match node:
        case Match(field=f, value=v):
            return {"match": {f: v}}
        case Range(field=f, gte=gte, lte=lte):
            return {"range": {f: {"gte": _decimal_text(gte), "lte": _decimal_text(lte)}}}
        case Terms(field=f, values=vs):
            return {"terms": {f: list(vs)}}
        case Prefix(field=f, value=v, case_insensitive=ci):
            return {"prefix": {f: {"value": v, "case_insensitive": ci}}}
        case QuerySort(field=f, direction=d):
            return {f: SortDirection(d).value}
        case _:
            raise ValueError(f"Unsupported query node: {node!r}")


def serialize_all(nodes: Iterable[QueryClause | QuerySort]) -> list[dict[str, Any]]:
    """Serialize a sequence of nodes, keeping its order."""
    return [serialize(node) for node in nodes]


def dumps(
    value: QueryClause | QuerySort | Sequence[QueryClause | QuerySort],
    *,
    indent: int | None = None,
) -> str:
    """Render a node, or a sequence of nodes, as JSON text.

    Args:
        value: A clause, a sort key, or a list/tuple of them.
        indent: Passed through to ``json.dumps``; compact output when None.

    Returns:
        JSON text with keys in wire order.
    """
    if isinstance(value, (list, tuple)):
        data: Any = serialize_all(value)
    else:
        data = serialize(value)
    text = json.dumps(data, indent=indent, ensure_ascii=False)
    logger.debug("Serialized query: %s", text)
    return text
