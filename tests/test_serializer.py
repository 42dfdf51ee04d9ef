import json
from decimal import Decimal

import pytest

from esquery.query.clauses import (
    Match,
    Prefix,
    QuerySort,
    Range,
    SortDirection,
    Terms,
    asc,
    between,
    desc,
)
from esquery.query.serializer import dumps, serialize, serialize_all


def test_match():
    q = Match("fund_name", "global")
    assert dumps(q) == json.dumps({"match": {"fund_name": "global"}})


def test_range():
    q = Range("risk_spectrum", Decimal(2), Decimal(5))
    assert serialize(q) == {"range": {"risk_spectrum": {"gte": "2", "lte": "5"}}}
    assert dumps(q) == '{"range": {"risk_spectrum": {"gte": "2", "lte": "5"}}}'


def test_range_keys_are_gte_then_lte():
    body = serialize(between("risk_spectrum", 1, 9))["range"]["risk_spectrum"]
    assert list(body) == ["gte", "lte"]


def test_terms():
    q = Terms("fund_id", ("1", "2", "4"))
    assert dumps(q) == json.dumps({"terms": {"fund_id": ["1", "2", "4"]}})


def test_terms_keeps_input_order():
    q = Terms("fund_id", ("4", "1", "2"))
    assert serialize(q) == {"terms": {"fund_id": ["4", "1", "2"]}}


def test_empty_terms():
    assert serialize(Terms("fund_id")) == {"terms": {"fund_id": []}}


def test_prefix():
    q = Prefix("fund_code", "k-ghealth", True)
    assert dumps(q) == (
        '{"prefix": {"fund_code": {"value": "k-ghealth", "case_insensitive": true}}}'
    )


def test_prefix_case_sensitive():
    body = serialize(Prefix("fund_code", "K"))["prefix"]["fund_code"]
    assert body == {"value": "K", "case_insensitive": False}
    assert list(body) == ["value", "case_insensitive"]


def test_sort_ascending():
    assert serialize(QuerySort("risk_spectrum", SortDirection.ASC)) == {"risk_spectrum": "asc"}


def test_sort_descending():
    assert dumps(desc("risk_spectrum")) == '{"risk_spectrum": "desc"}'


def test_nested_path_is_kept_verbatim():
    q = Match("fund_info.name.th", "global")
    assert serialize(q) == {"match": {"fund_info.name.th": "global"}}


def test_inverted_range_still_serializes():
    q = between("risk_spectrum", 8, 3)
    assert serialize(q) == {"range": {"risk_spectrum": {"gte": "8", "lte": "3"}}}


class TestDecimalFidelity:
    def test_many_significant_digits(self):
        value = "12345678901234567890.123456789012345678901"
        q = between("fund_statistics.aum", value, value)
        body = serialize(q)["range"]["fund_statistics.aum"]
        assert body["gte"] == value
        assert body["lte"] == value

    def test_no_binary_float_artifacts(self):
        q = between("fund_statistics.return_ytd", 0.1, 0.3)
        assert serialize(q)["range"]["fund_statistics.return_ytd"] == {"gte": "0.1", "lte": "0.3"}

    def test_exponent_is_rendered_in_plain_notation(self):
        q = Range("aum", Decimal("1E+3"), Decimal("-2.5E-3"))
        assert serialize(q)["range"]["aum"] == {"gte": "1000", "lte": "-0.0025"}

    def test_trailing_zeros_are_kept(self):
        q = Range("nav", Decimal("10.50"), Decimal("11.00"))
        assert serialize(q)["range"]["nav"] == {"gte": "10.50", "lte": "11.00"}

    def test_float_bounds_on_range_built_directly(self):
        q = Range("fund_statistics.return_ytd", 0.1, 2)  # type: ignore[arg-type]
        assert serialize(q)["range"]["fund_statistics.return_ytd"] == {"gte": "0.1", "lte": "2"}

    def test_round_trip_through_json(self):
        value = Decimal("-0.000000000000000000000000001")
        data = json.loads(dumps(Range("x", value, value)))
        assert Decimal(data["range"]["x"]["gte"]) == value


def test_serialize_all_keeps_order():
    clauses = [Match("fund_name", "global"), between("risk_spectrum", 1, 5), asc("nav")]
    assert serialize_all(clauses) == [
        {"match": {"fund_name": "global"}},
        {"range": {"risk_spectrum": {"gte": "1", "lte": "5"}}},
        {"nav": "asc"},
    ]


def test_dumps_sequence_with_indent():
    text = dumps((Match("a", "b"),), indent=2)
    assert json.loads(text) == [{"match": {"a": "b"}}]
    assert "\n" in text


def test_dumps_keeps_non_ascii():
    assert dumps(Match("fund_name", "กองทุน")) == '{"match": {"fund_name": "กองทุน"}}'


def test_unknown_node_is_rejected():
    with pytest.raises(ValueError, match="Unsupported query node"):
        serialize("risk_spectrum")  # type: ignore[arg-type]


def test_sort_accepts_plain_direction_string():
    assert serialize(QuerySort("nav", "desc")) == {"nav": "desc"}  # type: ignore[arg-type]
