"""Unit tests for httpcanon.http.query module."""

import pytest

from httpcanon.exceptions import AmbiguousQueryValue
from httpcanon.http.query import QueryParam, parse_query


class TestQueryParam:
    """Tests for QueryParam class."""

    def test_name_only(self):
        """Test a parameter without a value."""
        param = QueryParam("a")
        assert param.name == "a"
        assert param.value is None
        assert str(param) == "a"

    def test_split_on_first_equals(self):
        """Test that a name=value token is split at the first =."""
        param = QueryParam("a=b=c")
        assert param.name == "a"
        assert param.value == "b=c"
        assert str(param) == "a=b=c"

    def test_separate_value(self):
        """Test construction with a separate value argument."""
        param = QueryParam("a", "1")
        assert (param.name, param.value) == ("a", "1")
        assert str(param) == "a=1"

    def test_empty_value_renders_bare_name(self):
        """Test that an empty value renders without =."""
        param = QueryParam("a=")
        assert param.value == ""
        assert str(param) == "a"

    def test_ambiguous_value(self):
        """Test that a value in both the name and the argument is rejected."""
        with pytest.raises(AmbiguousQueryValue):
            QueryParam("a=b", "c")
        with pytest.raises(AmbiguousQueryValue):
            QueryParam("a=b", "")

    def test_equality_by_rendering(self):
        """Test equality and hashing by rendered text."""
        assert QueryParam("a=") == QueryParam("a")
        assert QueryParam("a", "1") == QueryParam("a=1")
        assert hash(QueryParam("a", "1")) == hash(QueryParam("a=1"))
        assert QueryParam("a=1") != QueryParam("a=2")
        assert QueryParam("a") != "a"

    def test_repr(self):
        """Test repr."""
        assert repr(QueryParam("a=1")) == "QueryParam('a', '1')"


class TestCompare:
    """Tests for QueryParam.compare."""

    @pytest.mark.parametrize(
        "first, second, expected",
        [
            ("a", "b", -1),
            ("b", "a", 1),
            ("C=d", "a", -1),
            ("a", "a=", 0),
            ("a=1", "a=2", -1),
            ("a=2", "a", 1),
            (QueryParam("x", "1"), "x=1", 0),
        ],
    )
    def test_compare(self, first, second, expected):
        """Test ordering by name, then value."""
        assert QueryParam.compare(first, second) == expected

    def test_sorting(self):
        """Test that sorted() uses the canonical order."""
        params = [QueryParam("b=c"), QueryParam("a"), QueryParam("C=d")]
        assert [str(p) for p in sorted(params)] == ["C=d", "a", "b=c"]


class TestParseQuery:
    """Tests for parse_query function."""

    def test_separators(self):
        """Test that & and ; both separate parameters."""
        assert [str(p) for p in parse_query("b=c;a=&C=d")] == ["C=d", "a", "b=c"]

    def test_empty_tokens_dropped(self):
        """Test that empty tokens are discarded."""
        assert parse_query("&;&") == ()
        assert parse_query("") == ()

    def test_stable_for_equal_params(self):
        """Test that equal parameters keep their input order."""
        params = parse_query("a=&a")
        assert [p.value for p in params] == ["", None]
