# ==============================================
# Tests for TypeResolver
# ==============================================

import pytest

from seedloader.analysis import ColumnCategory, ColumnTypeState, NO_VALUE, TypeResolver


@pytest.fixture
def resolver():
    return TypeResolver()


def state_of(category, max_length):
    return ColumnTypeState(name="col", category=category, max_length=max_length)


class TestIntegerSizing:
    """Integer subtypes are picked by character length, largest threshold first."""

    @pytest.mark.parametrize("max_length, expected", [
        (1, "TINYINT"),
        (2, "SMALLINT"),
        (3, "INT"),
        (10, "INT"),
        (11, "BIGINT"),
        (13, "BIGINT"),
    ])
    def test_thresholds(self, resolver, max_length, expected):
        resolved = resolver.resolve(state_of(ColumnCategory.INTEGER, max_length))
        assert resolved.sql_type == expected
        assert resolved.category == ColumnCategory.INTEGER
        assert resolved.length is None


class TestTextSizing:
    """VARCHAR bounds are the smallest that fit, TEXT beyond 500."""

    @pytest.mark.parametrize("max_length, expected, length", [
        (1, "VARCHAR(10)", 10),
        (10, "VARCHAR(10)", 10),
        (11, "VARCHAR(50)", 50),
        (50, "VARCHAR(50)", 50),
        (51, "VARCHAR(255)", 255),
        (255, "VARCHAR(255)", 255),
        (256, "VARCHAR(500)", 500),
        (500, "VARCHAR(500)", 500),
        (501, "TEXT", None),
    ])
    def test_bounds(self, resolver, max_length, expected, length):
        resolved = resolver.resolve(state_of(ColumnCategory.TEXT_VARIABLE, max_length))
        assert resolved.sql_type == expected
        assert resolved.length == length


class TestFixedTypes:

    def test_unset_is_unbounded_text(self, resolver):
        resolved = resolver.resolve(state_of(ColumnCategory.UNSET, NO_VALUE))
        assert resolved.sql_type == "TEXT"
        assert resolved.category == ColumnCategory.UNSET

    def test_float(self, resolver):
        assert resolver.resolve(state_of(ColumnCategory.FLOAT, 12)).sql_type == "FLOAT"

    def test_date(self, resolver):
        assert resolver.resolve(state_of(ColumnCategory.DATE, 10)).sql_type == "DATE"


class TestCustomTables:

    def test_custom_size_tables(self):
        resolver = TypeResolver(
            integer_size_classes=[(5, "MEDIUMINT")],
            varchar_size_classes=[20]
        )
        assert resolver.resolve(state_of(ColumnCategory.INTEGER, 6)).sql_type == "MEDIUMINT"
        assert resolver.resolve(state_of(ColumnCategory.INTEGER, 4)).sql_type == "TINYINT"
        assert resolver.resolve(state_of(ColumnCategory.TEXT_VARIABLE, 20)).sql_type == "VARCHAR(20)"
        assert resolver.resolve(state_of(ColumnCategory.TEXT_VARIABLE, 21)).sql_type == "TEXT"

    def test_empty_tables_are_not_replaced_by_defaults(self):
        resolver = TypeResolver(integer_size_classes=[], varchar_size_classes=[])
        assert resolver.integer_size_classes == []
        assert resolver.resolve(state_of(ColumnCategory.INTEGER, 12)).sql_type == "TINYINT"
        assert resolver.resolve(state_of(ColumnCategory.TEXT_VARIABLE, 1)).sql_type == "TEXT"

    def test_resolve_all_keeps_order(self, resolver):
        states = {
            "b": state_of(ColumnCategory.FLOAT, 3),
            "a": state_of(ColumnCategory.DATE, 10),
        }
        assert list(resolver.resolve_all(states)) == ["b", "a"]
