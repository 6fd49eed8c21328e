# ==============================================
# Tests for ColumnTypeState
# ==============================================

from seedloader.analysis import ColumnCategory, ColumnTypeState, NO_VALUE


def feed(state, *values):
    for value in values:
        state.update(value)
    return state


class TestInitialState:

    def test_starts_unset_with_no_value(self):
        state = ColumnTypeState(name="id")
        assert state.category == ColumnCategory.UNSET
        assert state.max_length == NO_VALUE
        assert not state.has_values


class TestUpdate:

    def test_first_value_sets_category(self):
        assert feed(ColumnTypeState("a"), "12").category == ColumnCategory.INTEGER
        assert feed(ColumnTypeState("b"), "1.5").category == ColumnCategory.FLOAT
        assert feed(ColumnTypeState("c"), "2020-01-01").category == ColumnCategory.DATE
        assert feed(ColumnTypeState("d"), "hello").category == ColumnCategory.TEXT_VARIABLE

    def test_consistent_values_keep_category(self):
        state = feed(ColumnTypeState("n"), "1", "22", "333")
        assert state.category == ColumnCategory.INTEGER
        assert state.max_length == 3

    def test_conflicting_value_downgrades_to_text(self):
        state = feed(ColumnTypeState("val"), "3.14", "abc")
        assert state.category == ColumnCategory.TEXT_VARIABLE
        assert state.max_length == 4

    def test_text_is_absorbing(self):
        state = feed(ColumnTypeState("n"), "12", "x", "5", "6", "7")
        assert state.category == ColumnCategory.TEXT_VARIABLE

    def test_max_length_tracked_for_text(self):
        state = feed(ColumnTypeState("name"), "Al", "Alice", "Bob")
        assert state.max_length == 5

    def test_max_length_survives_downgrade(self):
        state = feed(ColumnTypeState("n"), "12345", "ab")
        assert state.category == ColumnCategory.TEXT_VARIABLE
        assert state.max_length == 5


class TestNullHandling:

    def test_nulls_change_nothing_but_the_counter(self):
        state = feed(ColumnTypeState("x"), None, "", None)
        assert state.category == ColumnCategory.UNSET
        assert state.max_length == NO_VALUE
        assert state.null_count == 3
        assert state.value_count == 0

    def test_nulls_between_values_are_ignored(self):
        state = feed(ColumnTypeState("x"), "1", None, "", "2")
        assert state.category == ColumnCategory.INTEGER
        assert state.max_length == 1
        assert state.value_count == 2
        assert state.null_count == 2


class TestSerialization:

    def test_to_dict_and_back(self):
        state = feed(ColumnTypeState("price"), "9.99", None)
        restored = ColumnTypeState.from_dict(state.to_dict())
        assert restored == state
