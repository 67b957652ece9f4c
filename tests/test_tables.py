"""Tests for roll table resolution."""

from unittest.mock import patch

import pytest

from su_reference.tables import (
    TableRollError,
    TableRollResult,
    is_flat_table,
    result_for_table,
    roll_on_table,
    table_for_entity,
)

CORE_MECHANIC = {
    "1": "Cascade Failure",
    "2-5": "Failure",
    "6-10": "Tough Choice",
    "11-19": "Success",
    "20": "Nailed It",
    "type": "standard",
}

FLAT = {str(face): f"Result {face}" for face in range(1, 21)}
FLAT["type"] = "flat"


class TestIsFlatTable:
    """Tests for layout detection."""

    def test_flat(self):
        assert is_flat_table(FLAT)

    def test_ranged(self):
        assert not is_flat_table(CORE_MECHANIC)

    def test_type_field_is_not_trusted(self):
        """A table labelled flat but keyed by ranges is still ranged."""
        table = dict(CORE_MECHANIC, type="flat")
        assert not is_flat_table(table)

    def test_nineteen_faces_is_not_flat(self):
        table = {str(face): "x" for face in range(1, 20)}
        assert not is_flat_table(table)


class TestResultForTable:
    """Tests for resolving a roll."""

    @pytest.mark.parametrize(
        "roll,expected",
        [
            (1, "Cascade Failure"),
            (2, "Failure"),
            (5, "Failure"),
            (6, "Tough Choice"),
            (10, "Tough Choice"),
            (11, "Success"),
            (19, "Success"),
            (20, "Nailed It"),
        ],
    )
    def test_range_boundaries(self, roll, expected):
        outcome = result_for_table(CORE_MECHANIC, roll)
        assert outcome.success
        assert outcome.result == expected
        assert outcome.error is None

    @pytest.mark.parametrize("roll", range(1, 21))
    def test_flat_every_face(self, roll):
        assert result_for_table(FLAT, roll).result == f"Result {roll}"

    def test_exact_key_wins_over_range(self):
        table = {"1-20": "Anything", "7": "Lucky Seven"}
        assert result_for_table(table, 7).result == "Lucky Seven"
        assert result_for_table(table, 8).result == "Anything"

    def test_first_matching_range_wins(self):
        table = {"1-10": "Low", "5-15": "Middle", "16-20": "High"}
        assert result_for_table(table, 7).result == "Low"
        assert result_for_table(table, 12).result == "Middle"

    def test_missing_table(self):
        for table in (None, {}):
            outcome = result_for_table(table, 10)
            assert not outcome.success
            assert outcome.error == "Table data is undefined"
            assert outcome.error_kind == TableRollError.MISSING_TABLE

    def test_missing_table_checked_before_roll(self):
        outcome = result_for_table(None, 99)
        assert outcome.error_kind == TableRollError.MISSING_TABLE

    @pytest.mark.parametrize("roll", [0, -1, 21, 100])
    def test_roll_out_of_range(self, roll):
        outcome = result_for_table(CORE_MECHANIC, roll)
        assert not outcome.success
        assert outcome.error == f"Roll must be between 1 and 20, got {roll}"
        assert outcome.error_kind == TableRollError.INVALID_ROLL

    def test_gap_in_ranges(self):
        table = {"1-5": "Low", "10-20": "High", "type": "standard"}
        outcome = result_for_table(table, 7)
        assert not outcome.success
        assert outcome.error == "No result found for roll 7 in standard table"
        assert outcome.error_kind == TableRollError.NO_RESULT

    def test_gap_without_type(self):
        outcome = result_for_table({"1-5": "Low"}, 7)
        assert outcome.error == "No result found for roll 7 in range table"

    def test_empty_value_is_no_result(self):
        table = {"1-10": "", "11-20": "High"}
        assert result_for_table(table, 3).error_kind == TableRollError.NO_RESULT

    def test_non_string_value_is_no_result(self):
        table = {"1-10": 5, "11-20": "High"}
        assert not result_for_table(table, 3).success

    def test_flat_with_empty_face(self):
        table = dict(FLAT, **{"4": ""})
        outcome = result_for_table(table, 4)
        assert outcome.error == "No result found for roll 4 in flat table"

    def test_non_numeric_keys_ignored(self):
        table = {"type": "standard", "name": "Odd", "1-20": "Always"}
        assert result_for_table(table, 13).result == "Always"


class TestTableRollResult:
    """Tests for the result model."""

    def test_ok(self):
        result = TableRollResult.ok("Success")
        assert result.success
        assert result.result == "Success"
        assert result.error_kind is None

    def test_fail(self):
        result = TableRollResult.fail(TableRollError.NO_RESULT, "nothing")
        assert not result.success
        assert result.result is None
        assert result.error == "nothing"

    def test_dump_uses_string_error_kind(self):
        result = TableRollResult.fail(TableRollError.INVALID_ROLL, "bad roll")
        assert result.model_dump(mode="json")["error_kind"] == "invalid_roll"


class TestTableForEntity:
    """Tests for finding an entity's table."""

    def test_table_field(self):
        assert table_for_entity({"name": "Core", "table": CORE_MECHANIC}) is CORE_MECHANIC

    def test_roll_table_field(self):
        assert table_for_entity({"name": "Bay", "rollTable": FLAT}) is FLAT

    def test_no_table(self):
        assert table_for_entity({"name": "Pistol"}) is None
        assert table_for_entity({"name": "Odd", "table": "not a table"}) is None
        assert table_for_entity(None) is None


class TestRollOnTable:
    """Tests for rolling and resolving in one step."""

    def test_given_roll(self):
        roll, outcome = roll_on_table(CORE_MECHANIC, 20)
        assert roll == 20
        assert outcome.result == "Nailed It"

    def test_rolls_d20(self):
        with patch("su_reference.tables.roll_d20", return_value=3):
            roll, outcome = roll_on_table(CORE_MECHANIC)
        assert roll == 3
        assert outcome.result == "Failure"

    def test_random_roll_is_always_valid(self):
        for _ in range(50):
            roll, outcome = roll_on_table(FLAT)
            assert 1 <= roll <= 20
            assert outcome.success
