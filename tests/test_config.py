"""Tests for ConfigResolver and SelectionConfig."""

import dataclasses
import logging

import pytest

from rowselect.core.capture import ColumnPolicy
from rowselect.core.config import CheckboxPosition, ConfigResolver, SelectionConfig
from rowselect.core.errors import (
    ConfigurationError,
    MissingCollaboratorError,
    RangeError,
)
from rowselect.grid.frame_grid import DataFrameGrid, create_spreadsheet_data


class TestResolveDefaults:
    def test_true_gives_defaults(self, collaborators):
        config = ConfigResolver.resolve(True, collaborators)
        assert config.checkbox_position is CheckboxPosition.REPLACE
        assert config.selectable_rows is None
        assert config.max_simultaneous_selected is None
        assert config.select_hidden_rows is False
        assert config.select_hidden_columns is False
        assert config.is_row_selectable is None
        assert config.initially_selected_rows == ()

    def test_true_without_collaborators(self):
        assert ConfigResolver.resolve(True) == SelectionConfig()

    def test_empty_mapping_matches_true(self, collaborators):
        assert ConfigResolver.resolve({}, collaborators) == ConfigResolver.resolve(
            True, collaborators
        )

    def test_config_is_frozen(self, collaborators):
        config = ConfigResolver.resolve(True, collaborators)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_simultaneous_selected = 3

    def test_fresh_config_per_call(self, collaborators):
        a = ConfigResolver.resolve({"selectableRows": [1]}, collaborators)
        b = ConfigResolver.resolve({"selectableRows": [2]}, collaborators)
        assert a.selectable_rows == (1,)
        assert b.selectable_rows == (2,)


class TestResolveShape:
    @pytest.mark.parametrize("raw", ["yes", None, False, 1, [1, 2]])
    def test_rejects_non_mapping(self, raw, collaborators):
        with pytest.raises(ConfigurationError, match="true or an object"):
            ConfigResolver.resolve(raw, collaborators)

    def test_unknown_keys_warn(self, collaborators, caplog):
        with caplog.at_level(logging.WARNING, logger="rowselect.core.config"):
            ConfigResolver.resolve({"inputPosition": "after"}, collaborators)
        assert "inputPosition" in caplog.text


class TestCheckboxPosition:
    @pytest.mark.parametrize("value,expected", [
        ("before", CheckboxPosition.BEFORE),
        ("after", CheckboxPosition.AFTER),
        ("replace", CheckboxPosition.REPLACE),
    ])
    def test_valid(self, value, expected, collaborators):
        config = ConfigResolver.resolve({"checkboxPosition": value}, collaborators)
        assert config.checkbox_position is expected

    def test_invalid(self, collaborators):
        with pytest.raises(ConfigurationError, match="checkboxPosition"):
            ConfigResolver.resolve({"checkboxPosition": "left"}, collaborators)


class TestSelectableRows:
    def test_ranges_expanded(self, collaborators):
        config = ConfigResolver.resolve(
            {"selectableRows": [[1, 3], 7]}, collaborators
        )
        assert config.selectable_rows == (1, 2, 3, 7)

    def test_duplicates_removed(self, collaborators):
        config = ConfigResolver.resolve(
            {"selectableRows": [[1, 3], 2, 1]}, collaborators
        )
        assert config.selectable_rows == (1, 2, 3)

    def test_empty_list_means_nothing_selectable(self, collaborators):
        config = ConfigResolver.resolve({"selectableRows": []}, collaborators)
        assert config.selectable_rows == ()
        assert not config.is_selectable(0)

    def test_invalid_range(self, collaborators):
        with pytest.raises(RangeError):
            ConfigResolver.resolve({"selectableRows": [[5, 1]]}, collaborators)

    def test_not_a_list(self, collaborators):
        with pytest.raises(ConfigurationError, match="selectableRows"):
            ConfigResolver.resolve({"selectableRows": 3}, collaborators)

    def test_is_selectable(self, collaborators):
        config = ConfigResolver.resolve({"selectableRows": [6]}, collaborators)
        assert config.is_selectable(6)
        assert not config.is_selectable(5)

    def test_selectable_row_set(self, collaborators):
        config = ConfigResolver.resolve(
            {"selectableRows": [[2, 4], 8]}, collaborators
        )
        assert config.selectable_row_set == frozenset({2, 3, 4, 8})
        assert config.selectable_row_set is config.selectable_row_set
        assert [r for r in range(10) if config.is_selectable(r)] == [2, 3, 4, 8]

    def test_selectable_row_set_unrestricted(self, collaborators):
        config = ConfigResolver.resolve(True, collaborators)
        assert config.selectable_row_set is None
        assert config.is_selectable(9)


class TestMultiselect:
    def test_true_is_row_count(self, collaborators):
        config = ConfigResolver.resolve({"multiselect": True}, collaborators)
        assert config.max_simultaneous_selected == 10

    def test_true_on_empty_grid_is_one(self):
        empty = DataFrameGrid(create_spreadsheet_data(0, 3)).collaborators()
        config = ConfigResolver.resolve({"multiselect": True}, empty)
        assert config.max_simultaneous_selected == 1

    def test_false_is_one(self, collaborators):
        config = ConfigResolver.resolve({"multiselect": False}, collaborators)
        assert config.max_simultaneous_selected == 1

    def test_number(self, collaborators):
        config = ConfigResolver.resolve({"multiselect": 3}, collaborators)
        assert config.max_simultaneous_selected == 3

    def test_absent_is_unbounded(self, collaborators):
        config = ConfigResolver.resolve({"checkboxPosition": "after"}, collaborators)
        assert config.unbounded

    def test_zero_rejected(self, collaborators):
        with pytest.raises(ConfigurationError, match="at least 1"):
            ConfigResolver.resolve({"multiselect": 0}, collaborators)

    def test_string_rejected(self, collaborators):
        with pytest.raises(ConfigurationError, match="multiselect"):
            ConfigResolver.resolve({"multiselect": "all"}, collaborators)

    def test_true_needs_row_count(self):
        with pytest.raises(MissingCollaboratorError):
            ConfigResolver.resolve({"multiselect": True})


class TestHiddenPolicies:
    def test_hidden_rows_without_provider(self, grid):
        collabs = grid.collaborators(with_hidden_rows=False)
        with pytest.raises(MissingCollaboratorError) as info:
            ConfigResolver.resolve({"selectHiddenRows": True}, collabs)
        assert info.value.option == "selectHiddenRows"

    def test_hidden_columns_without_provider(self, grid):
        collabs = grid.collaborators(with_hidden_columns=False)
        with pytest.raises(MissingCollaboratorError, match="selectHiddenColumns"):
            ConfigResolver.resolve({"selectHiddenColumns": True}, collabs)

    def test_false_flags_need_no_provider(self, grid):
        collabs = grid.collaborators(with_hidden_rows=False, with_hidden_columns=False)
        config = ConfigResolver.resolve(
            {"selectHiddenRows": False, "selectHiddenColumns": False}, collabs
        )
        assert config.column_policy is ColumnPolicy.INCLUDE_HIDDEN

    def test_non_bool_flag(self, collaborators):
        with pytest.raises(ConfigurationError, match="selectHiddenRows"):
            ConfigResolver.resolve({"selectHiddenRows": "yes"}, collaborators)

    def test_column_policy(self, collaborators):
        on = ConfigResolver.resolve({"selectHiddenColumns": True}, collaborators)
        off = ConfigResolver.resolve({"selectHiddenColumns": False}, collaborators)
        assert on.column_policy is ColumnPolicy.EXCLUDE_HIDDEN
        assert off.column_policy is ColumnPolicy.INCLUDE_HIDDEN


class TestDowngrade:
    def test_downgrades_missing_providers(self, grid):
        collabs = grid.collaborators(with_hidden_rows=False, with_hidden_columns=False)
        raw = {"selectHiddenRows": True, "selectHiddenColumns": True, "multiselect": 2}
        settings = ConfigResolver.downgrade_missing_policies(raw, collabs)
        assert settings == {
            "selectHiddenRows": False,
            "selectHiddenColumns": False,
            "multiselect": 2,
        }
        assert raw["selectHiddenRows"] is True
        config = ConfigResolver.resolve(settings, collabs)
        assert config.max_simultaneous_selected == 2

    def test_keeps_supported_policies(self, collaborators):
        raw = {"selectHiddenColumns": True}
        assert ConfigResolver.downgrade_missing_policies(raw, collaborators) == raw

    def test_non_mapping_passthrough(self, collaborators):
        assert ConfigResolver.downgrade_missing_policies(True, collaborators) is True


class TestOtherFields:
    def test_predicate_must_be_callable(self, collaborators):
        with pytest.raises(ConfigurationError, match="callable"):
            ConfigResolver.resolve({"isRowSelectable": [1, 2]}, collaborators)

    def test_predicate_kept(self, collaborators):
        pred = lambda r: r % 2 == 0  # noqa: E731
        config = ConfigResolver.resolve({"isRowSelectable": pred}, collaborators)
        assert config.is_row_selectable is pred

    def test_initially_selected_rows(self, collaborators):
        config = ConfigResolver.resolve(
            {"initiallySelectedRows": [0, [2, 3]]}, collaborators
        )
        assert config.initially_selected_rows == (0, 2, 3)
