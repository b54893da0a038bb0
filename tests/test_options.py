"""Tests for issues.options: render configuration."""

import dataclasses

import pytest

from issues.options import DEFAULT_OPTIONS, Fail, Placeholder, TableOptions


class TestTableOptions:
    """Defaults and validation."""

    def test_defaults(self):
        options = TableOptions()
        assert options.on_missing_field == Placeholder("")
        assert options.float_decimals is None

    def test_default_options_match_constructor_defaults(self):
        assert DEFAULT_OPTIONS == TableOptions()

    def test_placeholder_default_text_is_empty(self):
        assert Placeholder().text == ""

    def test_missing_text_follows_placeholder(self):
        options = TableOptions(on_missing_field=Placeholder("?"))
        assert options.missing_text == "?"

    def test_missing_text_under_fail_is_empty(self):
        assert TableOptions(on_missing_field=Fail()).missing_text == ""

    def test_negative_decimals_rejected(self):
        with pytest.raises(ValueError, match="float_decimals"):
            TableOptions(float_decimals=-1)

    @pytest.mark.parametrize("decimals", [1.5, True, False, "2"])
    def test_non_int_decimals_rejected(self, decimals):
        with pytest.raises(ValueError, match="non-negative int"):
            TableOptions(float_decimals=decimals)

    def test_zero_decimals_allowed(self):
        assert TableOptions(float_decimals=0).float_decimals == 0

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError, match="on_missing_field"):
            TableOptions(on_missing_field="")

    def test_options_are_frozen(self):
        options = TableOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.float_decimals = 2

    def test_policies_compare_by_value(self):
        assert Placeholder("-") == Placeholder("-")
        assert Fail() == Fail()
        assert Placeholder("") != Fail()
