"""
Tests for naming converters — snake and kebab forms.
"""

import pytest

from railshadow.core.services.naming import to_kebab_case, to_snake_case


class TestToSnakeCase:
    @pytest.mark.parametrize("name, expected", [
        ("FilterChip", "filter_chip"),
        ("filterChip", "filter_chip"),
        ("Card2Header", "card2_header"),
        ("User", "user"),
    ])
    def test_conversion(self, name, expected):
        assert to_snake_case(name) == expected

    def test_idempotent(self):
        assert to_snake_case("filter_chip") == "filter_chip"
        assert to_snake_case(to_snake_case("FilterChip")) == "filter_chip"

    def test_no_leading_separator(self):
        assert not to_snake_case("Avatar").startswith("_")
        assert to_snake_case("_private") == "private"

    def test_empty(self):
        assert to_snake_case("") == ""


class TestToKebabCase:
    @pytest.mark.parametrize("name, expected", [
        ("FilterChip", "filter-chip"),
        ("navBar", "nav-bar"),
        ("Step3Form", "step3-form"),
    ])
    def test_conversion(self, name, expected):
        assert to_kebab_case(name) == expected

    def test_idempotent(self):
        assert to_kebab_case("filter-chip") == "filter-chip"
        assert to_kebab_case(to_kebab_case("FilterChip")) == "filter-chip"

    def test_no_leading_separator(self):
        assert not to_kebab_case("Avatar").startswith("-")
