"""Tests for the shared normalisation helpers."""

import pytest

from catalog.models.normalize import non_empty_or_default, positive_or_default


class TestNonEmptyOrDefault:
    """Tests for non_empty_or_default."""

    @pytest.mark.parametrize("value", ["Espresso", " ", "  \t", "0"])
    def test_keeps_non_empty(self, value: str):
        assert non_empty_or_default(value) == value

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_collapses(self, value: str | None):
        assert non_empty_or_default(value) == ""

    def test_custom_default(self):
        assert non_empty_or_default(None, "n/a") == "n/a"


class TestPositiveOrDefault:
    """Tests for positive_or_default."""

    @pytest.mark.parametrize("value", [1, 0.01, 45.0])
    def test_keeps_positive(self, value: float):
        assert positive_or_default(value) == value

    @pytest.mark.parametrize("value", [0, -1, -0.5, None])
    def test_non_positive_collapses(self, value: float | None):
        assert positive_or_default(value) == 0

    def test_custom_default(self):
        assert positive_or_default(-3, 1) == 1
