"""
Tests for the shared text helpers.
"""

import pytest

from recipebook.formatting import (
    escape_markdown,
    ingredient_line,
    ingredients_frame,
    rating_selector_glyphs,
    rating_stars,
)
from recipebook.models import Ingredient


class TestRatingGlyphs:
    """Test cases for star rendering."""

    @pytest.mark.parametrize("rating,expected", [(1, "★"), (4, "★★★★"), (5, "★★★★★")])
    def test_rating_stars(self, rating, expected):
        assert rating_stars(rating) == expected

    def test_selector_glyphs(self):
        assert rating_selector_glyphs(3) == ["★", "★", "★", "☆", "☆"]
        assert rating_selector_glyphs(5) == ["★"] * 5
        assert rating_selector_glyphs(1) == ["★", "☆", "☆", "☆", "☆"]


class TestIngredients:
    """Test cases for ingredient rendering."""

    def test_ingredient_line(self):
        assert ingredient_line(Ingredient(name="Cocoa Powder", amount="1/2 cup")) == "- 1/2 cup Cocoa Powder"

    def test_ingredients_frame_keeps_order(self):
        frame = ingredients_frame([
            Ingredient(name="Flour", amount="2 cups"),
            Ingredient(name="Cocoa Powder", amount="1/2 cup"),
        ])
        assert list(frame.columns) == ["Amount", "Ingredient"]
        assert frame["Ingredient"].tolist() == ["Flour", "Cocoa Powder"]
        assert frame["Amount"].tolist() == ["2 cups", "1/2 cup"]

    def test_ingredients_frame_empty(self):
        frame = ingredients_frame([])
        assert frame.empty
        assert list(frame.columns) == ["Amount", "Ingredient"]


class TestEscapeMarkdown:
    """Test cases for escaping user text embedded in markdown."""

    @pytest.mark.parametrize("raw,expected", [
        ("*Tea*", r"\*Tea\*"),
        ("_x_", r"\_x\_"),
        ("`code`", r"\`code\`"),
        ("<b>x</b>", r"\<b\>x\</b\>"),
        ("# Title", r"\# Title"),
        ("a\\b", "a\\\\b"),
        ("$5", r"\$5"),
    ])
    def test_special_characters_escaped(self, raw, expected):
        assert escape_markdown(raw) == expected

    def test_plain_text_unchanged(self):
        assert escape_markdown("Chocolate Cake") == "Chocolate Cake"
        assert escape_markdown("Main Course") == "Main Course"
