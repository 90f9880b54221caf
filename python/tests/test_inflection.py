"""
Tests for the generic inflector and the naming singularizer.
"""

import pytest

from restnaming.naming import inflection
from restnaming.naming import pluralize, singularize


class TestPluralize:
    """Test English pluralization rules."""

    def test_regular_plural(self):
        """Regular pluralization (add 's')."""
        assert pluralize("user") == "users"
        assert pluralize("service") == "services"
        assert pluralize("table") == "tables"

    def test_ends_in_s(self):
        """Words ending in 's' add 'es'."""
        assert pluralize("status") == "statuses"
        assert pluralize("class") == "classes"
        assert pluralize("address") == "addresses"

    def test_ends_in_sh_ch_x(self):
        """Words ending in sh/ch/x add 'es'."""
        assert pluralize("box") == "boxes"
        assert pluralize("match") == "matches"
        assert pluralize("dish") == "dishes"

    def test_ends_in_y(self):
        """Words ending in 'y' change to 'ies'."""
        assert pluralize("category") == "categories"
        assert pluralize("entity") == "entities"
        # But not if preceded by vowel
        assert pluralize("key") == "keys"
        assert pluralize("day") == "days"

    def test_irregular_plurals(self):
        """Irregular plurals keep the case of the first letter."""
        assert pluralize("child") == "children"
        assert pluralize("person") == "people"
        assert pluralize("Person") == "People"
        assert pluralize("mouse") == "mice"

    def test_already_plural(self):
        """Already plural returns unchanged."""
        assert pluralize("users") == "users"
        assert pluralize("children") == "children"

    def test_uncountable(self):
        """Uncountable nouns are unchanged."""
        assert pluralize("information") == "information"
        assert pluralize("equipment") == "equipment"

    def test_uncountable_matches_whole_words(self):
        """An uncountable word inside a longer word does not count."""
        assert pluralize("price") == "prices"
        assert singularize("prices") == "price"
        assert pluralize("Price") == "Prices"

    def test_uncountable_compound(self):
        """The last part of a compound name decides."""
        assert pluralize("userMetadata") == "userMetadata"
        assert pluralize("user_news") == "user_news"

    def test_empty(self):
        assert pluralize("") == ""
        assert pluralize(None) is None


class TestRawSingularize:
    """Test the rule-table inflector on its own."""

    def test_regular_singular(self):
        """Regular singularization (remove 's')."""
        assert inflection.singularize("users") == "user"
        assert inflection.singularize("services") == "service"
        assert inflection.singularize("tables") == "table"

    def test_ends_in_es(self):
        """Words ending in 'es'."""
        assert inflection.singularize("statuses") == "status"
        assert inflection.singularize("classes") == "class"
        assert inflection.singularize("boxes") == "box"

    def test_ends_in_ies(self):
        """Words ending in 'ies' change to 'y'."""
        assert inflection.singularize("categories") == "category"
        assert inflection.singularize("Entities") == "Entity"

    def test_irregular_singulars(self):
        """Irregular singulars."""
        assert inflection.singularize("children") == "child"
        assert inflection.singularize("people") == "person"
        assert inflection.singularize("women") == "woman"
        assert inflection.singularize("mice") == "mouse"

    def test_double_s_is_truncated(self):
        """The raw inflector treats a trailing 's' of 'ss' as a plural marker."""
        assert inflection.singularize("address") == "addres"
        assert inflection.singularize("class") == "clas"

    def test_false_plural(self):
        """Don't singularize words that only look plural."""
        assert inflection.singularize("status") == "status"
        assert inflection.singularize("series") == "series"

    def test_keeps_case(self):
        assert inflection.singularize("Users") == "User"
        assert inflection.singularize("OrderLines") == "OrderLine"


class TestSingularize:
    """Test the singularizer used by the naming rules."""

    @pytest.mark.parametrize("word", ["address", "class", "business", "access", "Address", "Business"])
    def test_double_s_words_are_kept(self, word):
        assert singularize(word) == word

    def test_double_s_plurals_still_singularize(self):
        assert singularize("addresses") == "address"
        assert singularize("Classes") == "Class"

    def test_regular_words(self):
        assert singularize("users") == "user"
        assert singularize("Categories") == "Category"

    def test_already_singular(self):
        assert singularize("user") == "user"
        assert singularize("{id}") == "{id}"

    def test_empty(self):
        assert singularize("") == ""
        assert singularize(None) is None
