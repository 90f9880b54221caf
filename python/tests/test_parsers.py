"""
Tests for route parsing and string helpers.
"""

from restnaming.naming import extract_uri_params, split_by_character_type_camel_case, split_route
from restnaming.naming.parsers import (
    capitalize,
    difference,
    is_bare_param,
    is_param_segment,
    uncapitalize,
)


class TestSplitRoute:
    """Test splitting routes into segments."""

    def test_leading_separator_kept(self):
        assert split_route("/users/{id}") == ["", "users", "{id}"]

    def test_trailing_separators_dropped(self):
        assert split_route("/users/") == ["", "users"]
        assert split_route("users//") == ["users"]

    def test_inner_empty_segment_kept(self):
        assert split_route("/a//b") == ["", "a", "", "b"]

    def test_empty(self):
        assert split_route("") == []
        assert split_route(None) == []
        assert split_route("///") == []


class TestParamSegments:
    """Test URI parameter detection."""

    def test_param_segment(self):
        assert is_param_segment("{id}")
        assert is_param_segment("v{version}.json")
        assert not is_param_segment("users")
        assert not is_param_segment("{id")

    def test_bare_param(self):
        assert is_bare_param("{id}")
        assert not is_bare_param("{id}.json")

    def test_extract_uri_params(self):
        assert extract_uri_params("/users/{userId}/orders/{orderId}") == ["userId", "orderId"]
        assert extract_uri_params("/files/{name}.{ext}") == ["name"]

    def test_extract_skips_unbalanced(self):
        assert extract_uri_params("/a/}x{/b") == []

    def test_extract_blank(self):
        assert extract_uri_params("") == []
        assert extract_uri_params(None) == []
        assert extract_uri_params("   ") == []


class TestStringHelpers:
    """Test capitalize, uncapitalize and difference."""

    def test_capitalize_first_letter_only(self):
        assert capitalize("userId") == "UserId"
        assert capitalize("URL") == "URL"
        assert capitalize("") == ""

    def test_uncapitalize_first_letter_only(self):
        assert uncapitalize("UserId") == "userId"
        assert uncapitalize("URL") == "uRL"
        assert uncapitalize(None) is None

    def test_difference(self):
        assert difference("user", "userId") == "Id"
        assert difference("users", "userId") == "Id"
        assert difference("users", "id") == "id"

    def test_difference_edge_cases(self):
        assert difference("abc", "abc") == ""
        assert difference("userId", "user") == ""
        assert difference("", "id") == "id"


class TestSplitByCharacterType:
    """Test camel-case character-type splitting."""

    def test_camel_case(self):
        assert split_by_character_type_camel_case("fooBar") == ["foo", "Bar"]
        assert split_by_character_type_camel_case("foo200Bar") == ["foo", "200", "Bar"]

    def test_acronyms(self):
        assert split_by_character_type_camel_case("ASFRules") == ["ASF", "Rules"]
        assert split_by_character_type_camel_case("HTTPServer") == ["HTTP", "Server"]

    def test_punctuation_and_spaces(self):
        assert split_by_character_type_camel_case("ab   de fg") == ["ab", "   ", "de", " ", "fg"]
        assert split_by_character_type_camel_case("ab:cd:ef") == ["ab", ":", "cd", ":", "ef"]

    def test_single_upper_then_lower(self):
        assert split_by_character_type_camel_case("Number") == ["Number"]

    def test_empty(self):
        assert split_by_character_type_camel_case("") == []
