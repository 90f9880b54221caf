"""
Route parsing and low-level string helpers shared by the naming modules.
"""

import unicodedata

from .constants import PARAM_CLOSE, PARAM_OPEN, SEGMENT_SEPARATOR


def split_route(route: str) -> list[str]:
    """
    Split a route template into its '/'-delimited segments.

    A leading '/' yields a leading empty segment and trailing empty segments
    are dropped, so positional lookbacks see the same layout for "/a/b" and
    "/a/b/".

    Examples:
        >>> split_route("/users/{id}")
        ["", "users", "{id}"]

        >>> split_route("users/")
        ["users"]

    Edge Cases:
        - Empty or None: [] (empty list)
        - Only separators: "///" -> []
    """
    if not route:
        return []

    segments = route.split(SEGMENT_SEPARATOR)
    while segments and not segments[-1]:
        segments.pop()
    return segments


def is_param_segment(segment: str) -> bool:
    """True if the segment carries a URI parameter, e.g. "{id}" or "v{version}.json"."""
    return PARAM_OPEN in segment and PARAM_CLOSE in segment


def is_bare_param(segment: str) -> bool:
    """True if the segment is nothing but a parameter, e.g. "{userId}"."""
    return segment.startswith(PARAM_OPEN) and segment.endswith(PARAM_CLOSE)


def extract_uri_params(route: str) -> list[str]:
    """
    Extract the URI parameter names from a route template.

    Examples:
        >>> extract_uri_params("/users/{userId}/orders/{orderId}")
        ["userId", "orderId"]

    Edge Cases:
        - Blank route: []
        - Unbalanced segment "}x{" is skipped
    """
    params = []
    if not route or not route.strip():
        return params

    for part in route.split(SEGMENT_SEPARATOR):
        start = part.find(PARAM_OPEN)
        end = part.find(PARAM_CLOSE)
        if start != -1 and end != -1 and start < end:
            params.append(part[start + 1 : end])
    return params


def capitalize(text: str) -> str:
    """Upper-case the first character only ("userId" -> "UserId")."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def uncapitalize(text: str) -> str:
    """Lower-case the first character only ("UserId" -> "userId")."""
    if not text:
        return text
    return text[0].lower() + text[1:]


def difference(base: str, other: str) -> str:
    """
    Return the part of ``other`` after its common prefix with ``base``.

    Examples:
        >>> difference("user", "userId")
        "Id"

        >>> difference("users", "id")
        "id"

    Edge Cases:
        - Identical strings: ""
        - other is a prefix of base: ""
    """
    if base == other:
        return ""
    index = 0
    limit = min(len(base), len(other))
    while index < limit and base[index] == other[index]:
        index += 1
    return other[index:]


def split_by_character_type_camel_case(text: str) -> list[str]:
    """
    Split text into groups of characters of the same Unicode category.

    An upper-case letter followed by lower-case letters starts a new group,
    so acronyms stay together and camel-case humps split apart.

    Examples:
        >>> split_by_character_type_camel_case("fooBar")
        ["foo", "Bar"]

        >>> split_by_character_type_camel_case("ASFRules")
        ["ASF", "Rules"]

        >>> split_by_character_type_camel_case("foo200Bar")
        ["foo", "200", "Bar"]

        >>> split_by_character_type_camel_case("ab   de fg")
        ["ab", "   ", "de", " ", "fg"]

    Edge Cases:
        - Empty string: []
    """
    if not text:
        return []

    groups = []
    token_start = 0
    current_type = unicodedata.category(text[0])

    for pos in range(1, len(text)):
        char_type = unicodedata.category(text[pos])
        if char_type == current_type:
            continue
        if char_type == "Ll" and current_type == "Lu":
            # The last upper-case letter belongs to the word that follows
            new_token_start = pos - 1
            if new_token_start != token_start:
                groups.append(text[token_start:new_token_start])
                token_start = new_token_start
        else:
            groups.append(text[token_start:pos])
            token_start = pos
        current_type = char_type

    groups.append(text[token_start:])
    return groups
