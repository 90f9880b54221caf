"""
Identifier sanitization.

Turns arbitrary text (URL segments, schema titles, enum values, header
names) into strings that are legal identifiers in the generated code, and
trims documentation text pulled out of API descriptions.
"""

from typing import Optional

from ..config import NamingConfig, resolve_config
from .constants import (
    FREE_TEXT_CONTINUATION,
    FREE_TEXT_LEADING_NOISE,
    FREE_TEXT_TRAILING_NOISE,
    ILLEGAL_CHARACTER_REGEX,
)
from .parsers import capitalize, split_by_character_type_camel_case, uncapitalize


def _has_text(text: Optional[str]) -> bool:
    return bool(text) and not text.isspace()


def _is_identifier_char(c: str) -> bool:
    return c.isalnum() or c in "_$"


def _capitalize_trailing_words(name: str, delimiters: tuple[str, ...]) -> str:
    """
    Upper-case every character that follows a delimiter, then drop the delimiters.

    The first character keeps its case: "user-name" -> "userName",
    "Order_line" -> "OrderLine". All-caps text is folded to lower case first,
    so "X-API-KEY" -> "XApiKey" and "USERS" -> "Users".
    """
    all_upper = name.isupper()
    if not all_upper and not any(d in name for d in delimiters):
        return name

    chars = list(name[0] + name[1:].lower()) if all_upper else list(name)
    for i in range(1, len(chars)):
        if chars[i - 1] in delimiters:
            chars[i] = chars[i].upper()
    return "".join(c for c in chars if c not in delimiters)


def normalize_name(
    name: str,
    *,
    config: Optional[NamingConfig] = None,
    prefix_leading_digit: Optional[bool] = None,
) -> str:
    """
    Normalize word boundaries and strip characters illegal in an identifier.

    Args:
        name: Raw text, assumed non-blank
        config: Naming config (default: process-wide default)
        prefix_leading_digit: Override config.prefix_leading_digit

    Returns:
        Normalized identifier text, possibly empty
    """
    config = resolve_config(config)
    if prefix_leading_digit is None:
        prefix_leading_digit = config.prefix_leading_digit

    out = _capitalize_trailing_words(name, config.word_delimiters)
    out = ILLEGAL_CHARACTER_REGEX.sub("", out)
    if prefix_leading_digit and out and out[0].isdigit():
        out = "_" + out
    return out


def clean_for_identifier(raw: Optional[str], *, config: Optional[NamingConfig] = None) -> Optional[str]:
    """
    Clean a string so that it can be used as an identifier.

    Args:
        raw: The string to clean
        config: Naming config (default: process-wide default)

    Returns:
        Cleaned identifier text; blank input is returned unchanged

    Examples:
        >>> clean_for_identifier("user-name")
        "userName"

        >>> clean_for_identifier("first name")
        "firstName"

        >>> clean_for_identifier("2fa")
        "_2fa"

    Edge Cases:
        - Idempotent: cleaning twice gives the same result as once
        - Only illegal characters: "..." -> ""
    """
    if not _has_text(raw):
        return raw
    return normalize_name(raw, config=config)


def clean_for_enum_constant(raw: Optional[str], *, config: Optional[NamingConfig] = None) -> str:
    """
    Clean a string so that it can be used as an enum constant.

    The text is split into camel-case word groups; groups made only of
    illegal characters are dropped and the rest are joined with '_' and
    upper-cased.

    Examples:
        >>> clean_for_enum_constant("inProgress")
        "IN_PROGRESS"

        >>> clean_for_enum_constant("application/json")
        "APPLICATION_JSON"

        >>> clean_for_enum_constant("123abc")
        "_123_ABC"

    Edge Cases:
        - Empty, None or nothing usable: "_DEFAULT_" (config.enum_default)
        - Leading digit: prefixed with '_'
    """
    config = resolve_config(config)

    groups = []
    for group in split_by_character_type_camel_case(raw or ""):
        if not ILLEGAL_CHARACTER_REGEX.sub("_", group).strip("_"):
            continue
        # upper() can expand a letter into combining marks
        group = "".join(c for c in group.upper() if _is_identifier_char(c))
        if group:
            groups.append(group)

    enum_name = "_".join(groups)
    if not enum_name:
        return config.enum_default
    if enum_name[0].isdigit():
        enum_name = "_" + enum_name
    return enum_name


def clean_free_text(raw: Optional[str]) -> Optional[str]:
    """
    Trim comment noise from human-readable text.

    Leading slashes, asterisks, dashes, whitespace and backslashes go, as do
    trailing slashes, asterisks, dashes, whitespace and commas. Block-comment
    continuation markers (" * ") collapse to a single space.

    Examples:
        >>> clean_free_text("/** Returns a user\\n * by id */")
        "Returns a user by id"
    """
    if not _has_text(raw):
        return raw

    output = FREE_TEXT_CONTINUATION.sub(" ", raw)
    while output and output[0] in FREE_TEXT_LEADING_NOISE:
        output = output[1:]
    while output and output[-1] in FREE_TEXT_TRAILING_NOISE:
        output = output[:-1]
    return output


def clean_for_doc(raw: Optional[str]) -> Optional[str]:
    """Clean a string for use within generated documentation."""
    return clean_free_text(raw)


def is_valid_identifier(text: Optional[str]) -> bool:
    """
    Check that text is usable as an identifier.

    Non-empty; starts with a letter, '_' or '$'; continues with letters,
    digits, '_' or '$'.
    """
    if not text:
        return False
    if not (text[0].isalpha() or text[0] in "_$"):
        return False
    return all(_is_identifier_char(c) for c in text[1:])


def class_name(raw: Optional[str], *, config: Optional[NamingConfig] = None) -> Optional[str]:
    """Convert a name into a class name: "order-line" -> "OrderLine"."""
    return capitalize(clean_for_identifier(raw, config=config))


def parameter_name(raw: Optional[str], *, config: Optional[NamingConfig] = None) -> Optional[str]:
    """Convert a query parameter or header name into a parameter name: "X-Request-Id" -> "xRequestId"."""
    return uncapitalize(clean_for_identifier(raw, config=config))
