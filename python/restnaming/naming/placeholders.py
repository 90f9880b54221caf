"""
Property placeholder resolution.

Route prefixes and base URIs in generator settings may reference properties,
e.g. "${api.base:/api}/v1". Each placeholder is replaced by the property
value, or by the default after ':' when the property is not set.
"""

import logging
import os
from typing import Mapping, Optional

from .constants import PARAM_CLOSE, PARAM_OPEN, PLACEHOLDER_DEFAULT_SEPARATOR, PLACEHOLDER_OPEN

logger = logging.getLogger("restnaming.naming")


def _find_placeholder_end(text: str, start: int) -> int:
    """Index of the '}' closing the placeholder opened at start, or -1."""
    body = start + len(PLACEHOLDER_OPEN)
    end = text.find(PARAM_CLOSE, body)
    nested = text.find(PARAM_OPEN, body)
    # One level of nesting: "${key:{default}}"
    if nested != -1 and end > nested:
        end = text.find(PARAM_CLOSE, end + 1)
    return end


def resolve_template(input_string: Optional[str], lookup: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Replace ${key} and ${key:default} placeholders with property values.

    Args:
        input_string: Text containing placeholders; surrounding whitespace is trimmed
        lookup: Property source (default: os.environ)

    Returns:
        Resolved text; blank input is returned unchanged

    Examples:
        >>> resolve_template("${greeting:hello}", {})
        "hello"

        >>> resolve_template("${greeting:hello}", {"greeting": "hi"})
        "hi"

        >>> resolve_template("${base:/api}/users", {})
        "/api/users"

    Edge Cases:
        - No default and key missing: the key itself is used ("${name}" -> "name")
        - The last ':' in the placeholder splits key from default
        - Unclosed "${": the rest of the input is kept verbatim
    """
    if not input_string or input_string.isspace():
        return input_string
    if lookup is None:
        lookup = os.environ

    text = input_string.strip()
    parts = []
    index = 0

    while True:
        start = text.find(PLACEHOLDER_OPEN, index)
        if start == -1:
            break
        end = _find_placeholder_end(text, start)
        if end == -1:
            logger.debug(f"Unclosed placeholder at {start} in '{text}'")
            break

        value = text[start + len(PLACEHOLDER_OPEN) : end]
        separator = text.rfind(PLACEHOLDER_DEFAULT_SEPARATOR, 0, end + 1)
        if separator > start:
            split_at = value.rfind(PLACEHOLDER_DEFAULT_SEPARATOR)
            key, default = value[:split_at], value[split_at + 1 :]
        else:
            key = default = value

        parts.append(text[index:start])
        parts.append(lookup.get(key, default))
        index = end + 1

    parts.append(text[index:])
    return "".join(parts)
