"""
Resource names inferred from route templates.

Used to name the classes, interfaces and model types generated for each
resource: "/accounts/{accountId}/addresses" -> "Address" or, with a deeper
span, "AccountAddress".
"""

import re
from typing import Optional, Union

from ..config import NamingConfig, resolve_config
from .constants import SEGMENT_SEPARATOR
from .core import singularize as singularize_word
from .parsers import capitalize, is_bare_param, split_route, uncapitalize
from .sanitize import clean_for_identifier, clean_free_text


def resource_name(
    segment: Optional[str],
    singularize: bool = False,
    *,
    config: Optional[NamingConfig] = None,
) -> Optional[str]:
    """
    Infer a resource name from one URL segment.

    Args:
        segment: A single relative URL segment, e.g. "order-lines"
        singularize: Whether to singularize the name
        config: Naming config (default: process-wide default)

    Returns:
        Capitalized identifier, or None for a blank segment

    Examples:
        >>> resource_name("users")
        "Users"

        >>> resource_name("order-lines", singularize=True)
        "OrderLine"
    """
    if not segment or segment.isspace():
        return None

    name = capitalize(segment)
    if singularize:
        name = singularize_word(name)
    return capitalize(clean_for_identifier(name, config=config))


def resource_name_from_uri(
    relative_uri: Optional[str],
    singularize: bool = False,
    *,
    config: Optional[NamingConfig] = None,
) -> Optional[str]:
    """
    Infer a resource name from the last segment of a relative URI.

    Examples:
        >>> resource_name_from_uri("/users")
        "Users"

    Edge Cases:
        - No '/' in the URI: None
        - Trailing '/': None (nothing after the last separator)
    """
    if not relative_uri or relative_uri.isspace() or SEGMENT_SEPARATOR not in relative_uri:
        return None
    last = relative_uri[relative_uri.rindex(SEGMENT_SEPARATOR) + 1 :]
    return resource_name(last, singularize, config=config)


def span_name(
    route: Optional[str],
    singularize: bool = False,
    depth: int = 0,
    top_level_skip: int = 0,
    reverse_order: bool = False,
    *,
    config: Optional[NamingConfig] = None,
) -> str:
    """
    Build a compound name from several segments of a full route.

    Segments are read from the last one back toward the API root; segments
    at index top_level_skip or lower (counting the empty segment before a
    leading '/' as index 0) are never used. A negative top_level_skip
    uses every segment.

    Args:
        route: Full route, e.g. "/api/accounts/{id}/addresses"
        singularize: Singularize each segment name
        depth: Maximum number of segment names to use (0 = no limit)
        top_level_skip: Index of the last root segment to leave out
        reverse_order: Append names instead of prepending them

    Returns:
        Compound name, "" if nothing usable

    Examples:
        >>> span_name("/api/accounts/addresses", top_level_skip=1)
        "AccountsAddresses"

        >>> span_name("/api/accounts/addresses", depth=1, singularize=True)
        "Address"

        >>> span_name("/api/accounts/addresses", top_level_skip=1, reverse_order=True)
        "AddressesAccounts"
    """
    names = []
    segments = split_route(route)
    collected = 0

    for index in range(len(segments) - 1, max(top_level_skip, -1), -1):
        segment = segments[index]
        if segment and not segment.isspace():
            name = resource_name(segment, singularize, config=config)
            if reverse_order:
                names.append(name)
            else:
                names.insert(0, name)
            collected += 1
        if depth > 0 and collected >= depth:
            break

    return "".join(names)


def is_uri_param_segment(segment: Optional[str]) -> bool:
    """
    Check whether a relative URL is a URI parameter such as "{userId}".

    Comment noise and surrounding whitespace are ignored: " /{id} " counts.
    """
    if segment is None:
        return False
    cleaned = clean_free_text(segment.lower())
    return bool(cleaned) and is_bare_param(cleaned)


def class_resource_name(
    name_or_class: Union[str, type],
    *,
    config: Optional[NamingConfig] = None,
) -> str:
    """
    Convert a class (or class name) into its REST resource name.

    Implementation suffixes are stripped repeatedly, then the result is
    uncapitalized.

    Examples:
        >>> class_resource_name("MonitorServiceImpl")
        "monitor"

        >>> class_resource_name("UserController")
        "user"

    Edge Cases:
        - A name that is only a suffix is kept: "Service" -> "service"
    """
    config = resolve_config(config)
    name = name_or_class if isinstance(name_or_class, str) else name_or_class.__name__

    suffixes = "|".join(re.escape(s) for s in config.class_suffixes)
    pattern = re.compile(rf"^(.+)({suffixes})$", re.IGNORECASE)
    match = pattern.match(name)
    while match:
        name = match.group(1)
        match = pattern.match(name)
    return uncapitalize(name)
