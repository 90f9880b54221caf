"""
Content-type qualifiers.

When one action produces or consumes several media types, each generated
method gets a suffix derived from its media type: getUserAsJson,
getUserV2, getUser_Xml.
"""

import logging
from typing import Optional

from .constants import (
    CONTENT_TYPE_PUNCTUATION,
    CONTENT_TYPE_VERSION,
    MEDIA_TYPE_JSON,
    MEDIA_TYPE_OCTET_STREAM,
    MEDIA_TYPE_TEXT_HTML,
    MEDIA_TYPE_TEXT_PLAIN,
)
from .parsers import capitalize

logger = logging.getLogger("restnaming.naming")

_PUNCTUATION_TABLE = str.maketrans("", "", CONTENT_TYPE_PUNCTUATION)


def qualifier_for(content_type: Optional[str]) -> str:
    """
    Convert a media type into a qualifier usable within a method name.

    Rules, first match wins:
    1. application/json -> "AsJson"
    2. application/octet-stream -> "AsBinary"
    3. text/plain, text/html -> "AsText"
    4. A version token: the first 'v' (any case) and the digits and dots
       after it, capitalized with '.' -> '_'
    5. The subtype, lower-cased, punctuation removed, "json" turned into an
       "AsJson" marker, capitalized and prefixed with '_'
    6. No '/' at all -> ""

    Media-type parameters (";charset=UTF-8") are ignored.

    Examples:
        >>> qualifier_for("application/json")
        "AsJson"

        >>> qualifier_for("application/v2+json")
        "V2"

        >>> qualifier_for("application/vnd.github.v3+json")
        "V"

        >>> qualifier_for("application/xml")
        "_Xml"

        >>> qualifier_for("application/hal+json")
        "_HalAsJson"

    Edge Cases:
        - Empty or None: ""
        - The version scan is not word-aware: "vnd" matches before "v3"
    """
    if not content_type:
        return ""

    media_type = content_type.split(";", 1)[0].strip()

    if media_type == MEDIA_TYPE_JSON:
        return "AsJson"
    if media_type == MEDIA_TYPE_OCTET_STREAM:
        return "AsBinary"
    if media_type in (MEDIA_TYPE_TEXT_PLAIN, MEDIA_TYPE_TEXT_HTML):
        return "AsText"

    version = CONTENT_TYPE_VERSION.search(media_type)
    if version:
        return capitalize(version.group(1)).replace(".", "_")

    separator = media_type.find("/")
    if separator == -1:
        logger.debug(f"No qualifier for content type '{content_type}'")
        return ""

    candidate = media_type[separator + 1 :].lower()
    out = ""
    if "json" in candidate:
        candidate = candidate.replace("json", "")
        out = "AsJson"

    candidate = candidate.translate(_PUNCTUATION_TABLE)
    if candidate.strip():
        out = capitalize(candidate) + out
    return "_" + out
