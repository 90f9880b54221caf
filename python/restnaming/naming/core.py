"""
Singularization used by the naming rules.
"""

import logging
from typing import Optional

from . import inflection

logger = logging.getLogger("restnaming.naming")


def singularize(word: Optional[str]) -> Optional[str]:
    """
    Singularize a resource name.

    Delegates to the generic inflector, except that a word ending in "ss"
    which the inflector would only lose its last letter on is kept as-is.

    Examples:
        >>> singularize("users")
        "user"

        >>> singularize("addresses")
        "address"

        >>> singularize("address")
        "address"

        >>> singularize("Business")
        "Business"

    Edge Cases:
        - Empty or None: returned unchanged
        - Already singular: unchanged
    """
    if not word:
        return word

    result = inflection.singularize(word)
    if word.lower().endswith("ss") and result == word[:-1]:
        logger.debug(f"Kept '{word}' (inflector suggested '{result}')")
        return word
    return result


def pluralize(word: Optional[str]) -> Optional[str]:
    """Pluralize a resource name ("category" -> "categories")."""
    if not word:
        return word
    return inflection.pluralize(word)
