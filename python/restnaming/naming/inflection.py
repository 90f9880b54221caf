"""
Pluralization and singularization of English resource nouns.

A small rule-table inflector: irregular and uncountable words are looked up
first, then the first matching suffix rule rewrites the word.
"""

import re

from .constants import PLURAL_EXCEPTIONS, SINGULAR_EXCEPTIONS, UNCOUNTABLE_WORDS

# (pattern, replacement) pairs, most specific first
PLURAL_RULES = [
    (r"(quiz)$", r"\1zes"),
    (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive)$", r"\1s"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"sis$", "ses"),
    (r"([ti])a$", r"\1a"),
    (r"([ti])um$", r"\1a"),
    (r"(buffalo|tomato)$", r"\1oes"),
    (r"(bu)s$", r"\1ses"),
    (r"(alias|status)$", r"\1es"),
    (r"(octop|vir)i$", r"\1i"),
    (r"(octop|vir)us$", r"\1i"),
    (r"^(ax|test)is$", r"\1es"),
    (r"s$", "s"),
    (r"$", "s"),
]

SINGULAR_RULES = [
    (r"(database)s$", r"\1"),
    (r"(quiz)zes$", r"\1"),
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"(alias|status)(es)?$", r"\1"),
    (r"(octop|vir)(us|i)$", r"\1us"),
    (r"^(a)x[ie]s$", r"\1xis"),
    (r"(cris|test)(is|es)$", r"\1is"),
    (r"(shoe)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(bus)(es)?$", r"\1"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(s)eries$", r"\1eries"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"([lr])ves$", r"\1f"),
    (r"(tive)s$", r"\1"),
    (r"(hive)s$", r"\1"),
    (r"([^f])ves$", r"\1fe"),
    (r"(^analy)(sis|ses)$", r"\1sis"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$", r"\1sis"),
    (r"([ti])a$", r"\1um"),
    (r"(n)ews$", r"\1ews"),
    (r"s$", ""),
]

_COMPILED_PLURAL_RULES = [(re.compile(p, re.IGNORECASE), r) for p, r in PLURAL_RULES]
_COMPILED_SINGULAR_RULES = [(re.compile(p, re.IGNORECASE), r) for p, r in SINGULAR_RULES]


def _is_uncountable(word: str) -> bool:
    """The word, or its last camel-case or delimited part, is uncountable ("userMetadata")."""
    lower_word = word.lower()
    for uncountable in UNCOUNTABLE_WORDS:
        if lower_word == uncountable:
            return True
        if not lower_word.endswith(uncountable):
            continue
        head = word[: -len(uncountable)]
        tail = word[-len(uncountable) :]
        if not head[-1].isalnum():
            return True
        if tail[0].isupper() and not head[-1].isupper():
            return True
    return False


def _match_case(source: str, result: str) -> str:
    """Carry the case of the first letter of source over to result."""
    if source[0].isupper():
        return result[0].upper() + result[1:]
    return result


def _apply_rules(word: str, rules) -> str:
    for pattern, replacement in rules:
        if pattern.search(word):
            return pattern.sub(replacement, word, count=1)
    return word


def pluralize(word: str) -> str:
    """
    Convert a singular noun to its plural form (English rules).

    Args:
        word: Singular word

    Returns:
        Plural form of word

    Examples:
        >>> pluralize("user")
        "users"

        >>> pluralize("Category")
        "Categories"

        >>> pluralize("person")
        "people"

    Edge Cases:
        - Already plural: "users" -> "users" (no change)
        - Uncountable: "information" -> "information"
        - Empty string is returned unchanged
    """
    if not word:
        return word

    lower_word = word.lower()

    if lower_word in PLURAL_EXCEPTIONS:
        return _match_case(word, PLURAL_EXCEPTIONS[lower_word])

    # Irregular plurals that are already plural
    if lower_word in SINGULAR_EXCEPTIONS:
        return word

    if _is_uncountable(word):
        return word

    return _apply_rules(word, _COMPILED_PLURAL_RULES)


def singularize(word: str) -> str:
    """
    Convert a plural noun to its singular form (English rules).

    This is the raw inflector: it strips a trailing 's' from any word it has
    no better rule for, so "address" comes back as "addres". Callers that
    name things should go through ``restnaming.naming.core.singularize``.

    Args:
        word: Plural word

    Returns:
        Singular form of word

    Examples:
        >>> singularize("users")
        "user"

        >>> singularize("Categories")
        "Category"

        >>> singularize("statuses")
        "status"

        >>> singularize("children")
        "child"

    Edge Cases:
        - Already singular: "user" -> "user"
        - Uncountable: "series" -> "series"
        - Double 's': "address" -> "addres"
    """
    if not word:
        return word

    lower_word = word.lower()

    if lower_word in SINGULAR_EXCEPTIONS:
        return _match_case(word, SINGULAR_EXCEPTIONS[lower_word])

    if lower_word in PLURAL_EXCEPTIONS:
        return word

    if _is_uncountable(word):
        return word

    return _apply_rules(word, _COMPILED_SINGULAR_RULES)
