"""
Constants for identifier synthesis.
"""

import re

# Anything outside this class is stripped from generated identifiers
ILLEGAL_CHARACTER_REGEX = re.compile(r"[^0-9a-zA-Z_$]")

# Route and parameter syntax
SEGMENT_SEPARATOR = "/"
PARAM_OPEN = "{"
PARAM_CLOSE = "}"

# Placeholder syntax: ${key} or ${key:default}
PLACEHOLDER_OPEN = "${"
PLACEHOLDER_DEFAULT_SEPARATOR = ":"

# Irregular nouns, singular -> plural
PLURAL_EXCEPTIONS = {
    "person": "people",
    "child": "children",
    "tooth": "teeth",
    "foot": "feet",
    "mouse": "mice",
    "louse": "lice",
    "goose": "geese",
    "man": "men",
    "woman": "women",
    "ox": "oxen",
    "sex": "sexes",
    "move": "moves",
    "zombie": "zombies",
}

SINGULAR_EXCEPTIONS = {v: k for k, v in PLURAL_EXCEPTIONS.items()}

# Words with the same singular and plural form
UNCOUNTABLE_WORDS = frozenset(
    {
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "jeans",
        "police",
        "news",
        "metadata",
    }
)

# Well known media types
MEDIA_TYPE_JSON = "application/json"
MEDIA_TYPE_OCTET_STREAM = "application/octet-stream"
MEDIA_TYPE_TEXT_PLAIN = "text/plain"
MEDIA_TYPE_TEXT_HTML = "text/html"

# First 'v' in the string plus any digits and dots following it
CONTENT_TYPE_VERSION = re.compile(r"[^v]*(v[\d.]*).*", re.IGNORECASE)

# Characters dropped from an unrecognised media subtype
CONTENT_TYPE_PUNCTUATION = " ,.+=-'\"\\|~`#$%^&\n\t"

# Free-text trimming (documentation extracted from API descriptions)
FREE_TEXT_CONTINUATION = re.compile(r"\s+\*\s+")
FREE_TEXT_LEADING_NOISE = ("/", "\n", "*", "-", "\t", " ", "\\")
FREE_TEXT_TRAILING_NOISE = ("/", "\n", " ", ",", "\t", "-", "*")
