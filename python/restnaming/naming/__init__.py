"""
Identifier synthesis for generated REST controllers.

Derives method, class, enum-constant and parameter names from route
templates, HTTP verbs and media types.
"""

from .actions import ActionType, action_intent, action_name, reduce_to_resource_and_id, walk_segments
from .content_type import qualifier_for
from .core import pluralize, singularize
from .parsers import extract_uri_params, split_by_character_type_camel_case, split_route
from .placeholders import resolve_template
from .resources import (
    class_resource_name,
    is_uri_param_segment,
    resource_name,
    resource_name_from_uri,
    span_name,
)
from .sanitize import (
    class_name,
    clean_for_doc,
    clean_for_enum_constant,
    clean_for_identifier,
    clean_free_text,
    is_valid_identifier,
    normalize_name,
    parameter_name,
)

__all__ = [
    "ActionType",
    "action_intent",
    "action_name",
    "reduce_to_resource_and_id",
    "walk_segments",
    "qualifier_for",
    "pluralize",
    "singularize",
    "extract_uri_params",
    "split_by_character_type_camel_case",
    "split_route",
    "resolve_template",
    "class_resource_name",
    "is_uri_param_segment",
    "resource_name",
    "resource_name_from_uri",
    "span_name",
    "class_name",
    "clean_for_doc",
    "clean_for_enum_constant",
    "clean_for_identifier",
    "clean_free_text",
    "is_valid_identifier",
    "normalize_name",
    "parameter_name",
]
