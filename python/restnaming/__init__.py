"""
restnaming - identifier synthesis for REST code generators.

Turns route templates, HTTP verbs and media types into method, class,
enum-constant and parameter names for generated controllers and clients.
"""

__version__ = "0.1.0"

from .config import NamingConfig, NamingConfigError, get_default_config, load_naming_config, set_default_config
from .naming import (
    ActionType,
    action_name,
    class_name,
    class_resource_name,
    clean_for_doc,
    clean_for_enum_constant,
    clean_for_identifier,
    clean_free_text,
    extract_uri_params,
    is_uri_param_segment,
    is_valid_identifier,
    parameter_name,
    pluralize,
    qualifier_for,
    resolve_template,
    resource_name,
    resource_name_from_uri,
    singularize,
    span_name,
)

__all__ = [
    "NamingConfig",
    "NamingConfigError",
    "get_default_config",
    "load_naming_config",
    "set_default_config",
    "ActionType",
    "action_name",
    "class_name",
    "class_resource_name",
    "clean_for_doc",
    "clean_for_enum_constant",
    "clean_for_identifier",
    "clean_free_text",
    "extract_uri_params",
    "is_uri_param_segment",
    "is_valid_identifier",
    "parameter_name",
    "pluralize",
    "qualifier_for",
    "resolve_template",
    "resource_name",
    "resource_name_from_uri",
    "singularize",
    "span_name",
]
