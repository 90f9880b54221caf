"""
Action (method) names inferred from routes and HTTP verbs.

Each HTTP method on a resource becomes one method on the generated
controller. Its name is the REST intent of the verb followed by the last
one or two meaningful resource tokens of the route:

    GET    /users              -> getUsers
    GET    /users/{id}         -> getUserById
    POST   /users              -> createUser
    PUT    /users/{id}         -> updateUserById
    DELETE /users/{id}/avatar  -> deleteUserAvatar
"""

import logging
import re
from enum import Enum
from typing import Optional, Union

from ..config import NamingConfig, resolve_config
from .constants import ILLEGAL_CHARACTER_REGEX, PARAM_OPEN, SEGMENT_SEPARATOR
from .core import singularize
from .parsers import capitalize, difference, is_bare_param, is_param_segment, split_route
from .sanitize import clean_for_identifier

logger = logging.getLogger("restnaming.naming")

_PARAM_BRACES = re.compile(r"[{}]")


class ActionType(Enum):
    """HTTP verbs an action can be bound to."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    OTHER = "OTHER"  # Anything not listed above

    @classmethod
    def parse(cls, value: Union["ActionType", str, None]) -> "ActionType":
        """Map a verb (any case) to an ActionType; unknown or blank -> OTHER."""
        if isinstance(value, ActionType):
            return value
        if not value:
            return cls.OTHER
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.OTHER


def action_intent(action_type: Union[ActionType, str], is_id_in_path: bool) -> str:
    """
    Convert an HTTP verb into a method-name prefix following REST conventions.

    A POST onto an identified resource (last segment is a parameter) reads as
    an update rather than a create.

    Examples:
        >>> action_intent(ActionType.POST, is_id_in_path=False)
        "create"

        >>> action_intent(ActionType.POST, is_id_in_path=True)
        "update"
    """
    action_type = ActionType.parse(action_type)

    if action_type is ActionType.DELETE:
        return "delete"
    if action_type is ActionType.GET:
        return "get"
    if action_type is ActionType.POST and not is_id_in_path:
        return "create"
    if action_type in (ActionType.POST, ActionType.PUT):
        return "update"
    if action_type is ActionType.PATCH:
        return "modify"
    return "do"


def reduce_to_resource_and_id(route: str) -> str:
    """
    Shorten a route to its last two segments: "/a/b/{id}" -> "/b/{id}".

    Routes with fewer than two segments are returned unchanged.
    """
    segments = split_route(route)
    if len(segments) < 2:
        return route
    return SEGMENT_SEPARATOR + segments[-2] + SEGMENT_SEPARATOR + segments[-1]


def _should_reduce(controller_route: Optional[str], route: str) -> bool:
    """Nested action routes are shortened if enough literal segments remain."""
    if controller_route is None or controller_route == route:
        return False
    return route.count(PARAM_OPEN) < route.count(SEGMENT_SEPARATOR) - 1


def _param_name_fragment(text: str) -> str:
    return capitalize(ILLEGAL_CHARACTER_REGEX.sub("", text))


def _id_suffix(segment: str, previous: str) -> str:
    """
    Name the trailing parameter of a route: "By" plus what identifies it.

    A bare parameter is diffed against the segment before it so that
    "/users/{userId}" gives "ById" rather than "ByUserId". Mixed segments
    such as "{id}.json" contribute every fragment.
    """
    if is_bare_param(segment):
        return "By" + _param_name_fragment(difference(previous.lower(), segment[1:-1]))
    return "By" + "".join(_param_name_fragment(part) for part in _PARAM_BRACES.split(segment))


def walk_segments(segments: list[str], *, config: Optional[NamingConfig] = None) -> tuple[str, bool]:
    """
    Build the resource part of an action name by walking segments backwards.

    Walks from the last segment toward the first and stops after
    config.max_action_segments literal segments; parameter segments do not
    count. A parameter makes the literal before it singular (it selects one
    item of that collection) unless that literal ends in "details".

    Args:
        segments: Route segments as returned by split_route()
        config: Naming config (default: process-wide default)

    Returns:
        (name, is_id_in_path) where is_id_in_path is True if the last
        segment is a parameter

    Examples:
        >>> walk_segments(["", "users", "{id}"])
        ("UserById", True)

        >>> walk_segments(["", "users", "{userId}", "orders"])
        ("UserOrders", False)
    """
    config = resolve_config(config)

    name = ""
    ids_parsed = 0
    index = len(segments) - 1
    last_index = index
    singularize_next = False
    is_id_in_path = False

    while ids_parsed < config.max_action_segments and index >= 0:
        segment = segments[index]

        if is_param_segment(segment):
            if index > 0 and index == last_index:
                is_id_in_path = True
                name = _id_suffix(segment, segments[index - 1])
            singularize_next = True
        else:
            segment = clean_for_identifier(segment, config=config).strip()
            word = capitalize(segment)
            if singularize_next:
                if not segment.endswith(config.details_suffix):
                    word = singularize(word)
                singularize_next = False
            name = word + name
            ids_parsed += 1

        index -= 1

    return name, is_id_in_path


def action_name(
    controller_route: Optional[str],
    action_route: Optional[str],
    action_type: Union[ActionType, str],
    *,
    config: Optional[NamingConfig] = None,
) -> Optional[str]:
    """
    Infer the method name of an action from its route and HTTP verb.

    Args:
        controller_route: Full route of the resource the controller is
            generated for; None when the action belongs to that resource
        action_route: Full route of the action's resource
        action_type: HTTP verb (ActionType or verb string)
        config: Naming config (default: process-wide default)

    Returns:
        Method name, or None if the route is blank

    Examples:
        >>> action_name("/users", "/users", "GET")
        "getUsers"

        >>> action_name("/users", "/users/{id}", ActionType.GET)
        "getUserById"

        >>> action_name("/users", "/users", ActionType.POST)
        "createUser"

        >>> action_name("/api", "/api/users/{userId}/orders/{orderId}", "GET")
        "getOrderById"

    Edge Cases:
        - Blank or separator-only route: None
        - Unknown verb: "do" prefix
        - "details" sub-resources are never singularized
    """
    config = resolve_config(config)
    action_type = ActionType.parse(action_type)

    route = action_route
    if not route or route.isspace():
        return None

    if _should_reduce(controller_route, route):
        route = reduce_to_resource_and_id(route)
        logger.debug(f"Shortened nested route '{action_route}' to '{route}'")

    segments = split_route(route)
    if not segments:
        return None

    name, is_id_in_path = walk_segments(segments, config=config)
    prefix = action_intent(action_type, is_id_in_path)

    # Creating (or replacing an identified) item of a collection acts on one element
    tail = segments[-1]
    if (
        singularize(tail) != tail
        and not tail.endswith(config.details_suffix)
        and (action_type is ActionType.POST or (action_type is ActionType.PUT and is_id_in_path))
    ):
        name = singularize(name)

    logger.debug(f"Action {action_type.value} {action_route} -> {prefix}{name}")
    return prefix + name
