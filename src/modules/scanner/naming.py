"""Heuristic translation of operation identifiers into HTTP verbs and paths.

The rules are intentionally lossy: ``updateStatus`` publishes as POST even
when it only reads. Consumers depend on the current mapping, so it must not
be "corrected" here.
"""

import re
from typing import Optional

from ..openapi import HttpVerb
from .model import CORE_NAMESPACE

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")

POST_PREFIXES = ("set", "create", "add", "submit", "update", "save", "modify")
DELETE_PREFIXES = ("delete", "remove", "clear")
PUT_PREFIXES = ("replace",)


def classify_verb(identifier: str) -> HttpVerb:
    """Map an operation identifier to an HTTP verb by its prefix."""
    name = identifier.lower()
    if name.startswith(POST_PREFIXES):
        return HttpVerb.POST
    if name.startswith(DELETE_PREFIXES):
        return HttpVerb.DELETE
    if name.startswith(PUT_PREFIXES):
        return HttpVerb.PUT
    return HttpVerb.GET


def _strip_accessor(identifier: str) -> Optional[tuple[str, str]]:
    """Split ``getX``/``isX`` into (prefix, remainder); None for other identifiers."""
    for prefix in ("get", "is"):
        if identifier.startswith(prefix) and len(identifier) > len(prefix):
            rest = identifier[len(prefix):]
            # snake_case accessors: get_name, is_enabled
            if rest.startswith("_") and rest.strip("_"):
                rest = rest.lstrip("_")
            return prefix, rest
    return None


def _lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def decamelize(name: str, separator: str = "-") -> str:
    """``ProjectInfoAction`` -> ``project-info-action``."""
    return _CAMEL_BOUNDARY.sub(rf"\1{separator}\2", name).replace("_", separator).lower()


def property_name(identifier: str, explicit_name: Optional[str] = None) -> str:
    """Name of the schema property an operation contributes to its owner."""
    if explicit_name:
        return explicit_name
    accessor = _strip_accessor(identifier)
    if accessor:
        return _lower_first(accessor[1])
    return identifier


def path_segment(identifier: str, explicit_name: Optional[str] = None) -> str:
    """Last URL path segment of an operation."""
    if explicit_name:
        return explicit_name
    accessor = _strip_accessor(identifier)
    if accessor:
        return _lower_first(accessor[1])
    return decamelize(identifier)


def _spaced(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"\1 \2", name).replace("_", " ").strip()


def display_title(identifier: str) -> str:
    """Human readable title: ``getFullName`` -> ``Full Name``, ``isIdle`` -> ``Is Idle``."""
    accessor = _strip_accessor(identifier)
    if accessor:
        prefix, rest = accessor
        if prefix == "is":
            return "Is " + _spaced(rest)
        return _spaced(rest)
    return _spaced(identifier)


def operation_path(namespace: str, type_name: str, segment: str) -> str:
    """Full path of an operation.

    Core operations live at ``/<type>/<segment>``, plugin operations at
    ``/<plugin id>/<type>/<segment>``.
    """
    base = decamelize(type_name)
    if namespace == CORE_NAMESPACE:
        return f"/{base}/{segment}"
    return f"/{namespace}/{base}/{segment}"
