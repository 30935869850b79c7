"""Capability markers declaring a class or member part of the API surface.

Markers only attach metadata, the decorated object is returned unchanged::

    @exported_bean(default_visibility=1)
    class Widget:
        @exported(visibility=0)
        def getName(self) -> str:
            ...
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

BEAN_ATTRIBUTE = "__exported_bean__"
EXPORTED_ATTRIBUTE = "__exported__"

DEFAULT_VISIBILITY = 1

T = TypeVar('T')


@dataclass(frozen=True)
class ExportedBeanInfo:
    """Metadata carried by an exported class."""
    default_visibility: int = DEFAULT_VISIBILITY


@dataclass(frozen=True)
class ExportedInfo:
    """Metadata carried by an exported member."""
    visibility: Optional[int] = None
    name: str = ""


def exported_bean(cls: Optional[type] = None, *, default_visibility: int = DEFAULT_VISIBILITY):
    """Mark a class as an exported type. Usable with or without arguments."""
    if default_visibility < 0:
        raise ValueError(f"Visibility must be non-negative, got {default_visibility}")

    def decorate(target: type) -> type:
        setattr(target, BEAN_ATTRIBUTE, ExportedBeanInfo(default_visibility))
        return target

    if cls is not None:
        return decorate(cls)
    return decorate


def exported(member: Any = None, *, visibility: Optional[int] = None, name: str = ""):
    """Mark a method, property, staticmethod or classmethod as an exported operation.

    Args:
        visibility: Exposure level, 0 is safe without authentication. Defaults
            to the owning bean's default visibility.
        name: Explicit name overriding the one derived from the identifier.
    """
    if visibility is not None and visibility < 0:
        raise ValueError(f"Visibility must be non-negative, got {visibility}")
    info = ExportedInfo(visibility, name)

    def decorate(target: T) -> T:
        function = _underlying_function(target)
        if function is None:
            raise TypeError(f"Cannot export {target!r}: not a function or property")
        setattr(function, EXPORTED_ATTRIBUTE, info)
        return target

    if member is not None:
        return decorate(member)
    return decorate


def bean_info(cls: Any) -> Optional[ExportedBeanInfo]:
    """Marker of a class, declared on it or inherited from a base class."""
    if not isinstance(cls, type):
        return None
    info = getattr(cls, BEAN_ATTRIBUTE, None)
    return info if isinstance(info, ExportedBeanInfo) else None


def is_exported_bean(cls: Any) -> bool:
    return bean_info(cls) is not None


def exported_info(member: Any) -> Optional[ExportedInfo]:
    """Marker of a class member (raw value from the class ``__dict__``), if any."""
    function = _underlying_function(member)
    if function is None:
        return None
    info = getattr(function, EXPORTED_ATTRIBUTE, None)
    return info if isinstance(info, ExportedInfo) else None


def _underlying_function(member: Any) -> Optional[Callable]:
    if isinstance(member, property):
        return member.fget
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    if callable(member) and hasattr(member, "__dict__"):
        return member
    return None
