"""Host introspection: which exported types and operations a scope offers.

The scanner only talks to ``HostIntrospector``. ``ModuleIntrospector`` walks
importable packages, ``StaticIntrospector`` serves classes registered up
front for hosts that cannot be imported lazily.
"""

import importlib
import inspect
import pkgutil
import typing
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from ..logging import BaseLogger
from .errors import DiscoveryError
from .markers import DEFAULT_VISIBILITY, bean_info, exported_info
from .model import ExportedOperation


class HostIntrospector(ABC):
    """Capability query against the running host."""

    @abstractmethod
    def list_exported_types(self, scope: Sequence[str]) -> List[type]:
        """
        List exported types declared inside a scope.
        
        Args:
            scope: Package names the types must be declared in
            
        Returns:
            List[type]: Types carrying the capability marker
        """
        pass

    @abstractmethod
    def list_exported_operations(self, cls: type) -> List[ExportedOperation]:
        """List the exported operations declared on a type."""
        pass

    @abstractmethod
    def load_type(self, qualified_name: str) -> type:
        """
        Resolve a type by qualified name.
        
        Raises:
            DiscoveryError: If the type cannot be loaded
        """
        pass


class ReflectiveIntrospector(HostIntrospector):
    """Operations and type loading backed by Python reflection."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger

    def list_exported_operations(self, cls: type) -> List[ExportedOperation]:
        bean = bean_info(cls)
        default_visibility = bean.default_visibility if bean else DEFAULT_VISIBILITY

        operations = []
        for attr_name, member in vars(cls).items():
            info = exported_info(member)
            if info is None:
                continue
            function = _function_of(member)
            visibility = info.visibility if info.visibility is not None else default_visibility
            operations.append(ExportedOperation(
                name=attr_name,
                return_shape=self._return_shape(cls, function),
                visibility=visibility,
                explicit_name=info.name or None,
                doc=_first_doc_line(function)
            ))
        return operations

    def load_type(self, qualified_name: str) -> type:
        parts = qualified_name.split(".")
        last_error: Optional[Exception] = None
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                target: Any = importlib.import_module(module_name)
            except ImportError as e:
                last_error = e
                continue
            try:
                for attr in parts[split:]:
                    target = getattr(target, attr)
            except AttributeError as e:
                raise DiscoveryError(qualified_name, e)
            if not isinstance(target, type):
                raise DiscoveryError(qualified_name, TypeError(f"{qualified_name} is not a class"))
            return target
        raise DiscoveryError(qualified_name, last_error or ValueError("not a qualified name"))

    def _return_shape(self, cls: type, function: Any) -> Any:
        try:
            hints = typing.get_type_hints(function, include_extras=True)
        except Exception as e:
            # Unresolvable forward reference, degrade to whatever is declared
            self.logger.log_debug(f"Could not resolve annotations of {cls.__qualname__}.{function.__name__}: {e}")
            return _declared_return(function)
        return hints.get("return", _declared_return(function))


class ModuleIntrospector(ReflectiveIntrospector):
    """Discovers exported types by importing and walking packages."""

    def list_exported_types(self, scope: Sequence[str]) -> List[type]:
        found: Dict[str, type] = {}
        for module in self._iter_modules(scope):
            for cls in _declared_classes(module):
                if bean_info(cls) is not None:
                    found.setdefault(f"{cls.__module__}.{cls.__qualname__}", cls)
        return list(found.values())

    def _iter_modules(self, scope: Sequence[str]) -> Iterator[Any]:
        for package_name in scope:
            try:
                package = importlib.import_module(package_name)
            except Exception as e:
                self.logger.log_warning(str(DiscoveryError(package_name, e)))
                continue
            yield package

            search_path = getattr(package, "__path__", None)
            if search_path is None:
                continue

            def on_error(name: str) -> None:
                self.logger.log_warning(f"Failed to walk package {name}")

            for module_info in pkgutil.walk_packages(search_path, prefix=package.__name__ + ".", onerror=on_error):
                try:
                    yield importlib.import_module(module_info.name)
                except Exception as e:
                    self.logger.log_warning(str(DiscoveryError(module_info.name, e)))


class StaticIntrospector(ReflectiveIntrospector):
    """Serves classes registered per scope name."""

    def __init__(self, logger: BaseLogger, registrations: Optional[Dict[str, Iterable[type]]] = None):
        super().__init__(logger)
        self._registrations: Dict[str, List[type]] = {}
        for scope_name, classes in (registrations or {}).items():
            self.register(scope_name, *classes)

    def register(self, scope_name: str, *classes: type) -> None:
        self._registrations.setdefault(scope_name, []).extend(classes)

    def list_exported_types(self, scope: Sequence[str]) -> List[type]:
        result: List[type] = []
        for scope_name in scope:
            for cls in self._registrations.get(scope_name, []):
                if bean_info(cls) is not None and cls not in result:
                    result.append(cls)
        return result

    def load_type(self, qualified_name: str) -> type:
        for classes in self._registrations.values():
            for cls in classes:
                if f"{cls.__module__}.{cls.__qualname__}" == qualified_name:
                    return cls
        return super().load_type(qualified_name)


def _declared_classes(module: Any) -> Iterator[type]:
    """Classes defined in a module, nested classes included."""
    pending = [value for value in vars(module).values()
               if isinstance(value, type) and value.__module__ == module.__name__]
    seen = set()
    while pending:
        cls = pending.pop(0)
        if cls in seen:
            continue
        seen.add(cls)
        yield cls
        pending.extend(
            value for value in vars(cls).values()
            if isinstance(value, type) and value.__qualname__.startswith(cls.__qualname__ + ".")
        )


def _function_of(member: Any) -> Any:
    if isinstance(member, property):
        return member.fget
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def _declared_return(function: Any) -> Any:
    try:
        annotation = inspect.signature(function).return_annotation
    except (TypeError, ValueError):
        return Any
    if annotation is inspect.Signature.empty:
        return Any
    return annotation


def _first_doc_line(function: Any) -> Optional[str]:
    doc = inspect.getdoc(function)
    if not doc:
        return None
    return doc.strip().splitlines()[0]
