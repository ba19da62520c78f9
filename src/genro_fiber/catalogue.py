# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Catalogue of constructors available to element type tags."""

from __future__ import annotations

import inspect
from types import ModuleType
from typing import Any, Callable, Iterator

from .exceptions import UnknownElementError


def to_pascal_case(name: str) -> str:
    """Convert an element tag to the constructor name it refers to.

    Example:
        >>> to_pascal_case('meshBasicMaterial')
        'MeshBasicMaterial'
    """
    return name[:1].upper() + name[1:]


class Catalogue:
    """Registry mapping constructor names to constructors.

    Element tags are written in camelCase ('mesh', 'boxGeometry') and
    looked up by their PascalCase constructor name.

    Example:
        >>> cat = Catalogue()
        >>> cat.extend({'Mesh': Mesh})
        >>> cat.create('mesh')
        Mesh(...)
    """

    def __init__(self, objects: dict[str, Callable] | ModuleType | None = None) -> None:
        self._constructors: dict[str, Callable[..., Any]] = {}
        if objects is not None:
            self.extend(objects)

    def __repr__(self) -> str:
        return f"Catalogue({len(self._constructors)} types)"

    def __len__(self) -> int:
        return len(self._constructors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._constructors)

    def __contains__(self, type_name: str) -> bool:
        return to_pascal_case(type_name) in self._constructors

    def extend(self, objects: dict[str, Callable] | ModuleType) -> None:
        """Register constructors.

        Args:
            objects: Dict of {name: constructor}, or a module whose public
                classes are registered under their own names.
        """
        if isinstance(objects, ModuleType):
            names = getattr(objects, '__all__', None) or [
                name for name in dir(objects) if not name.startswith('_')
            ]
            objects = {
                name: getattr(objects, name)
                for name in names
                if inspect.isclass(getattr(objects, name, None))
            }
        for name, constructor in objects.items():
            if not callable(constructor):
                raise TypeError(f"'{name}' is not a constructor")
            self._constructors[to_pascal_case(name)] = constructor

    def get(self, type_name: str) -> Callable[..., Any] | None:
        """Get the constructor for a type tag, or None if unknown."""
        if not type_name:
            return None
        return self._constructors.get(to_pascal_case(type_name))

    def create(self, type_name: str, *args: Any) -> Any:
        """Instantiate a type tag.

        Raises:
            UnknownElementError: If the tag has no registered constructor.
        """
        constructor = self.get(type_name)
        if constructor is None:
            raise UnknownElementError(
                f"'{type_name}' is not part of the catalogue. "
                f"Register it with extend()"
            )
        return constructor(*args)

    def names(self) -> list[str]:
        """Get all registered constructor names."""
        return list(self._constructors)


def _default_catalogue() -> Catalogue:
    from . import objects
    return Catalogue(objects)


catalogue = _default_catalogue()


def extend(objects: dict[str, Callable] | ModuleType) -> None:
    """Register constructors in the module-level catalogue."""
    catalogue.extend(objects)
