# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pierced property paths.

A pierced prop addresses a property of a nested object by joining the
segments with a dash: ``'material-color'`` is ``obj.material.color`` and
``'position-0'`` is ``obj.position[0]``.

Containers may be mappings (segments are keys), lists and tuples
(numeric segments are indices) or any other object (segments are
attribute names). Reads never raise; a missing value reads as UNDEFINED.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from types import SimpleNamespace
from typing import Any, Callable, NamedTuple

from ..predicates import UNDEFINED, is_primitive

PIERCE_DELIMITER = '-'

ContainerFactory = Callable[[Any, str], Any]


class ResolvedPath(NamedTuple):
    """Result of resolving a prop name against an object.

    Attributes:
        root: Container holding ``key``.
        key: Leaf segment (or the unresolved remainder of the path).
        target: Current value at ``root[key]``, UNDEFINED if absent.
    """

    root: Any
    key: str
    target: Any


def _index(container: Any, key: str) -> int | None:
    """Parse ``key`` as a sequence index of ``container``, or None."""
    if isinstance(container, (list, tuple)) and key.isdecimal():
        return int(key)
    return None


def read(container: Any, key: str) -> Any:
    """Read ``key`` from a container, UNDEFINED if absent."""
    if isinstance(container, Mapping):
        return container.get(key, UNDEFINED)
    index = _index(container, key)
    if index is not None:
        try:
            return container[index]
        except IndexError:
            return UNDEFINED
    if container is None or container is UNDEFINED or not isinstance(key, str):
        return UNDEFINED
    try:
        return getattr(container, key, UNDEFINED)
    except Exception:
        # Properties of foreign objects may raise on access
        return UNDEFINED


def write(container: Any, key: str, value: Any) -> None:
    """Write ``key`` on a container.

    Lists grow as needed, padding with None.

    Raises:
        AttributeError, TypeError: If the container rejects the write.
    """
    if isinstance(container, MutableMapping):
        container[key] = value
        return
    index = _index(container, key)
    if index is not None and isinstance(container, list):
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value
        return
    setattr(container, key, value)


def clear(container: Any, key: str) -> None:
    """Remove ``key`` from a container.

    List slots are set to None so that the positions of the following
    elements and the list's length are preserved.
    """
    if isinstance(container, MutableMapping):
        container.pop(key, None)
        return
    index = _index(container, key)
    if index is not None and isinstance(container, list):
        if -len(container) <= index < len(container):
            container[index] = None
        return
    if key in getattr(container, '__dict__', ()):
        delattr(container, key)
    elif hasattr(container, key):
        setattr(container, key, None)


def _new_container(container: Any) -> Any:
    if isinstance(container, Mapping):
        return {}
    return SimpleNamespace()


def resolve(
    root: Any,
    key: str,
    autocreate: bool = False,
    factory: ContainerFactory | None = None,
) -> ResolvedPath:
    """Resolve a (possibly pierced) prop name.

    Args:
        root: Object the prop belongs to.
        key: Prop name, segments joined by PIERCE_DELIMITER.
        autocreate: If True, missing intermediate containers are created
            and written into their parent.
        factory: Called as ``factory(container, segment)`` to build a
            missing intermediate. Returning UNDEFINED or None falls back
            to an empty dict (mapping containers) or SimpleNamespace.

    Returns:
        ResolvedPath. When a segment cannot be traversed (missing without
        autocreate, or a scalar), ``root`` is the last reachable container,
        ``key`` the remaining path and ``target`` UNDEFINED.

    Example:
        >>> resolve({'foo': {'bar': 1}}, 'foo-bar')
        ResolvedPath(root={'bar': 1}, key='bar', target=1)
    """
    if PIERCE_DELIMITER not in key or (isinstance(root, Mapping) and key in root):
        return ResolvedPath(root, key, read(root, key))

    parts = key.split(PIERCE_DELIMITER)
    current = root

    for i, part in enumerate(parts[:-1]):
        value = read(current, part)

        if value is UNDEFINED or value is None:
            if not autocreate:
                remaining = PIERCE_DELIMITER.join(parts[i:])
                return ResolvedPath(current, remaining, UNDEFINED)
            value = factory(current, part) if factory is not None else UNDEFINED
            if value is UNDEFINED or value is None:
                value = _new_container(current)
            try:
                write(current, part, value)
            except (AttributeError, TypeError):
                remaining = PIERCE_DELIMITER.join(parts[i:])
                return ResolvedPath(current, remaining, UNDEFINED)
        elif is_primitive(value):
            remaining = PIERCE_DELIMITER.join(parts[i:])
            return ResolvedPath(current, remaining, UNDEFINED)

        current = value

    leaf = parts[-1]
    return ResolvedPath(current, leaf, read(current, leaf))
