# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Diffing and applying props onto live objects.

``diff_props`` picks the props that changed between two renders.
``apply_props`` writes props onto an object, choosing per key between
mutating the current value in place (``copy``, ``set``, ``set_scalar``,
``from_array``) and replacing it.

Value classes such as vectors and colours are mutated in place so that
references held elsewhere stay valid:

    >>> mesh = Mesh()
    >>> position = mesh.position
    >>> apply_props(mesh, {'position': [1, 2, 3], 'scale': 2})
    >>> mesh.position is position
    True
    >>> mesh.scale.to_array()
    [2, 2, 2]
"""

from __future__ import annotations

import copy
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Callable

from ..catalogue import Catalogue, catalogue as default_catalogue
from ..exceptions import UnknownElementError
from ..instance import EVENT_PATTERN, RESERVED_PROPS, Instance, find_initial_root, get_instance
from ..objects.textures import RGBA_FORMAT, SRGB_COLOR_SPACE, UNSIGNED_BYTE_TYPE
from ..predicates import UNDEFINED, is_, is_primitive
from .paths import PIERCE_DELIMITER, ResolvedPath, resolve, write

logger = logging.getLogger(__name__)

#: Texture slots holding colour data, flagged as sRGB on non-linear roots.
COLOR_MAPS = ('map', 'emissive_map', 'sheen_color_map', 'specular_color_map', 'env_map')

# One default instance per class, used to reset removed props
_prototypes: dict[type, Any] = {}


def get_memoized_prototype(obj: Any) -> Any:
    """Return a default instance of ``obj``'s class, UNDEFINED if unavailable.

    Only classes constructible without arguments have a prototype.
    """
    cls = type(obj)
    if cls in _prototypes:
        return _prototypes[cls]

    prototype = UNDEFINED
    try:
        inspect.signature(cls).bind()
    except (TypeError, ValueError):
        logger.debug(f"{cls.__name__} needs arguments, no default instance")
    else:
        try:
            prototype = cls()
        except Exception as e:
            logger.debug(f"{cls.__name__}() failed, no default instance: {e}")
    _prototypes[cls] = prototype
    return prototype


def _default_value(obj: Any, prop: str) -> Any:
    """Default value of ``prop`` for ``obj``, UNDEFINED if unknown."""
    root, key, _ = resolve(obj, prop)
    if is_primitive(root):
        return UNDEFINED
    prototype = get_memoized_prototype(root)
    if prototype is UNDEFINED:
        return UNDEFINED
    value = resolve(prototype, key).target
    if value is UNDEFINED or is_primitive(value):
        return value
    clone = getattr(value, 'clone', None)
    return clone() if callable(clone) else copy.copy(value)


def diff_props(instance: Instance, new_props: Mapping[str, Any]) -> dict[str, Any]:
    """Return the props of ``new_props`` that must be (re)applied.

    - Reserved props are ignored on both sides and never read.
    - A changed prop drags along every pierced prop rooted at it: when
      ``map`` is a new texture, ``map-needs_update`` must be applied to it
      even if its value did not change.
    - Props missing from ``new_props`` are reset to the default value of
      the object's class, when there is one (hot reload).

    Args:
        instance: Descriptor holding the previously applied props.
        new_props: Props of the new render.

    Returns:
        New dict of changed props.
    """
    old_props = instance.props
    changed: dict[str, Any] = {}

    for prop in new_props.keys():
        if prop in RESERVED_PROPS:
            continue
        value = new_props[prop]
        previous = old_props[prop] if prop in old_props else UNDEFINED
        if is_.equ(value, previous):
            continue

        changed[prop] = value

        prefix = prop + PIERCE_DELIMITER
        for other in new_props.keys():
            if other.startswith(prefix) and other not in RESERVED_PROPS:
                changed[other] = new_props[other]

    for prop in old_props.keys():
        if prop in RESERVED_PROPS or prop in new_props:
            continue
        default = _default_value(instance.object, prop)
        if default is UNDEFINED:
            logger.debug(f"Removed prop {prop!r} has no default, left as is")
            continue
        changed[prop] = default

    return changed


def _is_color_representation(value: Any) -> bool:
    if getattr(value, 'is_color', False):
        return True
    return isinstance(value, (int, str)) and not isinstance(value, bool)


def _has_method(target: Any, name: str) -> bool:
    return callable(getattr(target, name, None))


def _catalogue_for(root_state: Any) -> Catalogue:
    get_catalogue = getattr(root_state, 'get_catalogue', None)
    if callable(get_catalogue):
        return get_catalogue()
    return default_catalogue


def _construct_missing(root_state: Any) -> Callable[[Any, str], Any]:
    """Factory building missing pierced containers from ``property_types``."""
    def factory(container: Any, segment: str) -> Any:
        property_types = getattr(type(container), 'property_types', None)
        if not isinstance(property_types, Mapping) or segment not in property_types:
            return UNDEFINED
        type_name = property_types[segment]
        try:
            value = _catalogue_for(root_state).create(type_name)
        except UnknownElementError:
            logger.debug(f"Cannot construct {type_name!r} for {segment!r}")
            return UNDEFINED
        logger.debug(f"Constructed {type_name!r} for missing {segment!r}")
        return value

    return factory


def _update_in_place(target: Any, value: Any) -> bool:
    """Mutate ``target`` to hold ``value``. False if it must be replaced."""
    if target is UNDEFINED or is_primitive(target):
        return False

    if getattr(target, 'is_layers', False) and getattr(value, 'is_layers', False):
        target.mask = value.mask
    elif getattr(target, 'is_color', False) and _is_color_representation(value):
        target.set(value)
    elif not _has_method(target, 'set'):
        return False
    # Subclasses are assigned by reference
    elif _has_method(target, 'copy') and type(value) is type(target):
        target.copy(value)
    elif is_.arr(value):
        if _has_method(target, 'from_array'):
            target.from_array(value)
        else:
            target.set(*value)
    elif is_.num(value):
        if _has_method(target, 'set_scalar'):
            target.set_scalar(value)
        else:
            target.set(value)
    else:
        return False
    return True


def _apply_value(path: ResolvedPath, value: Any, root_state: Any) -> None:
    root, key, target = path
    if _update_in_place(target, value):
        return

    try:
        write(root, key, value)
    except (AttributeError, TypeError) as e:
        logger.warning(f"Cannot set {key!r} on {type(root).__name__}: {e}")
        return

    if (
        root_state is not None
        and not getattr(root_state, 'linear', True)
        and key in COLOR_MAPS
        and getattr(value, 'is_texture', False)
        and getattr(value, 'format', None) == RGBA_FORMAT
        and getattr(value, 'type', None) == UNSIGNED_BYTE_TYPE
    ):
        value.color_space = SRGB_COLOR_SPACE


def apply_props(obj: Any, props: Mapping[str, Any]) -> Any:
    """Apply props onto a live object in place.

    Reserved props are skipped, and so are event handler props when the
    object is managed. UNDEFINED values are skipped. For every other prop
    the current value decides how the new one is applied:

    1. missing or scalar: replaced;
    2. layers: mask copied;
    3. colour: ``set`` with a colour, hex integer or CSS string;
    4. has ``set`` and ``copy``, same class as the value: ``copy``;
    5. has ``set``, list/tuple value: ``from_array`` or ``set(*value)``;
    6. has ``set``, numeric value: ``set_scalar`` or ``set``;
    7. anything else: replaced.

    Pierced props create missing intermediate objects, built from the
    container's ``property_types`` when it declares one for the segment.

    Args:
        obj: The live object, managed or not.
        props: Props to apply.

    Returns:
        ``obj``.
    """
    instance = get_instance(obj)
    root_state = find_initial_root(instance) if instance is not None else None
    factory = _construct_missing(root_state)

    for prop in props.keys():
        if prop in RESERVED_PROPS:
            continue
        if instance is not None and EVENT_PATTERN.match(prop):
            continue

        value = props[prop]
        if value is UNDEFINED:
            continue

        path = resolve(obj, prop, autocreate=True, factory=factory)
        _apply_value(path, value, root_state)

    return obj
