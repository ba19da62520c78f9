# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Instance descriptors and the registry that binds them to live objects."""

from __future__ import annotations

import logging
import re
import weakref
from collections.abc import Mapping
from typing import Any, TYPE_CHECKING

from .predicates import UNDEFINED

if TYPE_CHECKING:
    from .root import RenderRoot

logger = logging.getLogger(__name__)

#: Attribute carrying the descriptor on a live object.
INSTANCE_ATTR = '_fiber_instance'

#: Keys owned by the declarative tree engine, never part of an object's props.
INTERNAL_PROPS = frozenset({'children', 'key', 'ref'})

#: Keys that are directives to the reconciler rather than object properties.
RESERVED_PROPS = INTERNAL_PROPS | {'args', 'dispose', 'attach', 'object', 'on_update'}

#: Event handler props, dispatched by the event subsystem.
EVENT_PATTERN = re.compile(r'^on_(pointer|click|double_click|context_menu|wheel)')


class Instance:
    """Bookkeeping record for one live object.

    Attributes:
        root: The render root that owns the object.
        type: Element type tag. '' marks a primitive wrapper.
        object: The live object being managed.
        props: Last applied props, keyed by (possibly pierced) name.
        previous_attach: What occupied the attach slot before attaching,
            or the unmount callback of an attach function. UNDEFINED
            while not attached.
    """

    __slots__ = ('root', 'type', '_object', '_object_ref', 'props', 'previous_attach')

    def __init__(
        self,
        root: RenderRoot | Any,
        type: str,
        props: dict[str, Any],
        object: Any,
    ) -> None:
        self.root = root
        self.type = type
        self.props = props
        self._object = object
        self._object_ref: weakref.ref | None = None
        self.previous_attach: Any = UNDEFINED

    def __repr__(self) -> str:
        kind = self.type or 'primitive'
        return f"Instance({kind!r}, object={type(self.object).__name__})"

    @property
    def object(self) -> Any:
        if self._object_ref is not None:
            return self._object_ref()
        return self._object

    def _hold_weakly(self, ref: weakref.ref) -> None:
        # Registry-bound objects must not be kept alive by their descriptor
        self._object_ref = ref
        self._object = None


# Descriptors of objects rejecting attributes, keyed by id(object)
_registry: dict[int, Instance] = {}


def _register(obj: Any, instance: Instance) -> bool:
    """Bind ``instance`` to ``obj`` through the registry, if ``obj`` is weakly referenceable."""
    key = id(obj)

    def _forget(_ref: weakref.ref) -> None:
        if _registry.get(key) is instance:
            del _registry[key]

    try:
        ref = weakref.ref(obj, _forget)
    except TypeError:
        return False
    instance._hold_weakly(ref)
    _registry[key] = instance
    return True


def get_instance(obj: Any) -> Instance | None:
    """Return the descriptor bound to ``obj``, or None."""
    instance = getattr(obj, INSTANCE_ATTR, None)
    if instance is not None:
        return instance
    instance = _registry.get(id(obj))
    if instance is not None and instance.object is obj:
        return instance
    return None


def prepare(
    obj: Any,
    root: RenderRoot | Any,
    type: str,
    props: dict[str, Any],
) -> Instance:
    """Bind a descriptor to a live object.

    Preparing an object that already carries a descriptor returns that
    descriptor untouched. Objects rejecting attributes (slotted value
    classes) are bound through a weak registry instead; objects that
    support neither (builtin containers and scalars) get an unbound
    descriptor.

    Args:
        obj: The live object.
        root: The owning render root.
        type: Element type tag.
        props: Initial props, stored by reference.

    Returns:
        The object's descriptor.
    """
    existing = get_instance(obj)
    if existing is not None:
        return existing

    instance = Instance(root, type, props, obj)
    try:
        setattr(obj, INSTANCE_ATTR, instance)
    except (AttributeError, TypeError):
        if _register(obj, instance):
            return instance
        logger.debug(
            f"{obj.__class__.__name__} cannot carry a descriptor, "
            f"instance for {instance.type!r} is unbound"
        )
    return instance


def get_instance_props(props: Mapping[str, Any]) -> dict[str, Any]:
    """Strip internal keys from a prop bag without reading their values."""
    return {key: props[key] for key in props.keys() if key not in INTERNAL_PROPS}


def find_initial_root(instance: Instance) -> Any:
    """Follow ``previous_root`` back-references to the outermost root.

    Portals mount a subtree into a root other than its lexical parent's;
    such roots point back at the root they were created from.
    """
    root = instance.root
    while True:
        previous = getattr(root, 'previous_root', None)
        if previous is None:
            return root
        root = previous
