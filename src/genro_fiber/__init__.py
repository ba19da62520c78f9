# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Fiber - Reconcile declarative element trees onto live object graphs.

A lightweight, zero-dependency library turning element descriptors (a type
tag plus a prop bag) into live objects, attaching them to their parents and
keeping their properties in sync across renders.
"""

__version__ = "0.1.0"

from .catalogue import Catalogue, catalogue, extend
from .exceptions import FiberError, InvalidAttachError, UnknownElementError
from .instance import (
    EVENT_PATTERN,
    INTERNAL_PROPS,
    RESERVED_PROPS,
    Instance,
    find_initial_root,
    get_instance,
    get_instance_props,
    prepare,
)
from .predicates import UNDEFINED, is_
from .reconciler import (
    apply_props,
    attach,
    detach,
    diff_props,
    dispose,
    resolve,
    update_camera,
)
from .root import RenderRoot, Size

__all__ = [
    # Predicates
    "is_",
    "UNDEFINED",
    # Instances
    "Instance",
    "prepare",
    "get_instance",
    "get_instance_props",
    "find_initial_root",
    "INTERNAL_PROPS",
    "RESERVED_PROPS",
    "EVENT_PATTERN",
    # Reconciler
    "resolve",
    "attach",
    "detach",
    "diff_props",
    "apply_props",
    "dispose",
    "update_camera",
    # Roots and catalogue
    "RenderRoot",
    "Size",
    "Catalogue",
    "catalogue",
    "extend",
    # Exceptions
    "FiberError",
    "UnknownElementError",
    "InvalidAttachError",
]
