# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attaching child objects into slots of their parent object.

The ``attach`` prop of a child says where it goes:

- a path such as ``'material'`` or ``'material-map'`` puts the child
  object in that slot of the parent object, remembering what was there;
- an indexed path such as ``'materials-0'`` puts it in a list slot,
  creating the list if needed;
- a callable ``fn(parent_object, child_object)`` mounts the child itself
  and may return an unmount callback, called with the same arguments.

Without an ``attach`` prop the tree engine falls back to its default
graph insertion.

Example:
    >>> parent = prepare(Mesh(), root, 'mesh', {})
    >>> child = prepare(MeshBasicMaterial(), root, 'meshBasicMaterial',
    ...                 {'attach': 'material'})
    >>> attach(parent, child)
    >>> parent.object.material is child.object
    True
"""

from __future__ import annotations

import re

from ..exceptions import InvalidAttachError
from ..instance import Instance
from ..predicates import UNDEFINED, is_
from .paths import clear, read, resolve, write

INDEX_PATTERN = re.compile(r'-\d+$')


def attach(parent: Instance, child: Instance) -> None:
    """Attach ``child.object`` to ``parent.object`` as its ``attach`` prop says.

    Raises:
        InvalidAttachError: If the directive is neither a path nor a callable.
    """
    directive = child.props.get('attach')
    if directive is None:
        return

    if is_.str(directive):
        if INDEX_PATTERN.search(directive):
            array_path = INDEX_PATTERN.sub('', directive)
            root, key, target = resolve(parent.object, array_path, autocreate=True)
            if not isinstance(target, list):
                write(root, key, [])
        root, key, target = resolve(parent.object, directive, autocreate=True)
        child.previous_attach = target
        write(root, key, child.object)
    elif is_.fun(directive):
        child.previous_attach = directive(parent.object, child.object)
    else:
        raise InvalidAttachError(
            f"attach must be a path or a callable, not {type(directive).__name__}"
        )


def detach(parent: Instance, child: Instance) -> None:
    """Undo ``attach``: restore the slot or call the unmount callback."""
    directive = child.props.get('attach')

    if is_.str(directive):
        root, key, _ = resolve(parent.object, directive)
        previous = child.previous_attach
        if previous is UNDEFINED:
            # Nothing was there before attaching
            if read(root, key) is not UNDEFINED:
                clear(root, key)
        else:
            write(root, key, previous)
    elif is_.fun(child.previous_attach):
        child.previous_attach(parent.object, child.object)

    child.previous_attach = UNDEFINED
