# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Resource disposal and camera projection refresh."""

from __future__ import annotations

from typing import Any

from ..predicates import UNDEFINED
from ..root import Size
from .paths import read

#: Object types owning children with independent lifecycles.
NON_DISPOSABLE_TYPES = frozenset({'Scene'})

#: Fields commonly holding resources owned by the object.
SUBRESOURCE_FIELDS = ('geometry', 'material', 'map', 'skeleton', 'render_target', 'scene')


def _dispose_one(target: Any) -> None:
    if read(target, 'type') in NON_DISPOSABLE_TYPES:
        return
    method = read(target, 'dispose')
    if callable(method):
        method()


def dispose(target: Any) -> None:
    """Dispose ``target`` and the resources it owns, one level deep.

    Scenes are never disposed: their children are managed by whoever
    added them.

    Example:
        >>> mesh = Mesh()
        >>> dispose(mesh)
        >>> mesh.geometry.disposed, mesh.material.disposed
        (True, True)
    """
    _dispose_one(target)
    for field in SUBRESOURCE_FIELDS:
        value = read(target, field)
        if isinstance(value, (list, tuple)):
            for item in value:
                _dispose_one(item)
        elif value is not None and value is not UNDEFINED:
            _dispose_one(value)


def update_camera(camera: Any, size: Size) -> None:
    """Fit a camera's frustum to the viewport and refresh its projection.

    Cameras flagged ``manual`` are left alone. Orthographic cameras are
    recognised by their ``left``/``right``/``top``/``bottom`` extents,
    perspective cameras by their ``aspect``.
    """
    if getattr(camera, 'manual', False):
        return

    if all(hasattr(camera, name) for name in ('left', 'right', 'top', 'bottom')):
        camera.left = size.width / -2
        camera.right = size.width / 2
        camera.top = size.height / 2
        camera.bottom = size.height / -2
    elif hasattr(camera, 'aspect') and size.height:
        camera.aspect = size.width / size.height

    update = getattr(camera, 'update_projection_matrix', None)
    if callable(update):
        update()
