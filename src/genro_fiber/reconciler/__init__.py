# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Reconciler core - paths, attachment, props and lifecycle helpers."""

from .attach import INDEX_PATTERN, attach, detach
from .lifecycle import NON_DISPOSABLE_TYPES, SUBRESOURCE_FIELDS, dispose, update_camera
from .paths import PIERCE_DELIMITER, ResolvedPath, resolve
from .props import COLOR_MAPS, apply_props, diff_props

__all__ = [
    'attach',
    'detach',
    'resolve',
    'ResolvedPath',
    'diff_props',
    'apply_props',
    'dispose',
    'update_camera',
    'INDEX_PATTERN',
    'PIERCE_DELIMITER',
    'COLOR_MAPS',
    'NON_DISPOSABLE_TYPES',
    'SUBRESOURCE_FIELDS',
]
