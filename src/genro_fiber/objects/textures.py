# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Textures and their format constants."""

from __future__ import annotations

from typing import Any

from .math3d import Vector2

RGBA_FORMAT = 1023
RGB_FORMAT = 1022
UNSIGNED_BYTE_TYPE = 1009
FLOAT_TYPE = 1015

NO_COLOR_SPACE = ''
SRGB_COLOR_SPACE = 'srgb'
LINEAR_SRGB_COLOR_SPACE = 'srgb-linear'


class Texture:
    """Image sampled by materials."""

    type = 'Texture'
    is_texture = True

    def __init__(self, image: Any = None) -> None:
        self.name = ''
        self.image = image
        self.repeat = Vector2(1, 1)
        self.offset = Vector2(0, 0)
        self.format = RGBA_FORMAT
        self.type = UNSIGNED_BYTE_TYPE
        self.color_space = NO_COLOR_SPACE
        self.needs_update = False
        self.disposed = False

    def __repr__(self) -> str:
        name = f"{self.name!r}" if self.name else ''
        return f"Texture({name})"

    def dispose(self) -> None:
        self.disposed = True
