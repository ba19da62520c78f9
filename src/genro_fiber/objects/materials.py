# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Materials.

``property_types`` maps texture slots, empty by default, to the element
type constructed when a pierced prop such as ``'map-repeat'`` addresses
the slot before a texture was assigned.
"""

from __future__ import annotations

from typing import Any

from .math3d import Color
from .textures import Texture

FRONT_SIDE = 0
BACK_SIDE = 1
DOUBLE_SIDE = 2


class Material:
    """Base material."""

    type = 'Material'
    is_material = True
    property_types: dict[str, str] = {}

    def __init__(self) -> None:
        self.name = ''
        self.opacity = 1.0
        self.transparent = False
        self.visible = True
        self.side = FRONT_SIDE
        self.needs_update = False
        self.disposed = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def dispose(self) -> None:
        self.disposed = True


class MeshBasicMaterial(Material):
    """Unlit material."""

    type = 'MeshBasicMaterial'
    property_types = {'map': 'texture', 'alpha_map': 'texture'}

    def __init__(self) -> None:
        super().__init__()
        self.color = Color(0xFFFFFF)
        self.map: Texture | None = None
        self.alpha_map: Texture | None = None
        self.wireframe = False


class MeshStandardMaterial(Material):
    """Physically based material (metallic-roughness)."""

    type = 'MeshStandardMaterial'
    property_types = {
        'map': 'texture',
        'emissive_map': 'texture',
        'normal_map': 'texture',
        'roughness_map': 'texture',
        'metalness_map': 'texture',
        'env_map': 'texture',
    }

    def __init__(self) -> None:
        super().__init__()
        self.color = Color(0xFFFFFF)
        self.emissive = Color(0x000000)
        self.roughness = 1.0
        self.metalness = 0.0
        self.map: Texture | None = None
        self.emissive_map: Texture | None = None
        self.normal_map: Texture | None = None
        self.roughness_map: Texture | None = None
        self.metalness_map: Texture | None = None
        self.env_map: Texture | None = None
        self.defines: dict[str, Any] = {}
