# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Live objects driven by the reconciler - math values and scene graph."""

from .cameras import Camera, OrthographicCamera, PerspectiveCamera
from .core import Group, Mesh, Object3D, Scene
from .geometries import BoxGeometry, BufferGeometry
from .materials import Material, MeshBasicMaterial, MeshStandardMaterial
from .math3d import Color, Euler, Layers, Matrix4, Vector2, Vector3
from .textures import (
    LINEAR_SRGB_COLOR_SPACE,
    NO_COLOR_SPACE,
    RGBA_FORMAT,
    SRGB_COLOR_SPACE,
    UNSIGNED_BYTE_TYPE,
    Texture,
)

__all__ = [
    # Math
    'Vector2',
    'Vector3',
    'Euler',
    'Color',
    'Layers',
    'Matrix4',
    # Scene graph
    'Object3D',
    'Group',
    'Scene',
    'Mesh',
    # Resources
    'BufferGeometry',
    'BoxGeometry',
    'Material',
    'MeshBasicMaterial',
    'MeshStandardMaterial',
    'Texture',
    # Cameras
    'Camera',
    'PerspectiveCamera',
    'OrthographicCamera',
    # Constants
    'RGBA_FORMAT',
    'UNSIGNED_BYTE_TYPE',
    'NO_COLOR_SPACE',
    'SRGB_COLOR_SPACE',
    'LINEAR_SRGB_COLOR_SPACE',
]
