# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Cameras."""

from __future__ import annotations

import math

from .core import Object3D
from .math3d import DEG2RAD, Matrix4


class Camera(Object3D):
    """Abstract camera holding a projection matrix."""

    type = 'Camera'
    is_camera = True

    def __init__(self) -> None:
        super().__init__()
        self.projection_matrix = Matrix4()
        self.matrix_world_inverse = Matrix4()

    def update_projection_matrix(self) -> None:
        pass


class PerspectiveCamera(Camera):
    """Camera with a perspective frustum.

    Args:
        fov: Vertical field of view in degrees.
        aspect: Width over height of the viewport.
        near: Near clipping plane.
        far: Far clipping plane.
    """

    type = 'PerspectiveCamera'
    is_perspective_camera = True

    def __init__(
        self, fov: float = 50, aspect: float = 1, near: float = 0.1, far: float = 2000
    ) -> None:
        super().__init__()
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.zoom = 1
        self.update_projection_matrix()

    def update_projection_matrix(self) -> None:
        top = self.near * math.tan(DEG2RAD * 0.5 * self.fov) / self.zoom
        height = 2 * top
        width = self.aspect * height
        left = -0.5 * width
        self.projection_matrix.make_perspective(
            left, left + width, top, top - height, self.near, self.far
        )


class OrthographicCamera(Camera):
    """Camera with a box-shaped frustum."""

    type = 'OrthographicCamera'
    is_orthographic_camera = True

    def __init__(
        self,
        left: float = -1,
        right: float = 1,
        top: float = 1,
        bottom: float = -1,
        near: float = 0.1,
        far: float = 2000,
    ) -> None:
        super().__init__()
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom
        self.near = near
        self.far = far
        self.zoom = 1
        self.update_projection_matrix()

    def update_projection_matrix(self) -> None:
        dx = (self.right - self.left) / (2 * self.zoom)
        dy = (self.top - self.bottom) / (2 * self.zoom)
        cx = (self.right + self.left) / 2
        cy = (self.top + self.bottom) / 2
        self.projection_matrix.make_orthographic(
            cx - dx, cx + dx, cy + dy, cy - dy, self.near, self.far
        )
