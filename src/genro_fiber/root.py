# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Render root: the ambient context shared by every instance of a tree."""

from __future__ import annotations

from typing import Any, NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .catalogue import Catalogue


class Size(NamedTuple):
    """Viewport size in pixels."""

    width: float
    height: float
    left: float = 0
    top: float = 0


class RenderRoot:
    """Defaults an instance resolves from its (initial) root.

    Attributes:
        catalogue: Type registry used to construct default objects.
            None means the module-level catalogue.
        linear: If False, textures assigned to colour maps are flagged
            as sRGB.
        camera: Default camera, refreshed when the size changes.
        size: Current viewport size.
        previous_root: Root this one was created from (portals).

    Example:
        >>> root = RenderRoot(camera=PerspectiveCamera())
        >>> root.set_size(1280, 800)
        >>> root.camera.aspect
        1.6
    """

    __slots__ = ('catalogue', 'linear', 'camera', 'size', 'previous_root')

    def __init__(
        self,
        catalogue: Catalogue | None = None,
        linear: bool = False,
        camera: Any = None,
        previous_root: RenderRoot | None = None,
    ) -> None:
        self.catalogue = catalogue
        self.linear = linear
        self.camera = camera
        self.size = Size(0, 0)
        self.previous_root = previous_root

    def __repr__(self) -> str:
        return f"RenderRoot(size={tuple(self.size)}, linear={self.linear})"

    def get_catalogue(self) -> Catalogue:
        """Return this root's catalogue, or the module-level one."""
        if self.catalogue is not None:
            return self.catalogue
        from .catalogue import catalogue
        return catalogue

    def set_size(
        self, width: float, height: float, left: float = 0, top: float = 0
    ) -> Size:
        """Store a new viewport size and refresh the default camera."""
        from .reconciler.lifecycle import update_camera

        self.size = Size(width, height, left, top)
        if self.camera is not None:
            update_camera(self.camera, self.size)
        return self.size
