# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Scene-graph objects."""

from __future__ import annotations

from typing import Any

from .geometries import BufferGeometry
from .materials import Material, MeshBasicMaterial
from .math3d import Euler, Layers, Vector3


class Object3D:
    """Base scene-graph node with a transform and children.

    Example:
        >>> parent = Object3D()
        >>> child = parent.add(Object3D()).children[0]
        >>> child.parent is parent
        True
    """

    type = 'Object3D'
    is_object3d = True

    def __init__(self) -> None:
        self.name = ''
        self.parent: Object3D | None = None
        self.children: list[Object3D] = []
        self.position = Vector3()
        self.rotation = Euler()
        self.scale = Vector3(1, 1, 1)
        self.layers = Layers()
        self.visible = True
        self.user_data: dict[str, Any] = {}

    def __repr__(self) -> str:
        name = f" {self.name!r}" if self.name else ''
        return f"{type(self).__name__}({self.type}{name})"

    def add(self, *objects: Object3D) -> Object3D:
        """Add children, detaching them from any previous parent."""
        for obj in objects:
            if obj is self:
                raise ValueError("An object cannot be added as a child of itself")
            if obj.parent is not None:
                obj.parent.remove(obj)
            obj.parent = self
            self.children.append(obj)
        return self

    def remove(self, *objects: Object3D) -> Object3D:
        """Remove children; objects that are not children are ignored."""
        for obj in objects:
            if obj in self.children:
                self.children.remove(obj)
                obj.parent = None
        return self

    def traverse(self, callback: Any) -> None:
        """Call ``callback`` on this object and every descendant."""
        callback(self)
        for child in self.children:
            child.traverse(callback)


class Group(Object3D):
    """Object3D used purely to group children."""

    type = 'Group'


class Scene(Object3D):
    """Root container of a scene graph.

    Its children have independent lifecycles and are never disposed along
    with it.
    """

    type = 'Scene'
    is_scene = True

    def __init__(self) -> None:
        super().__init__()
        self.background: Any = None
        self.environment: Any = None


class Mesh(Object3D):
    """Object3D rendered from a geometry and a material."""

    type = 'Mesh'
    is_mesh = True

    def __init__(
        self,
        geometry: BufferGeometry | None = None,
        material: Material | list[Material] | None = None,
    ) -> None:
        super().__init__()
        self.geometry = geometry if geometry is not None else BufferGeometry()
        self.material = material if material is not None else MeshBasicMaterial()
