# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Geometries."""

from __future__ import annotations

from typing import Any


class BufferGeometry:
    """Vertex data container. Owns GPU resources, freed by ``dispose``."""

    type = 'BufferGeometry'
    is_buffer_geometry = True

    def __init__(self) -> None:
        self.name = ''
        self.attributes: dict[str, Any] = {}
        self.parameters: dict[str, Any] = {}
        self.disposed = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.parameters})"

    def dispose(self) -> None:
        self.disposed = True


class BoxGeometry(BufferGeometry):
    """Axis-aligned box."""

    type = 'BoxGeometry'

    def __init__(
        self,
        width: float = 1,
        height: float = 1,
        depth: float = 1,
        width_segments: int = 1,
        height_segments: int = 1,
        depth_segments: int = 1,
    ) -> None:
        super().__init__()
        self.parameters = {
            'width': width,
            'height': height,
            'depth': depth,
            'width_segments': width_segments,
            'height_segments': height_segments,
            'depth_segments': depth_segments,
        }
