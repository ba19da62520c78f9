# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value classes: vectors, Euler angles, colours, layers and matrices.

Value classes are mutated in place through ``set``/``copy`` so that anyone
holding a reference to, say, an object's position keeps seeing the live
value. The reconciler relies on that surface when applying props.
"""

from __future__ import annotations

import math
from typing import Any, Iterator, Sequence


class Vector2:
    """2D vector."""

    __slots__ = ('x', 'y', '__weakref__')

    is_vector2 = True

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def set(self, x: float, y: float) -> Vector2:
        self.x = x
        self.y = y
        return self

    def set_scalar(self, scalar: float) -> Vector2:
        self.x = self.y = scalar
        return self

    def copy(self, v: Vector2) -> Vector2:
        self.x = v.x
        self.y = v.y
        return self

    def clone(self) -> Vector2:
        return type(self)(self.x, self.y)

    def from_array(self, array: Sequence[float], offset: int = 0) -> Vector2:
        self.x = array[offset]
        self.y = array[offset + 1]
        return self

    def to_array(self) -> list[float]:
        return [self.x, self.y]


class Vector3:
    """3D vector.

    Example:
        >>> v = Vector3().set_scalar(5)
        >>> v.to_array()
        [5, 5, 5]
    """

    __slots__ = ('x', 'y', 'z', '__weakref__')

    is_vector3 = True

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = x
        self.y = y
        self.z = z

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def set(self, x: float, y: float, z: float) -> Vector3:
        self.x = x
        self.y = y
        self.z = z
        return self

    def set_scalar(self, scalar: float) -> Vector3:
        self.x = self.y = self.z = scalar
        return self

    def copy(self, v: Vector3) -> Vector3:
        self.x = v.x
        self.y = v.y
        self.z = v.z
        return self

    def clone(self) -> Vector3:
        return type(self)(self.x, self.y, self.z)

    def from_array(self, array: Sequence[float], offset: int = 0) -> Vector3:
        self.x = array[offset]
        self.y = array[offset + 1]
        self.z = array[offset + 2]
        return self

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z]


class Euler:
    """Rotation as angles in radians around the axes, applied in ``order``."""

    __slots__ = ('x', 'y', 'z', 'order', '__weakref__')

    is_euler = True

    DEFAULT_ORDER = 'XYZ'

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, order: str = DEFAULT_ORDER
    ) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.order = order

    def __repr__(self) -> str:
        return f"Euler({self.x}, {self.y}, {self.z}, {self.order!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Euler):
            return NotImplemented
        return self.to_array() == other.to_array()

    def set(self, x: float, y: float, z: float, order: str | None = None) -> Euler:
        self.x = x
        self.y = y
        self.z = z
        self.order = order or self.order
        return self

    def copy(self, euler: Euler) -> Euler:
        return self.set(euler.x, euler.y, euler.z, euler.order)

    def clone(self) -> Euler:
        return type(self)(self.x, self.y, self.z, self.order)

    def from_array(self, array: Sequence[Any]) -> Euler:
        order = array[3] if len(array) > 3 else None
        return self.set(array[0], array[1], array[2], order)

    def to_array(self) -> list[Any]:
        return [self.x, self.y, self.z, self.order]


# CSS colour keywords, a subset
COLOR_KEYWORDS: dict[str, int] = {
    'black': 0x000000,
    'white': 0xFFFFFF,
    'red': 0xFF0000,
    'lime': 0x00FF00,
    'green': 0x008000,
    'blue': 0x0000FF,
    'yellow': 0xFFFF00,
    'cyan': 0x00FFFF,
    'magenta': 0xFF00FF,
    'orange': 0xFFA500,
    'purple': 0x800080,
    'pink': 0xFFC0CB,
    'gray': 0x808080,
    'grey': 0x808080,
    'silver': 0xC0C0C0,
    'hotpink': 0xFF69B4,
    'skyblue': 0x87CEEB,
    'navy': 0x000080,
    'teal': 0x008080,
    'maroon': 0x800000,
    'olive': 0x808000,
}


class Color:
    """RGB colour with components in [0, 1].

    ``set`` accepts another Color, a hex integer, a CSS keyword or
    '#rrggbb'/'#rgb' string, or three components.

    Example:
        >>> Color('red').get_hex() == 0xFF0000
        True
    """

    __slots__ = ('r', 'g', 'b', '__weakref__')

    is_color = True

    def __init__(self, *args: Any) -> None:
        self.r = 1.0
        self.g = 1.0
        self.b = 1.0
        if args:
            self.set(*args)

    def __repr__(self) -> str:
        return f"Color(0x{self.get_hex():06x})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def set(self, *args: Any) -> Color:
        if len(args) == 3:
            return self.set_rgb(*args)
        if len(args) != 1:
            raise TypeError(f"Color.set() takes 1 or 3 arguments ({len(args)} given)")
        value = args[0]
        if isinstance(value, Color):
            return self.copy(value)
        if isinstance(value, bool):
            raise TypeError("Color.set() does not accept booleans")
        if isinstance(value, int):
            return self.set_hex(value)
        if isinstance(value, str):
            return self.set_style(value)
        raise TypeError(f"Cannot set a Color from {type(value).__name__}")

    def set_rgb(self, r: float, g: float, b: float) -> Color:
        self.r = r
        self.g = g
        self.b = b
        return self

    def set_scalar(self, scalar: float) -> Color:
        self.r = self.g = self.b = scalar
        return self

    def set_hex(self, hex_value: int) -> Color:
        hex_value = int(hex_value) & 0xFFFFFF
        self.r = (hex_value >> 16 & 255) / 255
        self.g = (hex_value >> 8 & 255) / 255
        self.b = (hex_value & 255) / 255
        return self

    def set_style(self, style: str) -> Color:
        style = style.strip().lower()
        if style in COLOR_KEYWORDS:
            return self.set_hex(COLOR_KEYWORDS[style])
        if style.startswith('#'):
            digits = style[1:]
            if len(digits) == 3:
                digits = ''.join(c * 2 for c in digits)
            if len(digits) == 6:
                try:
                    return self.set_hex(int(digits, 16))
                except ValueError:
                    pass
        raise ValueError(f"Unknown colour '{style}'")

    def get_hex(self) -> int:
        def channel(value: float) -> int:
            return max(0, min(255, round(value * 255)))

        return channel(self.r) << 16 | channel(self.g) << 8 | channel(self.b)

    def copy(self, color: Color) -> Color:
        return self.set_rgb(color.r, color.g, color.b)

    def clone(self) -> Color:
        return type(self)().copy(self)

    def from_array(self, array: Sequence[float], offset: int = 0) -> Color:
        return self.set_rgb(array[offset], array[offset + 1], array[offset + 2])

    def to_array(self) -> list[float]:
        return [self.r, self.g, self.b]


class Layers:
    """Bit mask of the 32 render layers an object belongs to."""

    __slots__ = ('mask', '__weakref__')

    is_layers = True

    def __init__(self) -> None:
        self.mask = 1

    def __repr__(self) -> str:
        return f"Layers(0b{self.mask:b})"

    def set(self, channel: int) -> Layers:
        self.mask = (1 << channel) & 0xFFFFFFFF
        return self

    def enable(self, channel: int) -> Layers:
        self.mask |= 1 << channel
        return self

    def disable(self, channel: int) -> Layers:
        self.mask &= ~(1 << channel)
        return self

    def test(self, layers: Layers) -> bool:
        return (self.mask & layers.mask) != 0


class Matrix4:
    """4x4 matrix, elements stored column-major."""

    __slots__ = ('elements', '__weakref__')

    is_matrix4 = True

    def __init__(self) -> None:
        self.elements = [
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ]

    def __repr__(self) -> str:
        return f"Matrix4({self.elements})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.elements == other.elements

    def set(self, *values: float) -> Matrix4:
        """Set from 16 values given in row-major order."""
        if len(values) != 16:
            raise TypeError(f"Matrix4.set() takes 16 values ({len(values)} given)")
        self.elements = [values[row * 4 + col] for col in range(4) for row in range(4)]
        return self

    def identity(self) -> Matrix4:
        self.elements = Matrix4().elements
        return self

    def copy(self, m: Matrix4) -> Matrix4:
        self.elements = list(m.elements)
        return self

    def clone(self) -> Matrix4:
        return type(self)().copy(self)

    def from_array(self, array: Sequence[float], offset: int = 0) -> Matrix4:
        self.elements = [float(v) for v in array[offset:offset + 16]]
        return self

    def to_array(self) -> list[float]:
        return list(self.elements)

    def make_perspective(
        self, left: float, right: float, top: float, bottom: float, near: float, far: float
    ) -> Matrix4:
        # A degenerate frustum leaves the matrix untouched
        if right == left or top == bottom or far == near:
            return self
        x = 2 * near / (right - left)
        y = 2 * near / (top - bottom)
        a = (right + left) / (right - left)
        b = (top + bottom) / (top - bottom)
        c = -(far + near) / (far - near)
        d = -2 * far * near / (far - near)
        self.elements = [
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            a, b, c, -1.0,
            0.0, 0.0, d, 0.0,
        ]
        return self

    def make_orthographic(
        self, left: float, right: float, top: float, bottom: float, near: float, far: float
    ) -> Matrix4:
        if right == left or top == bottom or far == near:
            return self
        w = 1.0 / (right - left)
        h = 1.0 / (top - bottom)
        p = 1.0 / (far - near)
        x = (right + left) * w
        y = (top + bottom) * h
        z = (far + near) * p
        self.elements = [
            2 * w, 0.0, 0.0, 0.0,
            0.0, 2 * h, 0.0, 0.0,
            0.0, 0.0, -2 * p, 0.0,
            -x, -y, -z, 1.0,
        ]
        return self


DEG2RAD = math.pi / 180
