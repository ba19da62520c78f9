# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value classification and configurable equality.

Live objects handed to the reconciler are heterogeneous: mappings, class
instances from any library, sequences and plain scalars. The helpers here
classify a value by kind without raising, and compare values with the
reference/shallow rules the prop differ relies on.

``UNDEFINED`` marks the absence of a value. It is distinct from ``None``,
which is a real value a slot can hold (and be restored to).

Example:
    >>> is_.arr([1, 2, 3])
    True
    >>> is_.equ({'a': 1}, {'a': 1})
    False
    >>> is_.equ({'a': 1}, {'a': 1}, objects='shallow')
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

Comparison = Literal['reference', 'shallow']

PRIMITIVE_TYPES = (str, bytes, int, float, complex, bool)


class _Undefined:
    """Type of the ``UNDEFINED`` singleton."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self


UNDEFINED: Any = _Undefined()


def is_primitive(value: Any) -> bool:
    """True for None and scalar builtins (numbers, strings, bytes, bools)."""
    return value is None or isinstance(value, PRIMITIVE_TYPES)


def _kind(value: Any) -> str:
    if value is UNDEFINED:
        return 'undefined'
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, (str, bytes)):
        return 'string'
    if isinstance(value, (list, tuple)):
        return 'array'
    if isinstance(value, Mapping):
        return 'mapping'
    if callable(value):
        return 'function'
    return 'object'


def _same(a: Any, b: Any) -> bool:
    """Strict equality: by value for primitives, by identity otherwise."""
    if is_primitive(a) and is_primitive(b):
        return _kind(a) == _kind(b) and a == b
    return a is b


class Is:
    """Namespace of value predicates, exported as ``is_``."""

    @staticmethod
    def fun(value: Any) -> bool:
        return callable(value) and not isinstance(value, type)

    @staticmethod
    def obj(value: Any) -> bool:
        return _kind(value) in ('mapping', 'object')

    @staticmethod
    def str(value: Any) -> bool:
        return isinstance(value, str)

    @staticmethod
    def num(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def boo(value: Any) -> bool:
        return isinstance(value, bool)

    @staticmethod
    def und(value: Any) -> bool:
        return value is UNDEFINED

    @staticmethod
    def arr(value: Any) -> bool:
        return isinstance(value, (list, tuple))

    @staticmethod
    def equ(
        a: Any,
        b: Any,
        objects: Comparison = 'reference',
        arrays: Comparison = 'shallow',
        strict: bool = True,
    ) -> bool:
        """Compare two values.

        Args:
            a: First value.
            b: Second value.
            objects: 'reference' compares mappings by identity, 'shallow'
                compares their keys and values.
            arrays: 'shallow' compares lists/tuples element-wise,
                'reference' by identity.
            strict: If False, ``a`` may be a prefix (arrays) or a subset
                (mappings) of ``b``.

        Returns:
            True if the values are considered equal. Values of different
            kinds are never equal.
        """
        kind = _kind(a)
        if kind != _kind(b):
            return False

        if kind == 'array':
            if arrays == 'reference':
                return a is b
            if a is b:
                return True
            if len(a) > len(b) or (strict and len(a) != len(b)):
                return False
            return all(_same(x, y) for x, y in zip(a, b))

        if kind == 'mapping':
            if objects == 'reference':
                return a is b
            if a is b:
                return True
            if any(k not in b for k in a):
                return False
            if strict and len(a) != len(b):
                return False
            if arrays == 'shallow':
                return all(
                    Is.equ(a[k], b[k], objects='reference', strict=strict)
                    for k in a
                )
            return all(_same(a[k], b[k]) for k in a)

        return _same(a, b)


is_ = Is()
