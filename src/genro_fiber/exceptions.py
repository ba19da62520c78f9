# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fiber exceptions."""

from __future__ import annotations


class FiberError(Exception):
    """Base exception for fiber errors."""

    pass


class UnknownElementError(FiberError, KeyError):
    """Raised when a type tag has no constructor in the catalogue."""

    pass


class InvalidAttachError(FiberError, TypeError):
    """Raised when an attach directive is neither a path nor a callable."""

    pass
