# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pytest configuration and shared fixtures."""

from collections.abc import Mapping

import pytest

from genro_fiber import RenderRoot


class SpyProps(Mapping):
    """Prop bag recording every key whose value is read."""

    def __init__(self, data):
        self._data = dict(data)
        self.reads = []

    def __getitem__(self, key):
        self.reads.append(key)
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)


@pytest.fixture
def store():
    """Provide a fresh render root."""
    return RenderRoot()


@pytest.fixture
def spy_props():
    """Build a SpyProps from a dict."""
    return SpyProps
