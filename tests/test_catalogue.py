# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the catalogue and render roots."""

from types import ModuleType
from unittest.mock import Mock

import pytest

import genro_fiber
from genro_fiber import (
    Catalogue,
    FiberError,
    RenderRoot,
    Size,
    UnknownElementError,
    apply_props,
    catalogue,
    prepare,
)
from genro_fiber.catalogue import to_pascal_case
from genro_fiber.objects import (
    Mesh,
    MeshBasicMaterial,
    OrthographicCamera,
    PerspectiveCamera,
    Texture,
)


class Sprite:
    """Custom object registered by tests."""

    type = 'Sprite'


class TestPascalCase:
    """Tests for to_pascal_case()."""

    def test_converts_first_letter(self):
        assert to_pascal_case('mesh') == 'Mesh'
        assert to_pascal_case('meshBasicMaterial') == 'MeshBasicMaterial'
        assert to_pascal_case('Mesh') == 'Mesh'
        assert to_pascal_case('') == ''


class TestCatalogue:
    """Tests for Catalogue."""

    def test_default_catalogue(self):
        """Test the built-in objects are registered."""
        assert 'mesh' in catalogue
        assert 'perspectiveCamera' in catalogue
        assert catalogue.get('meshBasicMaterial') is MeshBasicMaterial
        assert isinstance(catalogue.create('mesh'), Mesh)

    def test_create_with_args(self):
        """Test positional args are passed to the constructor."""
        camera = catalogue.create('perspectiveCamera', 75, 2)
        assert isinstance(camera, PerspectiveCamera)
        assert (camera.fov, camera.aspect) == (75, 2)

    def test_unknown_type(self):
        """Test unknown tags raise UnknownElementError."""
        cat = Catalogue()
        assert cat.get('sprite') is None
        assert cat.get('') is None
        with pytest.raises(UnknownElementError, match="not part of the catalogue"):
            cat.create('sprite')

    def test_unknown_type_is_key_error(self):
        """Test UnknownElementError is catchable as KeyError and FiberError."""
        cat = Catalogue()
        with pytest.raises(KeyError):
            cat.create('sprite')
        with pytest.raises(FiberError):
            cat.create('sprite')

    def test_extend_with_dict(self):
        """Test registering constructors from a dict."""
        cat = Catalogue()
        cat.extend({'sprite': Sprite})
        assert 'sprite' in cat
        assert 'Sprite' in cat
        assert cat.names() == ['Sprite']
        assert isinstance(cat.create('sprite'), Sprite)

    def test_extend_with_module(self):
        """Test registering the public classes of a module."""
        module = ModuleType('custom_objects')
        module.Sprite = Sprite
        module.HELPER = 42
        module._Hidden = Sprite
        cat = Catalogue(module)

        assert list(cat) == ['Sprite']
        assert len(cat) == 1

    def test_extend_with_module_all(self):
        """Test a module's __all__ limits what is registered."""
        module = ModuleType('custom_objects')
        module.Sprite = Sprite
        module.Texture = Texture
        module.__all__ = ['Texture']
        cat = Catalogue(module)
        assert cat.names() == ['Texture']

    def test_rejects_non_callables(self):
        """Test values that cannot construct are rejected."""
        with pytest.raises(TypeError):
            Catalogue({'sprite': 42})

    def test_module_level_extend(self):
        """Test extend() registers in the shared catalogue."""
        genro_fiber.extend({'Sprite': Sprite})
        try:
            assert isinstance(catalogue.create('sprite'), Sprite)
        finally:
            catalogue._constructors.pop('Sprite', None)


class TestRenderRoot:
    """Tests for RenderRoot."""

    def test_defaults(self):
        """Test a root is non-linear with an empty size."""
        root = RenderRoot()
        assert root.linear is False
        assert root.size == Size(0, 0)
        assert root.camera is None
        assert root.get_catalogue() is catalogue

    def test_own_catalogue(self):
        """Test a root's catalogue builds pierced defaults."""
        texture_factory = Mock(side_effect=Texture)
        root = RenderRoot(catalogue=Catalogue({'texture': texture_factory}))
        assert root.get_catalogue().get('texture') is texture_factory

        material = prepare(MeshBasicMaterial(), root, 'meshBasicMaterial', {}).object
        apply_props(material, {'map-name': 'diffuse'})
        texture_factory.assert_called_once_with()
        assert material.map.name == 'diffuse'

    def test_set_size_updates_camera(self):
        """Test resizing refreshes the default camera."""
        root = RenderRoot(camera=PerspectiveCamera())
        size = root.set_size(1280, 800)
        assert size == Size(1280, 800, 0, 0)
        assert root.size is size
        assert root.camera.aspect == 1.6

        root = RenderRoot(camera=OrthographicCamera())
        root.set_size(200, 100, left=10)
        assert root.camera.right == 100
        assert root.size.left == 10

    def test_set_size_without_camera(self):
        """Test resizing a root without camera only stores the size."""
        root = RenderRoot()
        root.set_size(10, 20)
        assert (root.size.width, root.size.height) == (10, 20)
