"""Tests for mapper registration, lookup and configuration."""

import logging

import pytest

import panel_mapper.registry as registry_module
from panel_mapper.mappers import PixelMapper, RotatePixelMapper, Size
from panel_mapper.registry import (
    MapperRegistry,
    find_pixel_mapper,
    get_available_pixel_mappers,
    get_default_registry,
    register_pixel_mapper,
)
from panel_mapper.validation import UnknownMapperError


class ShiftMapper(PixelMapper):
    """Test mapper that shifts x by a fixed offset, wrapping around."""

    name = "Shift"

    def __init__(self):
        self.offset = 0

    def set_parameters(self, chain, parallel, param=None):
        self.offset = int(param or 0)

    def get_size_mapping(self, matrix_width, matrix_height):
        return Size(matrix_width, matrix_height)

    def map_visible_to_matrix(self, matrix_width, matrix_height, x, y):
        return (x + self.offset) % matrix_width, y


@pytest.fixture
def fresh_default_registry(monkeypatch):
    """Make the module-level functions start from a new default registry."""
    monkeypatch.setattr(registry_module, "_default_registry", None)


def test_lists_builtins_alphabetically(registry):
    assert registry.list_names() == ["Mirror", "Rotate", "U-mapper", "V-mapper", "Windmill"]
    assert len(registry) == 5


def test_lookup_is_case_insensitive(registry):
    upper = registry.find("ROTATE", 1, 1, "90")
    lower = registry.find("rotate", 1, 1, "90")
    assert isinstance(upper, RotatePixelMapper)
    assert isinstance(lower, RotatePixelMapper)
    assert upper.get_name() == lower.get_name() == "Rotate"
    assert "u-MAPPER" in registry


def test_unknown_name_returns_none(registry, caplog):
    with caplog.at_level(logging.ERROR):
        assert registry.find("NoSuchMapper", 1, 1) is None
    assert "NoSuchMapper: no such mapper" in caplog.text


def test_get_raises_for_unknown_name(registry):
    with pytest.raises(UnknownMapperError) as excinfo:
        registry.get("nope")
    assert str(excinfo.value) == "nope: no such mapper"
    # still catchable as a lookup failure
    with pytest.raises(KeyError):
        registry.get("nope")


def test_rejected_configuration_returns_none(registry, caplog):
    with caplog.at_level(logging.ERROR):
        assert registry.find("Windmill", 2, 1) is None
        assert registry.find("Rotate", 1, 1, "45") is None
        assert registry.find("Mirror", 1, 1, "X") is None
        assert registry.find("U-mapper", 3, 1) is None
    assert "requires parallel=2" in caplog.text
    assert "multiple of 90" in caplog.text


def test_find_returns_independent_configured_copies(registry):
    first = registry.find("Rotate", 1, 1, "90")
    second = registry.find("Rotate", 1, 1, "180")
    assert first is not second
    assert first.angle == 90
    assert second.angle == 180
    # the prototype is never configured
    assert registry.get("rotate").angle == 0


def test_register_custom_mapper(registry):
    registry.register(ShiftMapper())
    assert "Shift" in registry.list_names()
    m = registry.find("shift", 1, 1, "3")
    assert m.map_visible_to_matrix(8, 4, 6, 1) == (1, 1)


def test_last_registration_wins(registry):
    class OtherRotate(ShiftMapper):
        name = "ROTATE"

    registry.register(OtherRotate())
    assert isinstance(registry.find("rotate", 1, 1), OtherRotate)
    assert registry.list_names().count("ROTATE") == 1
    assert "Rotate" not in registry.list_names()


def test_register_none_is_an_error(registry):
    with pytest.raises(TypeError):
        registry.register(None)


def test_default_registry_is_created_once(fresh_default_registry):
    first = get_default_registry()
    assert get_default_registry() is first
    assert get_available_pixel_mappers() == first.list_names()


def test_module_level_functions(fresh_default_registry):
    register_pixel_mapper(ShiftMapper())
    assert "Shift" in get_available_pixel_mappers()
    assert find_pixel_mapper("SHIFT", 1, 1, "1") is not None
    assert find_pixel_mapper("missing", 1, 1) is None
    windmill = find_pixel_mapper("windmill", 2, 2, "Z,S")
    assert (windmill.z, windmill.swap_lr) == (True, True)


def test_independent_registries_dont_share_entries():
    a = MapperRegistry.with_builtins()
    b = MapperRegistry()
    a.register(ShiftMapper())
    assert "shift" in a
    assert "shift" not in b
    assert b.find("rotate", 1, 1) is None
