"""Tests for the Rotate and Mirror mappers."""

import pytest

from panel_mapper.mappers import MirrorPixelMapper, RotatePixelMapper, Size
from panel_mapper.validation import ParameterError


def make_rotate(param=None) -> RotatePixelMapper:
    m = RotatePixelMapper()
    m.set_parameters(1, 1, param)
    return m


@pytest.mark.parametrize("param", [None, "", "0", "360"])
def test_rotate_zero_is_identity(param):
    m = make_rotate(param)
    assert m.angle == 0
    assert m.get_size_mapping(64, 32) == Size(64, 32)
    for x, y in [(0, 0), (63, 0), (10, 20), (63, 31)]:
        assert m.map_visible_to_matrix(64, 32, x, y) == (x, y)


def test_rotate_swaps_size_for_quarter_turns():
    assert make_rotate("90").get_size_mapping(64, 32) == Size(32, 64)
    assert make_rotate("180").get_size_mapping(64, 32) == Size(64, 32)
    assert make_rotate("270").get_size_mapping(64, 32) == Size(32, 64)


def test_rotate_coordinates():
    assert make_rotate("90").map_visible_to_matrix(64, 32, 5, 2) == (61, 5)
    assert make_rotate("180").map_visible_to_matrix(64, 32, 5, 2) == (58, 29)
    assert make_rotate("270").map_visible_to_matrix(64, 32, 5, 2) == (2, 26)


def test_rotate_normalizes_angle():
    assert make_rotate("-90").angle == 270
    assert make_rotate("450").angle == 90
    assert make_rotate(" +180").angle == 180


@pytest.mark.parametrize("param", ["45", "90x", "abc", "9 0", "90 "])
def test_rotate_rejects_bad_parameter(param):
    with pytest.raises(ParameterError):
        make_rotate(param)


def test_four_quarter_turns_compose_to_identity():
    m = make_rotate("90")
    w, h = 64, 32
    for start in [(0, 0), (31, 63), (7, 40)]:
        x, y = start
        # visible space of a 90 degree rotation over (w, h) is (h, w)
        for _ in range(4):
            x, y = m.map_visible_to_matrix(w, h, x, y)
            w, h = h, w
        assert (x, y) == start


@pytest.mark.parametrize("param", ["90", "180", "270", "0"])
def test_rotate_is_bijective(check_mapping, param):
    check_mapping(make_rotate(param), 64, 32)


def test_mirror_horizontal_default():
    for param in (None, "", "H", "h"):
        m = MirrorPixelMapper()
        m.set_parameters(1, 1, param)
        assert m.horizontal is True
        assert m.get_size_mapping(64, 32) == Size(64, 32)
        assert m.map_visible_to_matrix(64, 32, 0, 0) == (63, 0)
        assert m.map_visible_to_matrix(64, 32, 63, 0) == (0, 0)


def test_mirror_vertical():
    m = MirrorPixelMapper()
    m.set_parameters(1, 1, "v")
    assert m.map_visible_to_matrix(64, 32, 0, 0) == (0, 31)
    assert m.map_visible_to_matrix(64, 32, 10, 31) == (10, 0)


@pytest.mark.parametrize("param", ["X", "HV", "hh", "1"])
def test_mirror_rejects_bad_parameter(param):
    with pytest.raises(ParameterError):
        MirrorPixelMapper().set_parameters(1, 1, param)


@pytest.mark.parametrize("param", ["H", "V"])
def test_mirror_is_bijective(check_mapping, param):
    m = MirrorPixelMapper()
    m.set_parameters(1, 1, param)
    check_mapping(m, 64, 32)
