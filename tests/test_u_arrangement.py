"""Tests for the U-mapper."""

import pytest

from panel_mapper.mappers import Size, UArrangementMapper
from panel_mapper.validation import DimensionError, WiringError


@pytest.fixture
def u_mapper() -> UArrangementMapper:
    """Four 32x32 panels on one chain, folded into 64x64."""
    m = UArrangementMapper()
    m.set_parameters(4, 1)
    return m


def test_size_mapping(u_mapper):
    assert u_mapper.get_size_mapping(128, 32) == Size(64, 64)


def test_top_leg_is_shifted_by_half_the_chain(u_mapper):
    assert u_mapper.map_visible_to_matrix(128, 32, 0, 0) == (64, 0)
    assert u_mapper.map_visible_to_matrix(128, 32, 63, 31) == (127, 31)


def test_bottom_leg_is_folded_back(u_mapper):
    assert u_mapper.map_visible_to_matrix(128, 32, 0, 32) == (63, 31)
    assert u_mapper.map_visible_to_matrix(128, 32, 63, 63) == (0, 0)


def test_single_chain_is_bijective(u_mapper, check_mapping):
    assert check_mapping(u_mapper, 128, 32) == Size(64, 64)


def test_parallel_chains_stack_slabs(check_mapping):
    m = UArrangementMapper()
    m.set_parameters(4, 2)
    assert check_mapping(m, 128, 64) == Size(64, 128)
    # second slab starts at the second chain
    assert m.map_visible_to_matrix(128, 64, 0, 64) == (64, 32)
    assert m.map_visible_to_matrix(128, 64, 0, 127) == (63, 32)


@pytest.mark.parametrize("chain", [0, 1, 3, 5])
def test_rejects_bad_chain(chain):
    with pytest.raises(WiringError):
        UArrangementMapper().set_parameters(chain, 1)


def test_size_mapping_requires_height_divisible_by_parallel():
    m = UArrangementMapper()
    m.set_parameters(4, 3)
    with pytest.raises(DimensionError):
        m.get_size_mapping(128, 32)


def test_size_mapping_rejects_narrow_matrix():
    m = UArrangementMapper()
    m.set_parameters(2, 1)
    with pytest.raises(DimensionError):
        m.get_size_mapping(32, 16)
