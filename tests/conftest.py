import pytest

from panel_mapper.registry import MapperRegistry


@pytest.fixture
def registry() -> MapperRegistry:
    """Independent registry holding the built-in mappers."""
    return MapperRegistry.with_builtins()


@pytest.fixture
def check_mapping():
    """
    Return a checker asserting that a configured mapper sends every visible
    pixel to a distinct in-bounds physical pixel. Returns the visible size.
    """

    def _check(mapper, matrix_w: int, matrix_h: int):
        size = mapper.get_size_mapping(matrix_w, matrix_h)
        seen = set()
        for y in range(size.h):
            for x in range(size.w):
                mx, my = mapper.map_visible_to_matrix(matrix_w, matrix_h, x, y)
                assert 0 <= mx < matrix_w, f"({x},{y}) -> x={mx} out of bounds"
                assert 0 <= my < matrix_h, f"({x},{y}) -> y={my} out of bounds"
                seen.add((mx, my))
        assert len(seen) == size.w * size.h, "mapping is not injective"
        return size

    return _check
