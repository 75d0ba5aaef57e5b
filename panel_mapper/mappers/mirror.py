from __future__ import annotations

from typing import Optional

from ..validation import ParameterError
from .base import Coordinate, PixelMapper, Size


class MirrorPixelMapper(PixelMapper):
    """Flip the canvas horizontally ('H', default) or vertically ('V')."""

    name = "Mirror"

    def __init__(self):
        self.horizontal = True

    def set_parameters(self, chain: int, parallel: int, param: Optional[str] = None) -> None:
        if not param:
            self.horizontal = True
            return
        if len(param) != 1:
            raise ParameterError(
                "Mirror parameter should be a single character:'V' or 'H'"
            )
        axis = param.upper()
        if axis not in ("H", "V"):
            raise ParameterError("Mirror parameter should be either 'V' or 'H'")
        self.horizontal = axis == "H"

    def get_size_mapping(self, matrix_width: int, matrix_height: int) -> Size:
        return Size(matrix_width, matrix_height)

    def map_visible_to_matrix(
        self, matrix_width: int, matrix_height: int, x: int, y: int
    ) -> Coordinate:
        if self.horizontal:
            return matrix_width - 1 - x, y
        return x, matrix_height - 1 - y
