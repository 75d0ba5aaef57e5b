from __future__ import annotations

import re
from typing import Optional

from ..validation import ParameterError
from .base import Coordinate, PixelMapper, Size

# Leading whitespace and a sign are accepted, trailing characters are not
_ANGLE_RE = re.compile(r"\s*[+-]?\d+")


class RotatePixelMapper(PixelMapper):
    """Rotate the visible canvas by a multiple of 90 degrees."""

    name = "Rotate"

    def __init__(self):
        self.angle = 0

    def set_parameters(self, chain: int, parallel: int, param: Optional[str] = None) -> None:
        if not param:
            self.angle = 0
            return
        if not _ANGLE_RE.fullmatch(param):
            raise ParameterError(f"Invalid rotate parameter '{param}'")
        angle = int(param)
        if angle % 90 != 0:
            raise ParameterError("Rotation needs to be multiple of 90 degrees")
        self.angle = angle % 360

    def get_size_mapping(self, matrix_width: int, matrix_height: int) -> Size:
        if self.angle % 180 == 0:
            return Size(matrix_width, matrix_height)
        return Size(matrix_height, matrix_width)

    def map_visible_to_matrix(
        self, matrix_width: int, matrix_height: int, x: int, y: int
    ) -> Coordinate:
        if self.angle == 90:
            return matrix_width - y - 1, x
        if self.angle == 180:
            return matrix_width - x - 1, matrix_height - y - 1
        if self.angle == 270:
            return y, matrix_height - x - 1
        return x, y
