from __future__ import annotations

import logging
from typing import Optional

from ..validation import DimensionError, WiringError, validate_wiring_counts
from .base import Coordinate, PixelMapper, Size

logger = logging.getLogger(__name__)


class UArrangementMapper(PixelMapper):
    """
    Fold a long chain of panels into a U-shape: after half the panels the
    chain bends around and continues below. The result is a display with
    double the height that still uses one chain.

    A single chain of four 32x32 panels

        [<][<][<][<] }- connector

    becomes this 64x64 display

        [<][<] }----- connector
        [>][>]

    With several parallel chains every chain forms its own U-shaped slab,
    stacked from top to bottom:

        [<][<][<][<]  }-- connector #1
        [>][>][>][>]
        [<][<][<][<]  }-- connector #2
        [>][>][>][>]
    """

    name = "U-mapper"

    def __init__(self):
        self.parallel = 1

    def set_parameters(self, chain: int, parallel: int, param: Optional[str] = None) -> None:
        validate_wiring_counts(self.name, chain, parallel)
        # a chain of 2 folds too, but there is little point to it
        if chain < 2:
            raise WiringError(f"{self.name}: need at least chain=4 for useful folding")
        if chain % 2 != 0:
            raise WiringError(f"{self.name}: chain needs to be divisible by two, got {chain}")
        self.parallel = parallel

    def get_size_mapping(self, matrix_width: int, matrix_height: int) -> Size:
        if matrix_height % self.parallel != 0:
            raise DimensionError(
                f"{self.name}: for parallel={self.parallel} we would expect the "
                f"height={matrix_height} to be divisible by {self.parallel}"
            )
        visible_width = (matrix_width // 64) * 32  # 32px boundary
        if visible_width == 0:
            raise DimensionError(
                f"{self.name}: matrix width {matrix_width} is too narrow to fold"
            )
        logger.debug(
            "%s: %dx%d physical -> %dx%d visible",
            self.name, matrix_width, matrix_height, visible_width, 2 * matrix_height,
        )
        return Size(visible_width, 2 * matrix_height)

    def map_visible_to_matrix(
        self, matrix_width: int, matrix_height: int, x: int, y: int
    ) -> Coordinate:
        panel_height = matrix_height // self.parallel
        visible_width = (matrix_width // 64) * 32
        slab_height = 2 * panel_height  # one folded U
        base_y = (y // slab_height) * panel_height
        y %= slab_height
        if y < panel_height:
            x += matrix_width // 2
        else:
            x = visible_width - x - 1
            y = slab_height - y - 1
        return x, base_y + y
