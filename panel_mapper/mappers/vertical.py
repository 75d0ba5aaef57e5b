from __future__ import annotations

import logging
from typing import Optional

from ..validation import validate_panel_grid, validate_wiring_counts
from .base import Coordinate, PixelMapper, Size

logger = logging.getLogger(__name__)


class VerticalMapper(PixelMapper):
    """
    Stack the panels of a chain vertically, turning a chain x parallel grid
    into a single column per parallel channel.

    The optional parameter "Z" flips every other panel upside down so that
    the cabling between rows can be shorter:

        [ O < I ]   without Z       [ O < I  ]
          ,---^      <----                ^
        [ O < I ]                   [ I > O  ]
          ,---^            with Z     ^
        [ O < I ]            --->   [ O < I  ]
    """

    name = "V-mapper"

    def __init__(self):
        self.chain = 1
        self.parallel = 1
        self.z = False

    def set_parameters(self, chain: int, parallel: int, param: Optional[str] = None) -> None:
        validate_wiring_counts(self.name, chain, parallel)
        self.chain = chain
        self.parallel = parallel
        self.z = bool(param) and param.lower() == "z"
        if param and not self.z:
            logger.warning("%s: ignoring unknown parameter '%s'", self.name, param)

    def get_size_mapping(self, matrix_width: int, matrix_height: int) -> Size:
        validate_panel_grid(self.name, matrix_width, matrix_height, self.chain, self.parallel)
        visible = Size(
            matrix_width * self.parallel // self.chain,
            matrix_height * self.chain // self.parallel,
        )
        logger.debug(
            "%s: C:%d P:%d. Turning W:%d H:%d physical into W:%d H:%d visible",
            self.name, self.chain, self.parallel,
            matrix_width, matrix_height, visible.w, visible.h,
        )
        return visible

    def map_visible_to_matrix(
        self, matrix_width: int, matrix_height: int, x: int, y: int
    ) -> Coordinate:
        panel_width = matrix_width // self.chain
        panel_height = matrix_height // self.parallel
        # The panel you plug into ends up at the bottom while coordinates
        # start at the top, and the first panel is normally not mounted
        # upside down. Which rows flip therefore depends on the chain parity.
        odd_panel_count = (matrix_width // panel_width) % 2
        panel_row = y // panel_height
        x_panel_start = panel_row * panel_width
        y_panel_start = (x // panel_width) * panel_height
        x_within_panel = x % panel_width
        y_within_panel = y % panel_height
        needs_flipping = self.z and odd_panel_count - panel_row % 2 == 0
        if needs_flipping:
            x_within_panel = panel_width - 1 - x_within_panel
            y_within_panel = panel_height - 1 - y_within_panel
        return x_panel_start + x_within_panel, y_panel_start + y_within_panel
