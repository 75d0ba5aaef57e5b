"""
Windmill mapper.

Two parallel chains start at the center of the display and extend outward,
one to the left and one to the right. Panels are mounted in portrait (e.g.
32x64 for a 64x32 panel), so every panel contributes its physical height to
the visible width:

    visible width  = panel_height * chain * parallel
    visible height = panel_width

Parameters (optional, any order, separated by ':', ',', ';' or spaces):
    Z  flip every other panel in each chain (serpentine cabling)
    S  swap left/right chains if the parallel wiring is reversed
"""

from __future__ import annotations

import logging
from typing import Optional

from ..validation import ParameterError, WiringError, validate_panel_grid, validate_wiring_counts
from .base import Coordinate, PixelMapper, Size

logger = logging.getLogger(__name__)

SEPARATORS = frozenset(":,; ")


class WindmillPixelMapper(PixelMapper):
    name = "Windmill"

    def __init__(self):
        self.z = False
        self.swap_lr = False
        self.chain = 1
        self.parallel = 2

    def set_parameters(self, chain: int, parallel: int, param: Optional[str] = None) -> None:
        if parallel != 2:
            raise WiringError(f"{self.name}: requires parallel=2 (got {parallel})")
        validate_wiring_counts(self.name, chain, parallel)

        z = swap_lr = False
        for c in param or "":
            if c in SEPARATORS:
                continue
            if c in "Zz":
                z = True
            elif c in "Ss":
                swap_lr = True
            else:
                raise ParameterError(
                    f"{self.name}: unknown parameter '{c}' (use Z and/or S)"
                )

        self.chain = chain
        self.parallel = parallel
        self.z = z
        self.swap_lr = swap_lr
        logger.debug(
            "%s: chain=%d serpentine=%s swap=%s", self.name, chain, z, swap_lr
        )

    def get_size_mapping(self, matrix_width: int, matrix_height: int) -> Size:
        validate_panel_grid(self.name, matrix_width, matrix_height, self.chain, self.parallel)
        panel_width = matrix_width // self.chain
        panel_height = matrix_height // self.parallel
        return Size(panel_height * self.chain * self.parallel, panel_width)

    def map_visible_to_matrix(
        self, matrix_width: int, matrix_height: int, x: int, y: int
    ) -> Coordinate:
        chain = self.chain
        panel_width = matrix_width // chain
        panel_height = matrix_height // self.parallel

        # Rotated panel slot along the visible width and the offset within it
        # (a rotated panel is panel_height wide and panel_width high).
        slot = x // panel_height
        rx = x % panel_height
        ry = y

        # The left half is the chain running from the center to the left,
        # counted outward from the center.
        is_left_half = slot < chain
        idx_in_half = chain - 1 - slot if is_left_half else slot - chain

        if is_left_half:
            channel = 1 if self.swap_lr else 0
            cpos = slot
        else:
            channel = 0 if self.swap_lr else 1
            cpos = chain - 1 - idx_in_half

        # Counter-clockwise rotation back into the portrait panel's frame.
        ux = ry
        uy = panel_height - 1 - rx

        # Left half needs a vertical flip to keep a top-left visible origin.
        if is_left_half:
            uy = panel_height - 1 - uy

        if self.z and cpos % 2 == 1:
            ux = panel_width - 1 - ux
            uy = panel_height - 1 - uy

        if is_left_half:
            # The rotation and flips above leave the left half turned by 180
            # degrees, turn it back.
            return (cpos + 1) * panel_width - 1 - ux, (channel + 1) * panel_height - 1 - uy
        return cpos * panel_width + ux, channel * panel_height + uy
