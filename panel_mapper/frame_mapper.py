"""
Pure Frame Mapping Logic

This module contains the FrameMapper class, which turns a mapper pipeline into
numpy lookup tables and uses them to move a whole visible canvas onto the
physical matrix at once. It also creates test patterns for checking a wiring.

Pure class with no side effects - easily testable and reusable.
"""

from __future__ import annotations

from typing import Tuple, TYPE_CHECKING
import numpy as np

from .validation import validate_canvas_shape

if TYPE_CHECKING:
    from .pipeline import MapperPipeline


class FrameMapper:
    """
    Pure frame mapping operations for panel chains.

    This class contains no I/O operations and no side effects - all methods are
    pure functions that take inputs and return outputs without modifying state.
    """

    def build_lookup(self, pipeline: "MapperPipeline") -> Tuple[np.ndarray, np.ndarray]:
        """
        Compute the physical address of every visible pixel.

        Args:
            pipeline: Configured mapper pipeline

        Returns:
            Tuple[np.ndarray, np.ndarray]: `(matrix_x, matrix_y)` int arrays of
            shape (visible_height, visible_width)
        """
        size = pipeline.visible_size
        matrix_x = np.empty((size.h, size.w), dtype=np.intp)
        matrix_y = np.empty((size.h, size.w), dtype=np.intp)
        for y in range(size.h):
            for x in range(size.w):
                matrix_x[y, x], matrix_y[y, x] = pipeline.map_visible_to_matrix(x, y)
        return matrix_x, matrix_y

    def map_canvas_to_matrix(
        self, canvas: np.ndarray, pipeline: "MapperPipeline"
    ) -> np.ndarray:
        """
        Write every visible pixel of a canvas to its physical address.

        Args:
            canvas: Array of shape (H, W) or (H, W, C) matching the visible size
            pipeline: Configured mapper pipeline

        Returns:
            np.ndarray: Array of the physical matrix shape, same dtype and
            channels as the canvas. Physical pixels no visible pixel maps to
            stay zero.

        Raises:
            CanvasValidationError: If the canvas doesn't match the visible size
        """
        visible = pipeline.visible_size
        validate_canvas_shape(canvas.shape, visible.w, visible.h)

        matrix_x, matrix_y = self.build_lookup(pipeline)
        matrix = pipeline.matrix_size
        out = np.zeros((matrix.h, matrix.w) + canvas.shape[2:], dtype=canvas.dtype)
        out[matrix_y, matrix_x] = canvas
        return out

    def create_test_pattern(self, width: int, height: int, pattern: str) -> np.ndarray:
        """
        Create a test pattern canvas.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            pattern: Pattern type ("checkerboard", "border", "solid", "clear",
                "gradient")

        Returns:
            np.ndarray: Array of shape (height, width). Boolean for all patterns
            but "gradient", which numbers the pixels row-major from 1 so every
            pixel holds a distinct value.

        Raises:
            ValueError: If pattern type is unknown
        """
        canvas = np.zeros((height, width), dtype=bool)

        if pattern == "checkerboard":
            ys, xs = np.indices((height, width))
            canvas = (xs + ys) % 2 == 0
        elif pattern == "border":
            canvas[0, :] = True  # Top border
            canvas[-1, :] = True  # Bottom border
            canvas[:, 0] = True  # Left border
            canvas[:, -1] = True  # Right border
        elif pattern == "solid":
            canvas[:, :] = True
        elif pattern == "clear":
            pass
        elif pattern == "gradient":
            canvas = np.arange(1, width * height + 1, dtype=np.int64).reshape((height, width))
        else:
            raise ValueError(f"Unknown test pattern: {pattern}")

        return canvas
