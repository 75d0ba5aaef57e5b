"""
Validation logic and error types for pixel mappers.

This module holds the exception hierarchy raised by mappers, the registry
and the pipeline, plus small validation helpers shared by several mappers.
Mapper-local parameter parsing stays in the mapper itself.

Rules validated here:
- Chain and parallel counts are positive
- Matrix dimensions are positive and split into chain x parallel panels
- Canvas arrays match the visible size of a pipeline
"""

from typing import Tuple


class MapperError(ValueError):
    """Base exception for pixel mapper errors."""
    pass


class MapperConfigError(MapperError):
    """Raised when a mapper rejects its configuration."""
    pass


class ParameterError(MapperConfigError):
    """Raised when a mapper parameter string is malformed."""
    pass


class WiringError(MapperConfigError):
    """Raised when chain/parallel counts don't fit the mapper."""
    pass


class DimensionError(MapperError):
    """Raised when the matrix size is incompatible with a mapper."""
    pass


class UnknownMapperError(MapperError, KeyError):
    """Raised when no mapper is registered under a name."""

    def __str__(self) -> str:
        # KeyError would quote the message
        return str(self.args[0]) if self.args else ""


class PipelineError(MapperError):
    """Raised when a mapper pipeline can't be assembled."""
    pass


class CanvasValidationError(MapperError):
    """Raised when a canvas doesn't match the visible size."""
    pass


def validate_wiring_counts(name: str, chain: int, parallel: int) -> None:
    """
    Validate that chain and parallel counts are usable divisors.

    Args:
        name: Mapper name for error messages
        chain: Number of panels daisy-chained on one data line
        parallel: Number of chains driven concurrently

    Raises:
        WiringError: If either count is below 1
    """
    if chain < 1 or parallel < 1:
        raise WiringError(
            f"{name}: chain and parallel must be >= 1, "
            f"got chain={chain} parallel={parallel}"
        )


def validate_matrix_size(name: str, matrix_width: int, matrix_height: int) -> None:
    """
    Validate that a physical matrix has a positive area.

    Raises:
        DimensionError: If width or height is not positive
    """
    if matrix_width <= 0 or matrix_height <= 0:
        raise DimensionError(
            f"{name}: matrix size must be positive, got {matrix_width}x{matrix_height}"
        )


def validate_panel_grid(
    name: str, matrix_width: int, matrix_height: int, chain: int, parallel: int
) -> None:
    """
    Validate that a matrix splits into chain x parallel panels of at
    least one pixel each.

    Raises:
        DimensionError: If a panel would be empty
    """
    validate_matrix_size(name, matrix_width, matrix_height)
    if matrix_width < chain or matrix_height < parallel:
        raise DimensionError(
            f"{name}: matrix {matrix_width}x{matrix_height} is too small for "
            f"chain={chain} parallel={parallel}"
        )


def validate_canvas_shape(shape: Tuple[int, ...], visible_w: int, visible_h: int) -> None:
    """
    Validate that a canvas array covers exactly the visible area.

    Accepts 2-D (H, W) canvases and 3-D (H, W, C) canvases with channels.

    Raises:
        CanvasValidationError: If the canvas shape doesn't match
    """
    if len(shape) not in (2, 3):
        raise CanvasValidationError(
            f"Canvas must be 2-D or 3-D, got shape {shape}"
        )
    if shape[0] != visible_h or shape[1] != visible_w:
        raise CanvasValidationError(
            f"Canvas shape {shape[:2]} doesn't match visible size "
            f"{visible_w}x{visible_h} (expected ({visible_h}, {visible_w}))"
        )
