from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Size:
    w: int
    h: int

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"Size must be positive, got ({self.w}x{self.h})")


Coordinate = Tuple[int, int]


class PixelMapper(ABC):
    """
    Base class for all pixel mappers. A mapper translates coordinates of the
    visible canvas an application draws into to the physical addressing of
    a chain of panels.

    Usage contract:
        - `set_parameters` must be called first; it raises a
          `MapperConfigError` if the wiring or parameter is rejected
        - `get_size_mapping` gives the visible size for a physical size and
          may raise `DimensionError`
        - `map_visible_to_matrix` is then a pure read of the configuration,
          safe to call from several rendering threads at once

    Subclasses set the class attribute `name`, which is also the (case
    folded) registry key.
    """

    name: str = ""

    def get_name(self) -> str:
        return self.name

    @abstractmethod
    def set_parameters(self, chain: int, parallel: int, param: Optional[str] = None) -> None:
        """
        Validate and store the configuration of this mapper.

        Args:
            chain: Number of panels daisy-chained on one data line
            parallel: Number of chains driven concurrently
            param: Mapper-specific parameter string, may be None or empty
        """

    @abstractmethod
    def get_size_mapping(self, matrix_width: int, matrix_height: int) -> Size:
        """Return the visible size for the given physical matrix size."""

    @abstractmethod
    def map_visible_to_matrix(
        self, matrix_width: int, matrix_height: int, x: int, y: int
    ) -> Coordinate:
        """
        Map a visible coordinate to its physical matrix coordinate.

        The caller keeps (x, y) within the visible rectangle reported by
        `get_size_mapping`; out-of-range input gives unspecified output.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
