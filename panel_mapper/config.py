# panel_mapper/config.py
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .mappers import Size
from .pipeline import MapperPipeline, parse_mapper_config
from .registry import MapperRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatrixConfig:
    """
    Physical wiring of a panel matrix plus the mapper config to apply.

    `rows` and `cols` are the size of a single panel; `chain` panels are
    daisy-chained on each of `parallel` data lines.
    """

    rows: int = 32
    cols: int = 32
    chain: int = 1
    parallel: int = 1
    pixel_mapper_config: Optional[str] = None

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(
                f"Panel size must be positive, got ({self.cols}x{self.rows})"
            )
        if self.chain < 1:
            raise ValueError(f"chain must be >= 1, got {self.chain}")
        if self.parallel < 1:
            raise ValueError(f"parallel must be >= 1, got {self.parallel}")
        for name, _ in parse_mapper_config(self.pixel_mapper_config):
            if not name:
                raise ValueError(
                    f"Mapper config '{self.pixel_mapper_config}' has an empty mapper name"
                )

    @property
    def matrix_size(self) -> Size:
        """Physical size of the whole matrix."""
        return Size(self.cols * self.chain, self.rows * self.parallel)

    def build_pipeline(self, registry: Optional[MapperRegistry] = None) -> MapperPipeline:
        """Resolve the mapper config into a MapperPipeline."""
        size = self.matrix_size
        return MapperPipeline.from_config(
            self.pixel_mapper_config,
            self.chain,
            self.parallel,
            size.w,
            size.h,
            registry=registry,
        )


def load_from_toml(config_path: str | Path) -> MatrixConfig:
    """
    Load a MatrixConfig from a TOML file.

    Expected TOML structure:

    [matrix]
    rows = 32      # panel height
    cols = 64      # panel width
    chain = 4
    parallel = 1

    [mapper]
    config = "U-mapper;Rotate:90"
    """
    p = Path(config_path)
    if not p.exists():
        raise FileNotFoundError(f"Configuration file not found: {p}")

    with p.open("rb") as f:
        data = tomllib.load(f)

    matrix = data.get("matrix") or {}
    mapper = data.get("mapper") or {}
    mapper_config = mapper.get("config")

    cfg = MatrixConfig(
        rows=int(matrix.get("rows", 32)),
        cols=int(matrix.get("cols", 32)),
        chain=int(matrix.get("chain", 1)),
        parallel=int(matrix.get("parallel", 1)),
        pixel_mapper_config=str(mapper_config) if mapper_config else None,
    )

    logger.info(
        "Loaded MatrixConfig: panel=%dx%d chain=%d parallel=%d mapper=%s",
        cfg.cols,
        cfg.rows,
        cfg.chain,
        cfg.parallel,
        cfg.pixel_mapper_config or "none",
    )
    return cfg


def default_config() -> MatrixConfig:
    """A sensible local default: a single 32x32 panel without mapping."""
    return MatrixConfig(rows=32, cols=32, chain=1, parallel=1)
