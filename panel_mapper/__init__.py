"""
Pixel mapping for chains of LED matrix panels.

This package provides:
- Built-in mappers for rotated, mirrored, U-folded, vertical and windmill
  panel arrangements
- A case-insensitive mapper registry with lookup and configuration
- Mapper pipelines built from config strings such as "U-mapper;Rotate:90"
- numpy lookup tables for remapping whole canvases
- TOML configuration of the panel wiring
"""

from .mappers import (
    MirrorPixelMapper,
    PixelMapper,
    RotatePixelMapper,
    Size,
    UArrangementMapper,
    VerticalMapper,
    WindmillPixelMapper,
)
from .pipeline import MapperPipeline, parse_mapper_config
from .registry import (
    MapperRegistry,
    find_pixel_mapper,
    get_available_pixel_mappers,
    get_default_registry,
    register_pixel_mapper,
)
from .validation import (
    DimensionError,
    MapperConfigError,
    MapperError,
    ParameterError,
    PipelineError,
    UnknownMapperError,
    WiringError,
)

__version__ = "0.1.0"
