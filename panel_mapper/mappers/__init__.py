from .base import Coordinate, PixelMapper, Size
from .mirror import MirrorPixelMapper
from .rotate import RotatePixelMapper
from .u_arrangement import UArrangementMapper
from .vertical import VerticalMapper
from .windmill import WindmillPixelMapper

BUILTIN_MAPPERS = (
    RotatePixelMapper,
    UArrangementMapper,
    VerticalMapper,
    WindmillPixelMapper,
    MirrorPixelMapper,
)

__all__ = [
    "BUILTIN_MAPPERS",
    "Coordinate",
    "MirrorPixelMapper",
    "PixelMapper",
    "RotatePixelMapper",
    "Size",
    "UArrangementMapper",
    "VerticalMapper",
    "WindmillPixelMapper",
]
