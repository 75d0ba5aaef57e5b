"""
Mapper pipelines.

A mapper config string names one or more mappers, applied in order, e.g.
"U-mapper;Rotate:90": fold the chain into a U first, then rotate the folded
display. Every mapper sees the visible size produced by the one before it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .mappers import Coordinate, PixelMapper, Size
from .registry import MapperRegistry, get_default_registry
from .validation import DimensionError, PipelineError, validate_matrix_size

logger = logging.getLogger(__name__)


def parse_mapper_config(text: Optional[str]) -> List[Tuple[str, Optional[str]]]:
    """
    Split a mapper config string into (name, parameter) pairs.

    Mappers are separated by ';', a mapper's parameter follows the first ':'.
    Empty segments are skipped.

    >>> parse_mapper_config("U-mapper;Rotate:90")
    [('U-mapper', None), ('Rotate', '90')]
    """
    result: List[Tuple[str, Optional[str]]] = []
    for segment in (text or "").split(";"):
        segment = segment.strip()
        if not segment:
            continue
        name, sep, param = segment.partition(":")
        result.append((name.strip(), param if sep else None))
    return result


@dataclass(frozen=True)
class MapperStage:
    """One mapper of a pipeline together with the size it maps from."""

    mapper: PixelMapper
    input_size: Size
    output_size: Size


class MapperPipeline:
    """
    A sequence of configured mappers over a physical matrix.

    Coordinates in the final visible space are mapped back through the
    stages last-to-first until they reach physical matrix space. An empty
    pipeline is the identity.
    """

    def __init__(self, matrix_size: Size, stages: Sequence[MapperStage] = ()):
        self.matrix_size = matrix_size
        self.stages = tuple(stages)

    @classmethod
    def from_mappers(
        cls, mappers: Sequence[PixelMapper], matrix_width: int, matrix_height: int
    ) -> MapperPipeline:
        """
        Build a pipeline from already configured mappers.

        Raises:
            PipelineError: If a mapper's size query fails
        """
        try:
            validate_matrix_size("pipeline", matrix_width, matrix_height)
        except DimensionError as e:
            raise PipelineError(str(e)) from e

        matrix_size = Size(matrix_width, matrix_height)
        size = matrix_size
        stages: List[MapperStage] = []
        for mapper in mappers:
            try:
                visible = mapper.get_size_mapping(size.w, size.h)
            except DimensionError as e:
                raise PipelineError(f"{mapper.get_name()}: size mapping failed: {e}") from e
            stages.append(MapperStage(mapper, size, visible))
            size = visible
        return cls(matrix_size, stages)

    @classmethod
    def from_config(
        cls,
        config: Optional[str],
        chain: int,
        parallel: int,
        matrix_width: int,
        matrix_height: int,
        registry: Optional[MapperRegistry] = None,
    ) -> MapperPipeline:
        """
        Resolve every mapper named in a config string and build a pipeline.

        Raises:
            PipelineError: If a mapper is unknown, rejects its parameters or
                can't map the size handed to it
        """
        registry = registry or get_default_registry()
        mappers: List[PixelMapper] = []
        for name, param in parse_mapper_config(config):
            mapper = registry.find(name, chain, parallel, param)
            if mapper is None:
                raise PipelineError(f"Couldn't set up pixel mapper '{name}'")
            mappers.append(mapper)

        pipeline = cls.from_mappers(mappers, matrix_width, matrix_height)
        logger.info(
            "Pixel mapping %s: %dx%d physical -> %dx%d visible",
            " -> ".join(m.get_name() for m in mappers) or "identity",
            matrix_width, matrix_height,
            pipeline.visible_size.w, pipeline.visible_size.h,
        )
        return pipeline

    @property
    def visible_size(self) -> Size:
        return self.stages[-1].output_size if self.stages else self.matrix_size

    @property
    def mappers(self) -> Tuple[PixelMapper, ...]:
        return tuple(stage.mapper for stage in self.stages)

    def map_visible_to_matrix(self, x: int, y: int) -> Coordinate:
        for stage in reversed(self.stages):
            x, y = stage.mapper.map_visible_to_matrix(
                stage.input_size.w, stage.input_size.h, x, y
            )
        return x, y

    def __len__(self) -> int:
        return len(self.stages)
