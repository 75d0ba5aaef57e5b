"""
Mapper registry.

Maps case-folded mapper names to prototype instances. Lookups hand out a
fresh, configured copy of the prototype, so a mapper returned to rendering
code is never reconfigured behind its back.

The module-level functions operate on a default registry that is created on
first use and holds the built-in mappers. Register custom mappers during
setup, before any rendering thread starts mapping.
"""

from __future__ import annotations

import copy
import logging
from typing import Dict, List, Optional

from .mappers import BUILTIN_MAPPERS, PixelMapper
from .validation import UnknownMapperError

logger = logging.getLogger(__name__)


class MapperRegistry:
    """Name -> prototype mapper table with case-insensitive lookup."""

    def __init__(self):
        self._mappers: Dict[str, PixelMapper] = {}

    @classmethod
    def with_builtins(cls) -> MapperRegistry:
        """Create a registry holding all built-in mappers."""
        registry = cls()
        for mapper_cls in BUILTIN_MAPPERS:
            registry.register(mapper_cls())
        return registry

    def register(self, mapper: PixelMapper) -> None:
        """Add or replace the entry for the mapper's name. Last one wins."""
        if mapper is None:
            raise TypeError("Cannot register None as a pixel mapper")
        key = mapper.get_name().lower()
        if key in self._mappers:
            logger.debug("Replacing pixel mapper '%s'", key)
        self._mappers[key] = mapper

    def list_names(self) -> List[str]:
        """Display names of all registered mappers, ordered by key."""
        return [self._mappers[key].get_name() for key in sorted(self._mappers)]

    def get(self, name: str) -> PixelMapper:
        """
        Return the unconfigured prototype registered under `name`.

        Raises:
            UnknownMapperError: If no such mapper is registered
        """
        try:
            return self._mappers[name.lower()]
        except KeyError:
            raise UnknownMapperError(f"{name}: no such mapper") from None

    def find(
        self, name: str, chain: int, parallel: int, param: Optional[str] = None
    ) -> Optional[PixelMapper]:
        """
        Look up a mapper by name and configure it.

        Args:
            name: Mapper name, case-insensitive
            chain: Number of panels daisy-chained on one data line
            parallel: Number of chains driven concurrently
            param: Mapper-specific parameter string

        Returns:
            A configured copy of the mapper, or None if the name is unknown or
            the mapper rejected the configuration. The reason is logged.
        """
        try:
            prototype = self.get(name)
        except UnknownMapperError as e:
            logger.error("%s", e)
            return None

        mapper = copy.copy(prototype)
        # MapperConfigError is a ValueError; custom mappers may raise either
        try:
            mapper.set_parameters(chain, parallel, param)
        except ValueError as e:
            logger.error("%s", e)
            return None
        return mapper

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._mappers

    def __len__(self) -> int:
        return len(self._mappers)


# Default registry, built on first use
_default_registry: Optional[MapperRegistry] = None


def get_default_registry() -> MapperRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = MapperRegistry.with_builtins()
        logger.debug(
            "Created default mapper registry: %s", ", ".join(_default_registry.list_names())
        )
    return _default_registry


def register_pixel_mapper(mapper: PixelMapper) -> None:
    """Register a mapper with the default registry."""
    get_default_registry().register(mapper)


def get_available_pixel_mappers() -> List[str]:
    """Names of all mappers in the default registry."""
    return get_default_registry().list_names()


def find_pixel_mapper(
    name: str, chain: int, parallel: int, parameter: Optional[str] = None
) -> Optional[PixelMapper]:
    """Find and configure a mapper from the default registry, or None."""
    return get_default_registry().find(name, chain, parallel, parameter)
