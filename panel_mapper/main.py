#!/usr/bin/env python3
"""
Panel Mapper - Command Line Entry Point

Lists the available pixel mappers and shows how a TOML matrix configuration
maps visible coordinates onto the physical panel chain.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_from_toml
from .pipeline import MapperPipeline
from .registry import get_available_pixel_mappers
from .validation import MapperError

logger = logging.getLogger(__name__)


def format_mapping(pipeline: MapperPipeline) -> List[str]:
    """One line per visible row listing the physical (x,y) of every pixel."""
    size = pipeline.visible_size
    lines = []
    for y in range(size.h):
        cells = []
        for x in range(size.w):
            mx, my = pipeline.map_visible_to_matrix(x, y)
            cells.append(f"{mx},{my}")
        lines.append(" ".join(cells))
    return lines


def run(config_path: Path, show: bool = False) -> int:
    try:
        cfg = load_from_toml(config_path)
        pipeline = cfg.build_pipeline()
    except (FileNotFoundError, MapperError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        return 1

    matrix, visible = pipeline.matrix_size, pipeline.visible_size
    print(f"physical: {matrix.w}x{matrix.h}")
    print(f"visible:  {visible.w}x{visible.h}")
    if show:
        for line in format_mapping(pipeline):
            print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Panel chain pixel mapper")
    parser.add_argument("--list", action="store_true", help="List available mappers")
    parser.add_argument("--config", help="Path to TOML matrix configuration")
    parser.add_argument(
        "--show", action="store_true", help="Print the physical address of every pixel"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list:
        for name in get_available_pixel_mappers():
            print(name)
        return 0
    if args.config:
        return run(Path(args.config), show=args.show)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
