"""Entry point for the Electrostat field line visualizer."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pygame

from scene2d import FieldScene
from simulation_config import SimulationConfig


def build_parser() -> argparse.ArgumentParser:
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(description="Visualise the electric field of point charges.")
    parser.add_argument("--width", type=int, default=defaults.width, help="window width in pixels")
    parser.add_argument("--height", type=int, default=defaults.height, help="window height in pixels")
    parser.add_argument(
        "--seeds", type=int, default=defaults.seeds_per_charge, help="field lines seeded per charge"
    )
    parser.add_argument("--fps", type=int, default=defaults.fps, help="frame rate")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser


def config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> SimulationConfig:
    try:
        return SimulationConfig(
            width=args.width, height=args.height, seeds_per_charge=args.seeds, fps=args.fps
        )
    except ValueError as exc:
        parser.error(str(exc))
        raise


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = config_from_args(parser, args)

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption("Champ de charges ponctuelles")
        FieldScene(screen, config).run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
