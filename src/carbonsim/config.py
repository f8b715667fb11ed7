from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

from carbonsim.nucleus import SUPPORTED_ISOTOPES


@dataclass(frozen=True)
class AtomSimConfig:
    isotope: int = 12
    frame_interval_ms: int = 16
    background: str = "#000000"
    show_stars: bool = True
    star_count: int = 1500
    star_radius: float = 60.0
    window_size: tuple[int, int] = (1200, 800)
    camera_position: tuple[float, float, float] = (12.5, 1.5, -0.01)
    max_camera_distance: float = 50.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="carbonsim", description="Interactive 3D model of the carbon atom.")
    parser.add_argument("--isotope", type=int, choices=SUPPORTED_ISOTOPES, default=AtomSimConfig.isotope)
    parser.add_argument(
        "--frame-interval",
        type=int,
        default=AtomSimConfig.frame_interval_ms,
        metavar="MS",
        help="milliseconds between animation frames",
    )
    parser.add_argument("--no-stars", action="store_true", help="hide the starfield backdrop")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> AtomSimConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.frame_interval < 1:
        parser.error("--frame-interval must be at least 1 ms")
    return AtomSimConfig(
        isotope=args.isotope,
        frame_interval_ms=args.frame_interval,
        show_stars=not args.no_stars,
    )
