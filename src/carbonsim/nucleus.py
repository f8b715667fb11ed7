from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

PROTON_COUNT = 6
SUPPORTED_ISOTOPES: tuple[int, ...] = (12, 13, 14)
NUCLEUS_RADIUS = 1.25

PROTON_COLOR = "#FFD700"
NEUTRON_COLOR = "#C0C0C0"


class NucleonKind(str, Enum):
    PROTON = "proton"
    NEUTRON = "neutron"


NUCLEON_COLORS: dict[NucleonKind, str] = {
    NucleonKind.PROTON: PROTON_COLOR,
    NucleonKind.NEUTRON: NEUTRON_COLOR,
}


@dataclass(frozen=True)
class Nucleon:
    kind: NucleonKind
    position: np.ndarray

    @property
    def color(self) -> str:
        return NUCLEON_COLORS[self.kind]


def is_supported_isotope(isotope: int) -> bool:
    return isotope in SUPPORTED_ISOTOPES


def neutron_count(isotope: int) -> int:
    """Neutrons in the carbon nucleus; unknown mass numbers use Carbon-12."""
    if not is_supported_isotope(isotope):
        return SUPPORTED_ISOTOPES[0] - PROTON_COUNT
    return int(isotope) - PROTON_COUNT


def isotope_label(isotope: int) -> str:
    return f"Carbon-{isotope}"


def spherical_to_cartesian(
    radius: float | np.ndarray, polar: float | np.ndarray, azimuthal: float | np.ndarray
) -> np.ndarray:
    """Physics convention: polar angle from +z, azimuth in the xy-plane."""
    sin_polar = np.sin(polar)
    x = radius * sin_polar * np.cos(azimuthal)
    y = radius * sin_polar * np.sin(azimuthal)
    z = radius * np.cos(polar)
    return np.stack(np.broadcast_arrays(x, y, z), axis=-1)


def sphere_points(count: int, radius: float = NUCLEUS_RADIUS) -> np.ndarray:
    """Spread ``count`` points over a sphere with a spiral equal-area sweep.

    Bands of equal area come from ``acos(1 - 2(i + 0.5)/N)``; the azimuth grows
    with the polar angle so neighbouring bands do not line up longitudinally.
    """
    if count <= 0:
        return np.zeros((0, 3))
    index = np.arange(count, dtype=float)
    polar = np.arccos(1.0 - 2.0 * (index + 0.5) / count)
    azimuthal = np.sqrt(count * np.pi) * polar
    return spherical_to_cartesian(radius, polar, azimuthal)


def generate_nucleons(isotope: int) -> list[Nucleon]:
    """Lay out the nucleus for ``isotope``; protons take the first indices."""
    total = PROTON_COUNT + neutron_count(isotope)
    positions = sphere_points(total)
    positions.flags.writeable = False
    nucleons: list[Nucleon] = []
    for index, position in enumerate(positions):
        kind = NucleonKind.PROTON if index < PROTON_COUNT else NucleonKind.NEUTRON
        nucleons.append(Nucleon(kind=kind, position=position))
    return nucleons
