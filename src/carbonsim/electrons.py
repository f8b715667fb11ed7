from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

import numpy as np

PATH_SEGMENTS = 100


class OrbitPlane(str, Enum):
    XZ = "xz"
    XY = "xy"
    XY_NEGATED = "xy2"


# Sign applied to the sine term for the y coordinate.
_Y_SIGN: dict[OrbitPlane, float] = {
    OrbitPlane.XZ: 0.0,
    OrbitPlane.XY: 1.0,
    OrbitPlane.XY_NEGATED: -1.0,
}


@dataclass(frozen=True)
class ElectronOrbit:
    """One electron's closed orbit.

    ``radius`` is signed: a negative radius starts the electron on the opposite
    side of the nucleus from a positive-radius sibling with the same law.
    """

    radius: float
    angular_speed: float
    plane: OrbitPlane = OrbitPlane.XZ
    color: str = "#FFFFFF"
    label: str = ""

    @property
    def period(self) -> float:
        return 2.0 * np.pi / self.angular_speed


CARBON_ELECTRONS: tuple[ElectronOrbit, ...] = (
    ElectronOrbit(3.0, 1.0, OrbitPlane.XZ, "#FF0", "1s Electron 1"),
    ElectronOrbit(-3.0, 1.0, OrbitPlane.XY, "#FF0", "1s Electron 2"),
    ElectronOrbit(5.0, 1.2, OrbitPlane.XZ, "#FFA500", "2s Electron 1"),
    ElectronOrbit(-5.0, 1.2, OrbitPlane.XY, "#FFA500", "2s Electron 2"),
    ElectronOrbit(7.0, 1.4, OrbitPlane.XZ, "#0F0", "2px Electron"),
    ElectronOrbit(7.0, 1.4, OrbitPlane.XY, "#0F0", "2py Electron"),
)


def _plane_points(radius: float, plane: OrbitPlane, angle: np.ndarray | float) -> np.ndarray:
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    x = radius * cos_a
    y = _Y_SIGN[OrbitPlane(plane)] * radius * sin_a
    z = radius * sin_a
    return np.stack(np.broadcast_arrays(x, y, z), axis=-1).astype(float)


def orbit_position(orbit: ElectronOrbit, t: float) -> np.ndarray:
    """Position of the electron ``t`` seconds after the scene was mounted."""
    return _plane_points(orbit.radius, orbit.plane, t * orbit.angular_speed)


@lru_cache(maxsize=64)
def _cached_path(radius: float, plane: OrbitPlane) -> np.ndarray:
    angles = np.linspace(0.0, 2.0 * np.pi, PATH_SEGMENTS + 1)
    points = _plane_points(radius, plane, angles)
    points.flags.writeable = False
    return points


def path_polyline(orbit: ElectronOrbit) -> np.ndarray:
    """Closed guide line for ``orbit`` as a ``(101, 3)`` read-only array.

    Cached on ``(radius, plane)``; speed, colour and elapsed time do not
    change the path and never trigger a resample.
    """
    return _cached_path(float(orbit.radius), OrbitPlane(orbit.plane))


def path_cache_info():
    return _cached_path.cache_info()


def clear_path_cache() -> None:
    _cached_path.cache_clear()


class ElectronOrbitAnimator:
    def __init__(self, orbit: ElectronOrbit) -> None:
        self.orbit = orbit

    @property
    def label(self) -> str:
        return self.orbit.label

    @property
    def color(self) -> str:
        return self.orbit.color

    @property
    def path(self) -> np.ndarray:
        return path_polyline(self.orbit)

    @property
    def start_position(self) -> np.ndarray:
        return orbit_position(self.orbit, 0.0)

    def position(self, t: float) -> np.ndarray:
        return orbit_position(self.orbit, t)

    def __repr__(self) -> str:
        return f"ElectronOrbitAnimator({self.orbit.label!r}, radius={self.orbit.radius})"
