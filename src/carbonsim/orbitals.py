from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np


class OrbitalKind(str, Enum):
    S = "s"
    P = "p"


_AXES = ("x", "y", "z")

P_LONG_AXIS = 1.2
P_SHORT_AXIS = 0.4

# Labels sit past the tip of the lobe so they never cover it.
_P_LABEL_OFFSETS: dict[str, tuple[float, float, float]] = {
    "x": (2.0, 2.0, 2.0),
    "y": (0.0, 4.0, 0.0),
    "z": (0.0, 0.0, 4.0),
}

_SUBSHELL_LETTERS = {0: "s", 1: "p", 2: "d", 3: "f"}
_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


@dataclass(frozen=True)
class OrbitalShape:
    scale: np.ndarray
    label_offset: np.ndarray


@dataclass(frozen=True)
class OrbitalSpec:
    kind: OrbitalKind
    color: str
    label: str = ""
    orientation: str | None = None
    center: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))

    def shape(self) -> OrbitalShape:
        return describe_orbital(self.kind, self.orientation)


CARBON_ORBITALS: tuple[OrbitalSpec, ...] = (
    OrbitalSpec(OrbitalKind.S, "#00F", "1s"),
    OrbitalSpec(OrbitalKind.S, "#0FF", "2s"),
    OrbitalSpec(OrbitalKind.P, "#F00", "2px", orientation="x"),
    OrbitalSpec(OrbitalKind.P, "#F00", "2py", orientation="y"),
)


def _readonly(values) -> np.ndarray:
    array = np.array(values, dtype=float)
    array.flags.writeable = False
    return array


def describe_orbital(kind: OrbitalKind | str, orientation: str | None = None) -> OrbitalShape:
    """Scale vector and label offset for a unit sphere drawn as an s or p orbital.

    An s orbital stays an unstretched sphere labelled at its own centre. A p
    orbital is stretched into a lobe along ``orientation`` (x when omitted or
    unknown) and labelled a few units out along that axis.
    """
    if OrbitalKind(kind) is OrbitalKind.S:
        return OrbitalShape(scale=_readonly((1.0, 1.0, 1.0)), label_offset=_readonly((0.0, 0.0, 0.0)))
    axis = orientation if orientation in _AXES else "x"
    scale = [P_SHORT_AXIS] * 3
    scale[_AXES.index(axis)] = P_LONG_AXIS
    return OrbitalShape(scale=_readonly(scale), label_offset=_readonly(_P_LABEL_OFFSETS[axis]))


def electron_configuration(electrons: int) -> list[tuple[int, int, int]]:
    """Return ``(n, l, count)`` subshells filled for a neutral atom up to Ar (3p)."""
    remaining = max(int(electrons), 0)
    sequence: list[tuple[int, int, int]] = []
    filling_order = [(1, 0), (2, 0), (2, 1), (3, 0), (3, 1)]
    for n, l in filling_order:
        if remaining <= 0:
            break
        count = min(2 * (2 * l + 1), remaining)
        sequence.append((n, l, count))
        remaining -= count
    return sequence


def configuration_text(electrons: int = 6) -> str:
    parts = [
        f"{n}{_SUBSHELL_LETTERS[l]}{str(count).translate(_SUPERSCRIPTS)}"
        for n, l, count in electron_configuration(electrons)
    ]
    return " ".join(parts)
