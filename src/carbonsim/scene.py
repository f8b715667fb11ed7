from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Callable, Iterable

import numpy as np

from carbonsim.electrons import CARBON_ELECTRONS, ElectronOrbit, ElectronOrbitAnimator
from carbonsim.nucleus import (
    PROTON_COUNT,
    Nucleon,
    generate_nucleons,
    is_supported_isotope,
    isotope_label,
    neutron_count,
)
from carbonsim.orbitals import CARBON_ORBITALS, OrbitalSpec

DEFAULT_ISOTOPE = 12


@dataclass(frozen=True)
class SceneState:
    selected_isotope: int = DEFAULT_ISOTOPE


@dataclass(frozen=True)
class ElectronFrame:
    label: str
    color: str
    position: np.ndarray


IsotopeListener = Callable[[SceneState, list[Nucleon]], None]
FrameListener = Callable[[float, list[ElectronFrame]], None]


class AtomSceneComposer:
    """Owns the selected isotope and turns it, plus elapsed time, into geometry.

    Orbitals and electrons are fixed for the session; only the nucleus depends
    on the isotope. Listeners are plain callables so any toolkit can host the
    scene.
    """

    def __init__(
        self,
        isotope: int = DEFAULT_ISOTOPE,
        orbitals: Iterable[OrbitalSpec] = CARBON_ORBITALS,
        electrons: Iterable[ElectronOrbit] = CARBON_ELECTRONS,
    ) -> None:
        self.orbitals: tuple[OrbitalSpec, ...] = tuple(orbitals)
        self.electrons: tuple[ElectronOrbitAnimator, ...] = tuple(
            ElectronOrbitAnimator(orbit) for orbit in electrons
        )
        self._isotope_listeners: list[IsotopeListener] = []
        self._frame_listeners: list[FrameListener] = []
        self.state = SceneState()
        self.nucleons: list[Nucleon] = []
        self._apply_isotope(int(isotope))

    @property
    def isotope(self) -> int:
        return self.state.selected_isotope

    @property
    def proton_count(self) -> int:
        return PROTON_COUNT

    @property
    def neutron_count(self) -> int:
        return neutron_count(self.isotope)

    @property
    def title(self) -> str:
        return isotope_label(self.isotope)

    def add_isotope_listener(self, listener: IsotopeListener) -> None:
        self._isotope_listeners.append(listener)

    def add_frame_listener(self, listener: FrameListener) -> None:
        self._frame_listeners.append(listener)

    def select_isotope(self, isotope: int) -> None:
        self._apply_isotope(int(isotope))
        for listener in list(self._isotope_listeners):
            listener(self.state, self.nucleons)

    def _apply_isotope(self, isotope: int) -> None:
        if not is_supported_isotope(isotope):
            print(
                f"Unsupported carbon isotope {isotope}; drawing the Carbon-12 nucleus",
                file=sys.stderr,
            )
        self.state = replace(self.state, selected_isotope=isotope)
        self.nucleons = generate_nucleons(isotope)

    def frame_tick(self, t: float) -> list[ElectronFrame]:
        frames = [
            ElectronFrame(label=electron.label, color=electron.color, position=electron.position(t))
            for electron in self.electrons
        ]
        for listener in list(self._frame_listeners):
            listener(t, frames)
        return frames
