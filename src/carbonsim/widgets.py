from __future__ import annotations

import sys
from typing import Sequence

import numpy as np
import pyvista as pv
from PySide6 import QtCore, QtGui, QtWidgets
from pyvistaqt import QtInteractor

from carbonsim.config import AtomSimConfig
from carbonsim.electrons import ElectronOrbitAnimator
from carbonsim.nucleus import Nucleon
from carbonsim.orbitals import OrbitalKind, OrbitalSpec
from carbonsim.scene import ElectronFrame

NUCLEON_RADIUS = 0.8
NUCLEON_OUTLINE_RADIUS = 0.85
NUCLEON_OUTLINE_COLOR = "#1A1110"
ORBITAL_RADIUS = 0.8
ELECTRON_RADIUS = 0.4
NUCLEUS_LABEL_POSITION = (0.0, 4.0, 1.0)
POINT_LIGHT_POSITION = (10.0, 10.0, 10.0)
_SPHERE_RESOLUTION = 32


class AtomPlotter(QtWidgets.QFrame):
    """3D view of the atom; owns every VTK actor drawn for the scene."""

    def __init__(self, config: AtomSimConfig | None = None, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.config = config or AtomSimConfig()
        self.setFrameStyle(QtWidgets.QFrame.StyledPanel | QtWidgets.QFrame.Sunken)
        self._plotter_closed = False
        self._nucleus_actors: list = []
        self._electron_actors: dict[str, object] = {}
        self.plotter = QtInteractor(self)
        self.plotter.set_background(self.config.background)
        self.plotter.add_light(
            pv.Light(position=POINT_LIGHT_POSITION, focal_point=(0.0, 0.0, 0.0), positional=True, intensity=0.8)
        )
        if self.config.show_stars:
            self.add_starfield()
        try:
            self.plotter.iren.add_observer("InteractionEvent", self._clamp_camera_distance)
        except Exception as exc:
            print(f"Camera limit unavailable: {exc}", file=sys.stderr)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.plotter, 1)

    def add_starfield(self, seed: int = 7) -> None:
        rng = np.random.default_rng(seed)
        directions = rng.normal(size=(self.config.star_count, 3))
        directions /= np.linalg.norm(directions, axis=1, keepdims=True)
        depth = rng.uniform(1.0, 1.5, size=(self.config.star_count, 1))
        stars = pv.PolyData(directions * depth * self.config.star_radius)
        self.plotter.add_mesh(
            stars,
            color="white",
            point_size=2,
            style="points",
            lighting=False,
            name="stars",
            reset_camera=False,
        )

    def reset_view(self) -> None:
        self.plotter.camera_position = [self.config.camera_position, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
        self.plotter.render()

    def _clamp_camera_distance(self, *_args) -> None:
        camera = self.plotter.camera
        if camera.distance > self.config.max_camera_distance:
            camera.distance = self.config.max_camera_distance

    def draw_nucleus(self, title: str, nucleons: Sequence[Nucleon]) -> None:
        for actor in self._nucleus_actors:
            self.plotter.remove_actor(actor, reset_camera=False, render=False)
        self._nucleus_actors.clear()
        try:
            for nucleon in nucleons:
                center = tuple(nucleon.position)
                body = pv.Sphere(
                    radius=NUCLEON_RADIUS,
                    center=center,
                    theta_resolution=_SPHERE_RESOLUTION,
                    phi_resolution=_SPHERE_RESOLUTION,
                )
                outline = pv.Sphere(
                    radius=NUCLEON_OUTLINE_RADIUS,
                    center=center,
                    theta_resolution=_SPHERE_RESOLUTION,
                    phi_resolution=_SPHERE_RESOLUTION,
                )
                self._nucleus_actors.append(
                    self.plotter.add_mesh(
                        body,
                        color=nucleon.color,
                        ambient=0.5,
                        smooth_shading=True,
                        reset_camera=False,
                        render=False,
                    )
                )
                self._nucleus_actors.append(
                    self.plotter.add_mesh(
                        outline,
                        color=NUCLEON_OUTLINE_COLOR,
                        style="wireframe",
                        reset_camera=False,
                        render=False,
                    )
                )
            self._nucleus_actors.append(
                self.plotter.add_point_labels(
                    [NUCLEUS_LABEL_POSITION],
                    [title],
                    point_size=0,
                    font_size=14,
                    text_color="white",
                    shape=None,
                    show_points=False,
                    always_visible=True,
                    reset_camera=False,
                    render=False,
                )
            )
        except Exception as exc:
            print(f"Nucleus render error: {exc}", file=sys.stderr)
        self.plotter.render()

    def draw_orbitals(self, orbitals: Sequence[OrbitalSpec]) -> None:
        anchors: list[np.ndarray] = []
        labels: list[str] = []
        for index, orbital in enumerate(orbitals):
            shape = orbital.shape()
            center = np.asarray(orbital.center, dtype=float)
            mesh = pv.Sphere(
                radius=ORBITAL_RADIUS,
                theta_resolution=_SPHERE_RESOLUTION,
                phi_resolution=_SPHERE_RESOLUTION,
            )
            mesh = mesh.scale(shape.scale, inplace=False).translate(center, inplace=False)
            try:
                self.plotter.add_mesh(
                    mesh,
                    color=orbital.color,
                    opacity=0.35 if orbital.kind is OrbitalKind.P else 0.25,
                    ambient=0.6,
                    specular=0.8,
                    smooth_shading=True,
                    name=f"orbital-{index}",
                    reset_camera=False,
                    render=False,
                )
            except Exception as exc:
                print(f"Orbital render error: {exc}", file=sys.stderr)
                continue
            if orbital.label:
                anchors.append(center + shape.label_offset)
                labels.append(orbital.label)
        if anchors:
            self.plotter.add_point_labels(
                np.vstack(anchors),
                labels,
                point_size=0,
                font_size=11,
                text_color="white",
                shape=None,
                show_points=False,
                name="orbital-labels",
                reset_camera=False,
                render=False,
            )

    def draw_electrons(self, electrons: Sequence[ElectronOrbitAnimator]) -> None:
        self._electron_actors.clear()
        for index, electron in enumerate(electrons):
            try:
                self.plotter.add_mesh(
                    pv.lines_from_points(np.array(electron.path)),
                    color="white",
                    line_width=1.5,
                    name=f"orbit-path-{index}",
                    reset_camera=False,
                    render=False,
                )
                actor = self.plotter.add_mesh(
                    pv.Sphere(
                        radius=ELECTRON_RADIUS,
                        theta_resolution=_SPHERE_RESOLUTION,
                        phi_resolution=_SPHERE_RESOLUTION,
                    ),
                    color=electron.color,
                    ambient=0.6,
                    specular=0.8,
                    smooth_shading=True,
                    name=f"electron-{index}",
                    reset_camera=False,
                    render=False,
                )
            except Exception as exc:
                print(f"Electron render error: {exc}", file=sys.stderr)
                continue
            actor.position = tuple(electron.start_position)
            self._electron_actors[electron.label] = actor

    def update_electrons(self, frames: Sequence[ElectronFrame]) -> None:
        if self._plotter_closed or not frames:
            return
        for frame in frames:
            actor = self._electron_actors.get(frame.label)
            if actor is not None:
                actor.position = tuple(frame.position)
        try:
            self.plotter.add_point_labels(
                np.vstack([frame.position for frame in frames]),
                [frame.label for frame in frames],
                point_size=0,
                font_size=11,
                text_color="white",
                shape=None,
                show_points=False,
                always_visible=True,
                name="electron-labels",
                reset_camera=False,
                render=False,
            )
        except Exception as exc:
            print(f"Electron label error: {exc}", file=sys.stderr)
        self.plotter.render()

    def cleanup(self) -> None:
        """Close the underlying VTK render window before Qt tears down."""
        if self._plotter_closed:
            return
        self.plotter.close()
        self._plotter_closed = True

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self.cleanup()
        super().closeEvent(event)


class CollapsibleGroup(QtWidgets.QGroupBox):
    def __init__(self, title: str, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(title, parent)
        self.setCheckable(True)
        self.setChecked(True)
        self.toggled.connect(self._update_visibility)
        self._update_visibility(self.isChecked())

    def _update_visibility(self, checked: bool) -> None:
        if self.layout():
            self.layout().setEnabled(checked)
        for child in self.findChildren(QtWidgets.QWidget, options=QtCore.Qt.FindDirectChildrenOnly):
            child.setVisible(checked)
        self.setMaximumHeight(16777215 if checked else 28)
