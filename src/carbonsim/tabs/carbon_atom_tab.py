from __future__ import annotations

import qtawesome as qta
from PySide6 import QtCore, QtWidgets

from carbonsim.config import AtomSimConfig
from carbonsim.nucleus import Nucleon, SUPPORTED_ISOTOPES, isotope_label
from carbonsim.scene import AtomSceneComposer, ElectronFrame, SceneState
from carbonsim.views.legend_view import AtomLegendWidget
from carbonsim.widgets import AtomPlotter, CollapsibleGroup


class CarbonAtomTab(QtWidgets.QWidget):
    """Carbon atom view with isotope selection and the animation loop."""

    status_message = QtCore.Signal(str)

    def __init__(self, config: AtomSimConfig | None = None, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.config = config or AtomSimConfig()
        self.composer = AtomSceneComposer(self.config.isotope)
        self.animation_running = False
        self._elapsed_offset_ms = 0
        self._clock = QtCore.QElapsedTimer()
        self._closed = False

        self.plotter_frame = AtomPlotter(self.config)
        self.plotter = self.plotter_frame.plotter
        self.controls = self._build_controls()

        layout = QtWidgets.QHBoxLayout(self)
        layout.addWidget(self.plotter_frame, 4)
        layout.addWidget(self.controls, 2)

        self.composer.add_isotope_listener(self._on_isotope_changed)
        self.composer.add_frame_listener(self._on_frame)

        self.plotter_frame.draw_orbitals(self.composer.orbitals)
        self.plotter_frame.draw_electrons(self.composer.electrons)
        self._on_isotope_changed(self.composer.state, self.composer.nucleons)
        self.plotter_frame.reset_view()

        self.animation_timer = QtCore.QTimer(self)
        self.animation_timer.setInterval(self.config.frame_interval_ms)
        self.animation_timer.timeout.connect(self._advance_animation)
        self._start_animation()

    def _build_controls(self) -> QtWidgets.QWidget:
        container = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(container)

        isotope_group = CollapsibleGroup("Isotope")
        isotope_layout = QtWidgets.QFormLayout(isotope_group)
        self.isotope_combo = QtWidgets.QComboBox()
        for isotope in SUPPORTED_ISOTOPES:
            self.isotope_combo.addItem(isotope_label(isotope), userData=isotope)
        self.isotope_combo.setCurrentIndex(max(self.isotope_combo.findData(self.composer.isotope), 0))
        self.isotope_combo.currentIndexChanged.connect(self._on_isotope_selected)
        isotope_layout.addRow("Select Isotope:", self.isotope_combo)
        layout.addWidget(isotope_group)

        animation_group = CollapsibleGroup("Animation")
        animation_layout = QtWidgets.QHBoxLayout(animation_group)
        self.play_anim_btn = QtWidgets.QPushButton("Pause")
        self.play_anim_btn.setIcon(qta.icon("fa5s.pause"))
        self.play_anim_btn.clicked.connect(self._toggle_animation)
        reset_btn = QtWidgets.QPushButton("Reset view")
        reset_btn.setIcon(qta.icon("fa5s.compress-arrows-alt"))
        reset_btn.clicked.connect(self.plotter_frame.reset_view)
        animation_layout.addWidget(self.play_anim_btn)
        animation_layout.addWidget(reset_btn)
        layout.addWidget(animation_group)

        legend_group = CollapsibleGroup("Legend")
        legend_layout = QtWidgets.QVBoxLayout(legend_group)
        self.legend = AtomLegendWidget()
        legend_layout.addWidget(self.legend)
        layout.addWidget(legend_group)

        layout.addStretch()
        return container

    def apply_theme(self, tokens: dict) -> None:
        self.legend.apply_theme(tokens)

    def _on_isotope_selected(self) -> None:
        isotope = self.isotope_combo.currentData()
        if isotope is None:
            return
        self.composer.select_isotope(int(isotope))

    def _on_isotope_changed(self, state: SceneState, nucleons: list[Nucleon]) -> None:
        self.plotter_frame.draw_nucleus(self.composer.title, nucleons)
        self.legend.set_counts(self.composer.proton_count, self.composer.neutron_count)
        self.status_message.emit(
            f"{self.composer.title}: {self.composer.proton_count} protons, {self.composer.neutron_count} neutrons"
        )

    def _on_frame(self, _t: float, frames: list[ElectronFrame]) -> None:
        self.plotter_frame.update_electrons(frames)

    def elapsed_seconds(self) -> float:
        running_ms = self._clock.elapsed() if self.animation_running and self._clock.isValid() else 0
        return (self._elapsed_offset_ms + running_ms) / 1000.0

    def _advance_animation(self) -> None:
        if self._closed:
            return
        self.composer.frame_tick(self.elapsed_seconds())

    def _start_animation(self) -> None:
        self._clock.start()
        self.animation_running = True
        self.animation_timer.start()
        self.play_anim_btn.setText("Pause")
        self.play_anim_btn.setIcon(qta.icon("fa5s.pause"))

    def _stop_animation(self) -> None:
        self._elapsed_offset_ms += self._clock.elapsed()
        self.animation_running = False
        self.animation_timer.stop()
        if getattr(self, "play_anim_btn", None):
            self.play_anim_btn.setText("Resume")
            self.play_anim_btn.setIcon(qta.icon("fa5s.play"))

    def _toggle_animation(self) -> None:
        if self.animation_running:
            self._stop_animation()
        else:
            self._start_animation()

    def cleanup(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.animation_running = False
        try:
            self.animation_timer.stop()
            self.animation_timer.deleteLater()
        except Exception:
            pass
        self.plotter_frame.cleanup()
