from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from carbonsim.nucleus import NEUTRON_COLOR, PROTON_COLOR
from carbonsim.orbitals import configuration_text

ELECTRON_LEGEND: tuple[tuple[str, str], ...] = (
    ("#FF0", "1s Electrons"),
    ("#FFA500", "2s Electrons"),
    ("#0F0", "2p Electrons"),
)


class AtomLegendWidget(QtWidgets.QWidget):
    """Colour key for nucleons and electron shells, plus the model caption."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._dot_size = 20
        self._text_color = "#ffffff"
        self._border_color = "#303030"
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 0)
        layout.setSpacing(10)

        nucleon_row = QtWidgets.QHBoxLayout()
        self._proton_dot = QtWidgets.QLabel()
        self._proton_label = QtWidgets.QLabel()
        self._neutron_dot = QtWidgets.QLabel()
        self._neutron_label = QtWidgets.QLabel()
        nucleon_row.addWidget(self._proton_dot)
        nucleon_row.addWidget(self._proton_label)
        nucleon_row.addSpacing(20)
        nucleon_row.addWidget(self._neutron_dot)
        nucleon_row.addWidget(self._neutron_label)
        nucleon_row.addStretch()
        layout.addLayout(nucleon_row)

        electron_row = QtWidgets.QHBoxLayout()
        self._electron_dots: list[tuple[QtWidgets.QLabel, str]] = []
        self._text_labels: list[QtWidgets.QLabel] = [self._proton_label, self._neutron_label]
        for color, text in ELECTRON_LEGEND:
            dot = QtWidgets.QLabel()
            label = QtWidgets.QLabel(text)
            electron_row.addWidget(dot)
            electron_row.addWidget(label)
            electron_row.addSpacing(20)
            self._electron_dots.append((dot, color))
            self._text_labels.append(label)
        electron_row.addStretch()
        layout.addLayout(electron_row)

        self.config_label = QtWidgets.QLabel(
            f"The electron configuration of carbon is {configuration_text(6)}."
        )
        self.config_label.setWordWrap(True)
        self.scale_note = QtWidgets.QLabel("Model is not to scale.")
        self.scale_note.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self._text_labels.extend([self.config_label, self.scale_note])
        layout.addWidget(self.config_label)
        layout.addWidget(self.scale_note)

        for dot in (self._proton_dot, self._neutron_dot, *(dot for dot, _ in self._electron_dots)):
            dot.setFixedSize(self._dot_size, self._dot_size)
        self.set_counts(6, 6)
        self._restyle()

    def set_counts(self, protons: int, neutrons: int) -> None:
        self._proton_label.setText(f"Protons: {protons}")
        self._neutron_label.setText(f"Neutrons: {neutrons}")

    def apply_theme(self, tokens: dict) -> None:
        colors = tokens.get("colors", {})
        self._text_color = colors.get("text", self._text_color)
        self._border_color = colors.get("border", self._border_color)
        self._restyle()

    def _restyle(self) -> None:
        self._set_dot_style(self._proton_dot, PROTON_COLOR)
        self._set_dot_style(self._neutron_dot, NEUTRON_COLOR)
        for dot, color in self._electron_dots:
            self._set_dot_style(dot, color)
        for label in self._text_labels:
            label.setStyleSheet(f"color: {self._text_color};")
        self.scale_note.setStyleSheet(f"color: {self._text_color}; font-style: italic;")

    def _set_dot_style(self, widget: QtWidgets.QLabel, color: str) -> None:
        radius = self._dot_size // 2
        widget.setStyleSheet(
            f"background: {color}; border: 1px solid {self._border_color}; border-radius: {radius}px;"
        )
