from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from carbonsim.config import AtomSimConfig
from carbonsim.tabs.carbon_atom_tab import CarbonAtomTab
from carbonsim.theming.theme_tokens import DEFAULT_THEME, THEME_TOKENS, get_theme_tokens, stylesheet_for


class CarbonSimMainWindow(QtWidgets.QMainWindow):
    def __init__(self, config: AtomSimConfig | None = None) -> None:
        super().__init__()
        self.config = config or AtomSimConfig()
        self.setWindowTitle("Carbon Atom")
        self.resize(*self.config.window_size)
        self._theme_name = DEFAULT_THEME

        self.title_label = QtWidgets.QLabel("Carbon Atom")
        self.title_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.atom_tab = CarbonAtomTab(self.config)
        self.atom_tab.status_message.connect(self.statusBar().showMessage)

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.addWidget(self.title_label)
        layout.addWidget(self.atom_tab, 1)
        self.setCentralWidget(central)
        self._build_menus()

        self.statusBar().showMessage("Drag to orbit the atom; scroll to zoom.")
        self.apply_theme(self._theme_name)

    def closeEvent(self, event) -> None:
        self.atom_tab.cleanup()
        super().closeEvent(event)

    def _build_menus(self) -> None:
        view_menu = self.menuBar().addMenu("View")
        theme_menu = view_menu.addMenu("Theme")
        theme_group = QtGui.QActionGroup(self)
        theme_group.setExclusive(True)
        for name in THEME_TOKENS:
            action = QtGui.QAction(name, self)
            action.setCheckable(True)
            action.setChecked(name == self._theme_name)
            action.triggered.connect(lambda checked, n=name: self.apply_theme(n))
            theme_group.addAction(action)
            theme_menu.addAction(action)
        reset_action = QtGui.QAction("Reset camera", self)
        reset_action.triggered.connect(self.atom_tab.plotter_frame.reset_view)
        view_menu.addAction(reset_action)

    def apply_theme(self, theme_name: str) -> None:
        self._theme_name = theme_name
        tokens = get_theme_tokens(theme_name)
        self.setStyleSheet(stylesheet_for(tokens))
        title_size = tokens.get("font", {}).get("titleSize", 14)
        self.title_label.setStyleSheet(f"font-size: {title_size + 6}pt; font-family: math;")
        self.atom_tab.apply_theme(tokens)

    @property
    def theme_name(self) -> str:
        return self._theme_name
