from __future__ import annotations

import sys

from PySide6 import QtWidgets

from carbonsim.config import parse_args
from carbonsim.views.main_window import CarbonSimMainWindow


def main() -> None:
    config = parse_args(sys.argv[1:])
    app = QtWidgets.QApplication(sys.argv[:1])
    app.setStyle("Fusion")
    window = CarbonSimMainWindow(config)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
