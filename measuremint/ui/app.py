"""MeasureMint GUI application entry point.

Launch with:
    python -m measuremint.ui.app
    measuremint gui      (via CLI command)
"""

from __future__ import annotations

import sys

from measuremint.core.config import Settings


def run(settings: Settings | None = None) -> None:
    """Launch the MeasureMint desktop application."""
    from PySide6.QtWidgets import QApplication

    from measuremint.ui.main_window import MainWindow
    from measuremint.ui.styles.theme import STYLESHEET

    app = QApplication(sys.argv)
    app.setApplicationName("MeasureMint")
    app.setStyle("Fusion")
    app.setStyleSheet(STYLESHEET)

    window = MainWindow(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
