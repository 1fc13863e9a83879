"""Main application window for the MeasureMint GUI."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow,
    QStatusBar,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from measuremint import __app_name__, __version__
from measuremint.core.categories import Category, Unit
from measuremint.core.config import Settings
from measuremint.core.converter import ConversionResult
from measuremint.core.session import ConverterSession
from measuremint.ui.modules.converter_tab import ConverterTab
from measuremint.ui.modules.history_tab import HistoryTab

logger = logging.getLogger(__name__)


class SharedSession(QObject):
    """Qt wrapper around the ``ConverterSession`` both tabs share.

    Tabs mutate the session only through this object; it re-emits every
    change as a signal so the other tab can refresh.
    """

    category_changed = Signal()
    result_changed = Signal(str)
    history_changed = Signal()

    def __init__(self, session: ConverterSession | None = None) -> None:
        super().__init__()
        self.session = session or ConverterSession()

    def select_category(self, category: Category) -> None:
        self.session.select_category(category)
        self.category_changed.emit()
        self.result_changed.emit(self.session.result_text)

    def select_input_unit(self, unit: Unit) -> None:
        self.session.select_input_unit(unit)

    def select_output_unit(self, unit: Unit) -> None:
        self.session.select_output_unit(unit)

    def set_input_text(self, text: str) -> None:
        self.session.set_input_text(text)

    def convert(self) -> tuple[ConversionResult, bool]:
        result, added = self.session.convert_and_record()
        self.result_changed.emit(self.session.result_text)
        if added:
            self.history_changed.emit()
        return result, added

    def clear_history(self) -> None:
        self.session.clear_history()
        self.history_changed.emit()


class MainWindow(QMainWindow):
    """MeasureMint main application window.

    A converter tab and a history tab sharing one session.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()

        self.setWindowTitle(f"{__app_name__} v{__version__}")
        self.setMinimumSize(420, 560)
        self.resize(480, 720)

        # Shared state across tabs
        self.shared = SharedSession(ConverterSession(settings))

        # Central widget
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(4, 4, 4, 4)

        self.tabs = QTabWidget()
        self.tabs.setTabPosition(QTabWidget.TabPosition.North)
        self.tabs.setDocumentMode(True)
        layout.addWidget(self.tabs)

        self.converter_tab = ConverterTab(shared=self.shared)
        self.history_tab = HistoryTab(shared=self.shared)

        self.tabs.addTab(self.converter_tab, "Converter")
        self.tabs.addTab(self.history_tab, "History")

        self.converter_tab.history_requested.connect(
            lambda: self.tabs.setCurrentWidget(self.history_tab)
        )
        self.converter_tab.status_message.connect(self._show_message)
        self.shared.history_changed.connect(self._on_history_changed)

        # Status bar
        self.status = QStatusBar()
        self.setStatusBar(self.status)
        self.status.showMessage(f"{__app_name__} v{__version__} — Ready")

        self._build_menu()

    def _build_menu(self) -> None:
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        view_menu = menu.addMenu("&View")

        for i in range(self.tabs.count()):
            tab_name = self.tabs.tabText(i)
            action = QAction(f"&{tab_name}", self)
            action.setShortcut(f"Ctrl+{i + 1}")
            action.triggered.connect(lambda checked, idx=i: self.tabs.setCurrentIndex(idx))
            view_menu.addAction(action)

        help_menu = menu.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _show_message(self, text: str) -> None:
        self.status.showMessage(text, 3000)

    def _on_history_changed(self) -> None:
        count = len(self.shared.session.history)
        self.tabs.setTabText(self.tabs.indexOf(self.history_tab), f"History ({count})" if count else "History")

    def _show_about(self) -> None:
        from PySide6.QtWidgets import QMessageBox

        QMessageBox.about(
            self,
            f"About {__app_name__}",
            f"<h3>{__app_name__} v{__version__}</h3>"
            f"<p>Length and temperature unit converter.</p>"
            f"<p>Conversion history is kept for the current session only.</p>",
        )
