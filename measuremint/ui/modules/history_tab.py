"""History tab for the MeasureMint GUI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from measuremint.ui.widgets.result_display import HistoryTable

if TYPE_CHECKING:
    from measuremint.ui.main_window import SharedSession


class HistoryTab(QWidget):
    """Recorded conversions, newest first, with a Clear action."""

    def __init__(self, shared: SharedSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._shared = shared

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        header = QHBoxLayout()
        header.addWidget(QLabel("<b>Conversion History</b>"))
        header.addStretch(1)
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.setProperty("danger", True)
        self.clear_btn.clicked.connect(shared.clear_history)
        header.addWidget(self.clear_btn)
        layout.addLayout(header)

        self.placeholder = QLabel("<i>No conversions yet.</i>")
        self.placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.placeholder)

        self.table = HistoryTable()
        layout.addWidget(self.table)

        shared.history_changed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        history = self._shared.session.history
        if history:
            self.table.set_records(history.newest_first())
        else:
            self.table.clear()
        self.table.setVisible(bool(history))
        self.placeholder.setVisible(not history)
        self.clear_btn.setEnabled(bool(history))
