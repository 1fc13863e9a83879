"""Result and history display widgets for the MeasureMint GUI."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from measuremint.core.history import ConversionRecord, format_timestamp


class ResultCard(QWidget):
    """Captioned card showing the converted value; hidden while empty."""

    def __init__(self, title: str = "🎯 Converted Value", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setProperty("card", True)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)

        caption = QLabel(title)
        caption.setProperty("caption", True)
        layout.addWidget(caption)

        self._value_label = QLabel("")
        self._value_label.setProperty("result", True)
        layout.addWidget(self._value_label)

        self.setVisible(False)

    def set_text(self, text: str) -> None:
        self._value_label.setText(text)
        self.setVisible(bool(text))


class HistoryTable(QWidget):
    """Three-column history table: Conversion | Category | Time."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._table = QTableWidget()
        self._table.setColumnCount(3)
        self._table.setHorizontalHeaderLabels(["Conversion", "Category", "Time"])
        self._table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self._table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        self._table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.setSelectionMode(QTableWidget.SelectionMode.NoSelection)
        self._table.setAlternatingRowColors(True)
        self._table.verticalHeader().setVisible(False)
        layout.addWidget(self._table)

    def clear(self) -> None:
        self._table.setRowCount(0)

    def set_records(self, records: list[ConversionRecord]) -> None:
        """Show *records* in the given order, one row each."""
        self._table.setRowCount(len(records))
        for i, record in enumerate(records):
            summary = QTableWidgetItem(record.summary)
            font = summary.font()
            font.setBold(True)
            summary.setFont(font)
            self._table.setItem(i, 0, summary)
            self._table.setItem(i, 1, QTableWidgetItem(record.category))
            self._table.setItem(i, 2, QTableWidgetItem(format_timestamp(record.timestamp)))
