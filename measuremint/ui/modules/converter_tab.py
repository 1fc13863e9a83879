"""Converter tab for the MeasureMint GUI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from measuremint.core.categories import Category, unit_label
from measuremint.ui.widgets.param_input import ParamForm
from measuremint.ui.widgets.result_display import ResultCard

if TYPE_CHECKING:
    from measuremint.ui.main_window import SharedSession

logger = logging.getLogger(__name__)


class ConverterTab(QWidget):
    """Category, value and unit pickers plus the Convert action."""

    history_requested = Signal()
    status_message = Signal(str)

    def __init__(self, shared: SharedSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._shared = shared
        session = shared.session

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self.form = ParamForm()
        self.form.add_header("🧭 Conversion Type")
        self.form.add_combo(
            "category",
            "Category",
            [(c.label, c) for c in Category],
            default=session.category,
        )
        self.form.add_separator()
        self.form.add_header("🔢 Enter Value")
        self.form.add_text("value", "Value", f"{session.input_value:g}", placeholder="Value")
        self.form.add_separator()
        self.form.add_header("📥 From Unit")
        self.form.add_combo("from", "From", self._unit_options(), default=session.input_unit)
        self.form.add_header("📤 To Unit")
        self.form.add_combo("to", "To", self._unit_options(), default=session.output_unit)
        self.form.value_changed.connect(self._on_field_changed)

        scroll = QScrollArea()
        scroll.setWidget(self.form)
        scroll.setWidgetResizable(True)
        layout.addWidget(scroll)

        convert_btn = QPushButton("Convert")
        convert_btn.clicked.connect(self._convert)
        layout.addWidget(convert_btn)

        self.result_card = ResultCard()
        layout.addWidget(self.result_card)

        history_btn = QPushButton("🕘 View Conversion History")
        history_btn.setProperty("secondary", True)
        history_btn.clicked.connect(self.history_requested.emit)
        layout.addWidget(history_btn)

        shared.category_changed.connect(self._refresh_units)
        shared.result_changed.connect(self.result_card.set_text)

    def _unit_options(self) -> list[tuple[str, object]]:
        return [(unit_label(u), u) for u in self._shared.session.available_units]

    def _on_field_changed(self, name: str) -> None:
        value = self.form.get(name)
        if name == "category":
            self._shared.select_category(value)
        elif name == "from":
            self._shared.select_input_unit(value)
        elif name == "to":
            self._shared.select_output_unit(value)
        elif name == "value":
            self._shared.set_input_text(value)

    def _refresh_units(self) -> None:
        session = self._shared.session
        options = self._unit_options()
        self.form.set_options("from", options, current=session.input_unit)
        self.form.set_options("to", options, current=session.output_unit)
        self.form.set_value("category", session.category)

    def _convert(self) -> None:
        try:
            result, added = self._shared.convert()
        except Exception as e:
            logger.exception("Conversion failed")
            self.status_message.emit(f"Error: {e}")
            return
        self.status_message.emit(
            f"Recorded {result.input_text} → {result.output_text}"
            if added
            else "Same conversion as last time, not recorded"
        )
