"""Reusable input form builder for the MeasureMint GUI.

Provides a declarative way to build forms from headers, text entries and
combo boxes whose items carry arbitrary data.
"""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QWidget,
)


class ParamForm(QWidget):
    """Declarative input form.

    Usage::

        form = ParamForm()
        form.add_text("value", "Value", "0")
        form.add_combo("unit", "Unit", [("Meters", LengthUnit.METERS), ("Feet", LengthUnit.FEET)])
        form.value_changed.connect(on_changed)   # receives the field name
        unit = form.get("unit")                  # -> LengthUnit.METERS
    """

    value_changed = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._layout = QFormLayout(self)
        self._layout.setContentsMargins(4, 4, 4, 4)
        self._layout.setSpacing(6)
        self._fields: dict[str, QWidget] = {}
        self._types: dict[str, str] = {}

    def add_header(self, text: str) -> None:
        """Add a caption label spanning the form."""
        label = QLabel(text)
        label.setProperty("caption", True)
        self._layout.addRow(label)

    def add_separator(self) -> None:
        """Add a visual spacer."""
        line = QLabel("")
        line.setFixedHeight(8)
        self._layout.addRow(line)

    def add_text(
        self,
        name: str,
        label: str,
        default: str = "",
        *,
        placeholder: str = "",
    ) -> QLineEdit:
        """Add a free-text entry field."""
        edit = QLineEdit()
        edit.setText(default)
        edit.setPlaceholderText(placeholder)
        edit.setMinimumWidth(160)
        edit.textChanged.connect(lambda _: self.value_changed.emit(name))

        self._layout.addRow(label, edit)
        self._fields[name] = edit
        self._types[name] = "text"
        return edit

    def add_combo(
        self,
        name: str,
        label: str,
        options: list[tuple[str, Any]],
        default: Any = None,
    ) -> QComboBox:
        """Add a combo box of ``(text, data)`` items."""
        combo = QComboBox()
        combo.setMinimumWidth(160)
        self._fill_combo(combo, options, default)
        combo.currentIndexChanged.connect(lambda _: self.value_changed.emit(name))

        self._layout.addRow(label, combo)
        self._fields[name] = combo
        self._types[name] = "combo"
        return combo

    def set_options(self, name: str, options: list[tuple[str, Any]], current: Any = None) -> None:
        """Replace the items of a combo box without emitting ``value_changed``."""
        combo = self._fields[name]
        combo.blockSignals(True)
        try:
            combo.clear()
            self._fill_combo(combo, options, current)
        finally:
            combo.blockSignals(False)

    @staticmethod
    def _fill_combo(combo: QComboBox, options: list[tuple[str, Any]], current: Any) -> None:
        for text, data in options:
            combo.addItem(text, data)
        if current is not None:
            idx = combo.findData(current)
            if idx >= 0:
                combo.setCurrentIndex(idx)

    def get(self, name: str) -> Any:
        """Get a single field value (combo boxes return the item data)."""
        widget = self._fields[name]
        t = self._types[name]
        if t == "text":
            return widget.text()
        elif t == "combo":
            return widget.currentData()
        return None

    def set_value(self, name: str, value: Any) -> None:
        """Set a field value without emitting ``value_changed``."""
        widget = self._fields[name]
        t = self._types[name]
        widget.blockSignals(True)
        try:
            if t == "text":
                widget.setText(str(value))
            elif t == "combo":
                idx = widget.findData(value)
                if idx >= 0:
                    widget.setCurrentIndex(idx)
        finally:
            widget.blockSignals(False)
