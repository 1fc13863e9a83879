"""Converter session state.

``ConverterSession`` is the single state container behind both screens:
the converter screen drives it, the history screen reads and clears its
``history``.
"""

from __future__ import annotations

import logging
import math

from measuremint.core.categories import (
    Category,
    LengthUnit,
    Unit,
    default_units,
    parse_unit,
    units_for,
)
from measuremint.core.config import Settings
from measuremint.core.converter import ConversionResult, convert_measurement
from measuremint.core.history import ConversionHistory, ConversionRecord

logger = logging.getLogger(__name__)


def parse_value(text: str) -> float:
    """Parse numeric entry text; empty, malformed or non-finite text gives 0.0."""
    cleaned = text.strip().replace(",", "")
    if not cleaned:
        return 0.0
    # decimal entry only, no digit-group underscores
    if "_" in cleaned:
        logger.debug("Could not parse %r as a number, using 0", text)
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug("Could not parse %r as a number, using 0", text)
        return 0.0
    return value if math.isfinite(value) else 0.0


class ConverterSession:
    """Current category, units, input value, displayed result and history.

    The input and output units always belong to the active category.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        history: ConversionHistory | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.history = history if history is not None else ConversionHistory()

        self._category = self.settings.category
        if self._category is Category.LENGTH:
            self._input_unit: Unit = LengthUnit.METERS
            self._output_unit: Unit = LengthUnit.FEET
        else:
            self._input_unit, self._output_unit = default_units(self._category)
        self.input_value = 0.0
        self.result_text = ""

    @property
    def category(self) -> Category:
        return self._category

    @property
    def input_unit(self) -> Unit:
        return self._input_unit

    @property
    def output_unit(self) -> Unit:
        return self._output_unit

    @property
    def available_units(self) -> list[Unit]:
        return units_for(self._category)

    def select_category(self, category: Category) -> None:
        """Switch category, reset both units and clear the displayed result."""
        self._category = category
        self._input_unit, self._output_unit = default_units(category)
        self.result_text = ""
        logger.debug(
            "Category %s: %s -> %s", category.value, self._input_unit.key, self._output_unit.key
        )

    def select_input_unit(self, unit: Unit | str) -> None:
        self._input_unit = parse_unit(unit, self._category)

    def select_output_unit(self, unit: Unit | str) -> None:
        self._output_unit = parse_unit(unit, self._category)

    def set_input_text(self, text: str) -> None:
        self.input_value = parse_value(text)

    def set_input_value(self, value: float) -> None:
        value = float(value)
        self.input_value = value if math.isfinite(value) else 0.0

    def convert(self) -> ConversionResult:
        """Convert the current input without touching the displayed result."""
        return convert_measurement(
            self.input_value, self._input_unit, self._output_unit, self.settings
        )

    def convert_and_record(self) -> tuple[ConversionResult, bool]:
        """Convert, display the result and record it unless it repeats the last one.

        Returns:
            The conversion result and whether a history record was appended.
        """
        result = self.convert()
        self.result_text = result.output_text
        record = ConversionRecord(
            input=result.input_text,
            output=result.output_text,
            category=self._category.label,
        )
        added = self.history.record_if_changed(record)
        return result, added

    def clear_history(self) -> None:
        self.history.clear()
