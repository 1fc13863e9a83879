"""Measurement conversion and display formatting.

The arithmetic is pint's; this module checks that both units share a
category and renders values the way the converter screen shows them:
at most a few fraction digits, grouping separators, and the unit symbol
(``"1,000 m"``, ``"3.281 ft"``, ``"32°F"``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from measuremint.core.categories import Unit
from measuremint.core.config import Settings
from measuremint.utils.units import convert as _convert_pint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """A converted value together with both display strings."""

    value: float
    input_unit: Unit
    converted_value: float
    output_unit: Unit
    input_text: str
    output_text: str


def convert(value: float, input_unit: Unit, output_unit: Unit) -> float:
    """Convert *value* from *input_unit* to *output_unit*.

    Raises:
        ValueError: If the units belong to different categories.
    """
    if input_unit.category is not output_unit.category:
        raise ValueError(
            f"Cannot convert {input_unit.category.value} unit {input_unit.key!r} "
            f"to {output_unit.category.value} unit {output_unit.key!r}"
        )
    return _convert_pint(float(value), input_unit.pint_name, output_unit.pint_name)


def format_number(value: float, fraction_digits: int = 3, use_grouping: bool = True) -> str:
    """Format *value* with at most *fraction_digits* digits, trailing zeros dropped."""
    spec = f",.{fraction_digits}f" if use_grouping else f".{fraction_digits}f"
    text = format(value, spec)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_measurement(value: float, unit: Unit, settings: Settings | None = None) -> str:
    """Render *value* with the symbol of *unit*.

    Degree symbols attach directly to the number; other symbols are
    separated by a space.
    """
    settings = settings or Settings()
    number = format_number(value, settings.fraction_digits, settings.use_grouping)
    sep = "" if unit.symbol.startswith("°") else " "
    return f"{number}{sep}{unit.symbol}"


def convert_measurement(
    value: float,
    input_unit: Unit,
    output_unit: Unit,
    settings: Settings | None = None,
) -> ConversionResult:
    """Convert *value* and format both sides for display."""
    settings = settings or Settings()
    converted = convert(value, input_unit, output_unit)
    result = ConversionResult(
        value=float(value),
        input_unit=input_unit,
        converted_value=converted,
        output_unit=output_unit,
        input_text=format_measurement(value, input_unit, settings),
        output_text=format_measurement(converted, output_unit, settings),
    )
    logger.debug("Converted %s -> %s", result.input_text, result.output_text)
    return result
