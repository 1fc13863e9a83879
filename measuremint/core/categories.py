"""Conversion categories and their closed unit sets.

Each category owns one enumeration of units.  Every unit member carries
its own key, display symbol, emoji label and pint unit name, so label
lookup is a plain attribute access on a closed set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Category(Enum):
    """Families of mutually convertible units, in display order."""

    LENGTH = "length"
    TEMPERATURE = "temperature"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def units(self) -> list[Unit]:
        return units_for(self)


_CATEGORY_LABELS = {
    Category.LENGTH: "📏 Length",
    Category.TEMPERATURE: "🌡️ Temperature",
}


@dataclass(frozen=True)
class UnitInfo:
    """Static description of a single unit."""

    key: str
    symbol: str
    label: str
    pint_name: str


class _UnitMixin:
    """Accessors shared by the per-category unit enumerations."""

    value: UnitInfo

    @property
    def key(self) -> str:
        return self.value.key

    @property
    def symbol(self) -> str:
        return self.value.symbol

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def pint_name(self) -> str:
        return self.value.pint_name


class LengthUnit(_UnitMixin, Enum):
    METERS = UnitInfo("meters", "m", "📏 Meters", "meter")
    KILOMETERS = UnitInfo("kilometers", "km", "🌍 Kilometers", "kilometer")
    FEET = UnitInfo("feet", "ft", "👣 Feet", "foot")
    YARDS = UnitInfo("yards", "yd", "🪢 Yards", "yard")
    MILES = UnitInfo("miles", "mi", "🛣️ Miles", "mile")

    @property
    def category(self) -> Category:
        return Category.LENGTH


class TemperatureUnit(_UnitMixin, Enum):
    CELSIUS = UnitInfo("celsius", "°C", "🌡️ Celsius", "degC")
    FAHRENHEIT = UnitInfo("fahrenheit", "°F", "🔥 Fahrenheit", "degF")

    @property
    def category(self) -> Category:
        return Category.TEMPERATURE


Unit = Union[LengthUnit, TemperatureUnit]

_UNITS_BY_CATEGORY: dict[Category, type[Enum]] = {
    Category.LENGTH: LengthUnit,
    Category.TEMPERATURE: TemperatureUnit,
}


def units_for(category: Category) -> list[Unit]:
    """Return the closed unit set of *category* in display order."""
    return list(_UNITS_BY_CATEGORY[category])


def default_units(category: Category) -> tuple[Unit, Unit]:
    """Return the (input, output) units selected after switching to *category*."""
    units = units_for(category)
    return units[0], units[-1]


def unit_label(unit: Unit) -> str:
    """Return the emoji display label for *unit*."""
    return unit.label


def all_units() -> list[Unit]:
    """Return every known unit, grouped by category."""
    return [unit for category in Category for unit in units_for(category)]


def _aliases(unit: Unit) -> set[str]:
    names = {unit.name, unit.key, unit.symbol, unit.pint_name, unit.label}
    names.add(unit.symbol.lstrip("°"))
    return {n.lower() for n in names}


def _category_aliases(category: Category) -> set[str]:
    return {category.name.lower(), category.value, category.label.lower()}


def parse_category(text: str | Category) -> Category:
    """Look up a category by name, value or label (case-insensitive).

    Raises:
        ValueError: If no category matches.
    """
    if isinstance(text, Category):
        return text
    needle = text.strip().lower()
    for category in Category:
        if needle in _category_aliases(category):
            return category
    choices = ", ".join(c.value for c in Category)
    raise ValueError(f"Unknown category {text!r} (choose from: {choices})")


def parse_unit(text: str | Unit, category: Category | None = None) -> Unit:
    """Look up a unit by name, key, symbol or label (case-insensitive).

    Args:
        text: Unit name such as ``"ft"``, ``"feet"`` or ``"°C"``.
        category: If given, the unit must belong to this category.

    Raises:
        ValueError: If no unit matches, or the match lies outside *category*.
    """
    if isinstance(text, (LengthUnit, TemperatureUnit)):
        unit = text
    else:
        needle = text.strip().lower()
        matches = [u for u in all_units() if needle in _aliases(u)]
        if not matches:
            raise ValueError(f"Unknown unit {text!r}")
        unit = matches[0]

    if category is not None and unit.category is not category:
        choices = ", ".join(u.key for u in units_for(category))
        raise ValueError(
            f"Unit {unit.key!r} is not a {category.value} unit (choose from: {choices})"
        )
    return unit
