"""Utility modules for MeasureMint."""

from measuremint.utils.units import convert, get_unit_registry

__all__ = ["convert", "get_unit_registry"]
