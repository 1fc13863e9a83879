"""Unit conversion utilities for MeasureMint.

All arithmetic is delegated to pint; this module only owns the shared
registry and a cached conversion keyed on pint unit names.
"""

from __future__ import annotations

from functools import lru_cache

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Offset units (degC, degF) are handled as absolute temperatures.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source pint unit name.
        to_unit: Target pint unit name.

    Returns:
        Converted numeric value.
    """
    return float(_ureg.Quantity(value, from_unit).to(to_unit).magnitude)
