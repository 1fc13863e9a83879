"""Application settings and their JSON persistence.

Only display preferences are stored on disk; conversion history is
session-local and never written out.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from measuremint.core.categories import Category, parse_category
from measuremint.utils.validation import ValidationResult, validate_int_range

logger = logging.getLogger(__name__)

MAX_FRACTION_DIGITS = 10


@dataclass
class Settings:
    """Display preferences shared by the CLI and the GUI."""

    fraction_digits: int = 3
    use_grouping: bool = True
    initial_category: str = "length"

    @property
    def category(self) -> Category:
        return parse_category(self.initial_category)


def validate_settings(data: dict[str, Any]) -> ValidationResult:
    """Check a settings dictionary before it is turned into ``Settings``."""
    result = ValidationResult()

    digits = data.get("fraction_digits")
    if digits is not None:
        validate_int_range("fraction_digits", digits, 0, MAX_FRACTION_DIGITS, result)
        if isinstance(digits, int) and 6 < digits <= MAX_FRACTION_DIGITS:
            result.warning(
                "fraction_digits",
                f"{digits} fraction digits will expose floating-point noise",
                value=digits,
            )

    grouping = data.get("use_grouping")
    if grouping is not None and not isinstance(grouping, bool):
        result.error("use_grouping", f"use_grouping must be true or false, got {grouping!r}")

    category = data.get("initial_category")
    if category is not None:
        try:
            parse_category(str(category))
        except ValueError as e:
            result.error("initial_category", str(e), value=category)

    return result


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """Build ``Settings`` from a plain dictionary.

    Unknown keys are ignored.

    Raises:
        ValueError: If any value fails validation.
    """
    known = {f.name for f in fields(Settings)}
    for key in sorted(set(data) - known):
        logger.warning("Ignoring unknown setting %r", key)
    data = {k: v for k, v in data.items() if k in known}

    result = validate_settings(data)
    for msg in result.warnings:
        logger.warning(msg.message)
    if not result.is_valid:
        raise ValueError("; ".join(m.message for m in result.errors))

    settings = Settings(**data)
    # normalise aliases such as "Temperature" or a label
    settings.initial_category = settings.category.value
    return settings


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")

    settings = settings_from_dict(data)
    logger.info("Loaded settings from %s", path)
    return settings


def save_settings(settings: Settings, path: str | Path) -> None:
    """Save settings to a JSON file."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, indent=2)
    logger.info("Saved settings to %s", path)
