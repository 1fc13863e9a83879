"""Session-local conversion history."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ConversionRecord:
    """One logged conversion event."""

    input: str
    output: str
    category: str
    timestamp: datetime = field(default_factory=_now)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def summary(self) -> str:
        return f"{self.input} → {self.output}"

    def same_conversion(self, other: ConversionRecord) -> bool:
        """True if both records show the same input and output strings."""
        return self.input == other.input and self.output == other.output


class ConversionHistory:
    """Ordered store of the conversions made in this session.

    Records are kept oldest first; the history screen shows them newest
    first via :meth:`newest_first`.
    """

    def __init__(self) -> None:
        self._records: list[ConversionRecord] = []

    @property
    def records(self) -> tuple[ConversionRecord, ...]:
        return tuple(self._records)

    @property
    def last(self) -> ConversionRecord | None:
        return self._records[-1] if self._records else None

    def newest_first(self) -> list[ConversionRecord]:
        return list(reversed(self._records))

    def record_if_changed(self, record: ConversionRecord) -> bool:
        """Append *record* unless it repeats the most recent conversion.

        Only the last record is compared, so an older identical conversion
        is recorded again.

        Returns:
            True if the record was appended.
        """
        last = self.last
        if last is not None and last.same_conversion(record):
            logger.debug("Skipping repeated conversion %s", record.summary)
            return False
        self._records.append(record)
        return True

    def clear(self) -> None:
        logger.info("Cleared %d history records", len(self._records))
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ConversionRecord]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)


def format_timestamp(ts: datetime) -> str:
    """Format *ts* in local time with a medium date and short time.

    Example: ``"Oct 17, 2026 at 3:04 PM"``.
    """
    local = ts.astimezone()
    hour = local.hour % 12 or 12
    return f"{local:%b} {local.day}, {local.year} at {hour}:{local:%M %p}"
