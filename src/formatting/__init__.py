"""Formatting — представление значений в сообщениях об ошибках.

- Temporal values: каноническое представление datetime/date/time с учётом offset
"""

from .temporal import (
    EPOCH_FRAGMENT,
    OffsetGranularityError,
    TemporalValueFormatter,
    local_base_utc_offset,
)

__all__ = [
    "TemporalValueFormatter",
    "OffsetGranularityError",
    "EPOCH_FRAGMENT",
    "local_base_utc_offset",
]
