"""
Temporal Value Formatter — Каноническое представление дат и времени

Форматирует date/time значения для сообщений об ошибках в детерминированную
строку с учётом offset, в угловых скобках:

    <2024-03-15 13:45:30 UTC>
    <2024-03-15 08:00:00.250 UTC+5:30>
    <2024-03-15>
    <13:45:30>
    <0001-01-01 00:00:00.000>

Фрагменты:
- Дата (yyyy-MM-dd): только если дата отличается от 0001-01-01
- Время (HH:mm:ss[.fff]): только если час, минута или секунда ненулевые
- Offset: только рядом с датой и только если отличается от опорного offset

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Offset выводится в целых часах (UTC+2) или целых минутах (UTC+5:30)
2. Offset не кратный минуте — нарушение контракта (exception)
3. Миллисекунды отбрасываются, никогда не округляются
"""

import logging
import time as _time
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Final, Optional

from src.core.domain.options import FormattingOptions

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO_OFFSET: Final[timedelta] = timedelta(0)
ONE_HOUR: Final[timedelta] = timedelta(hours=1)
ONE_MINUTE: Final[timedelta] = timedelta(minutes=1)

# datetime.timezone принимает offset строго меньше суток
MAX_OFFSET: Final[timedelta] = timedelta(hours=24)

# Выводится, если у значения нет ни даты, ни времени суток
EPOCH_FRAGMENT: Final[str] = "0001-01-01 00:00:00.000"


# =============================================================================
# ОШИБКИ
# =============================================================================


class OffsetGranularityError(ValueError):
    """UTC offset не кратен минуте."""

    def __init__(self, offset: timedelta):
        self.offset = offset
        super().__init__(f"Offset is supposed to be in whole minutes, got {offset}")


# =============================================================================
# ОПОРНЫЙ OFFSET
# =============================================================================


def local_base_utc_offset() -> timedelta:
    """
    Стандартный (без DST) UTC offset локальной зоны.

    Returns:
        Offset к востоку от UTC (отрицательный к западу)
    """
    return timedelta(seconds=-_time.timezone)


# =============================================================================
# FORMATTER
# =============================================================================


class TemporalValueFormatter:
    """
    Formatter для datetime, date и time значений.

    Опорный offset фиксируется при создании и не меняется.
    Значениям без offset приписывается опорный offset; offset, равный
    опорному, не выводится.

    Поддерживаемые значения:
    - datetime (naive или aware)
    - date (полночь, naive)
    - time (время суток на 0001-01-01, offset никогда не выводится)
    """

    def __init__(self, reference_offset: Optional[timedelta] = None):
        """
        Args:
            reference_offset: опорный UTC offset (default: стандартный локальный offset)

        Raises:
            TypeError: если reference_offset не timedelta
            ValueError: если reference_offset не строго в пределах ±24 часов
        """
        if reference_offset is None:
            reference_offset = local_base_utc_offset()

        if not isinstance(reference_offset, timedelta):
            raise TypeError(
                f"reference_offset must be a timedelta, got {type(reference_offset).__name__}"
            )

        if abs(reference_offset) >= MAX_OFFSET:
            raise ValueError(f"reference_offset {reference_offset} must be within ±24 hours")

        self._reference_offset = reference_offset

    @classmethod
    def from_options(cls, options: FormattingOptions) -> "TemporalValueFormatter":
        """Formatter из секции formatting документа EquivalencyOptions."""
        return cls(options.reference_offset())

    @property
    def reference_offset(self) -> timedelta:
        return self._reference_offset

    def can_handle(self, value: Any) -> bool:
        """
        Является ли значение поддерживаемым temporal значением.

        Args:
            value: любое значение из конвейера форматирования

        Returns:
            True для экземпляров datetime, date и time
        """
        return isinstance(value, (datetime, date, time))

    def format(
        self,
        value: Any,
        use_line_breaks: bool = False,
        processed_objects: Optional[list] = None,
        nested_property_level: int = 0,
    ) -> str:
        """
        Форматирование temporal значения в '<fragment fragment ...>'.

        Temporal значения — однострочные листья: use_line_breaks,
        processed_objects и nested_property_level принимаются для
        совместимости с конвейером форматирования и игнорируются.

        Args:
            value: datetime, date или time

        Returns:
            Каноническая строка, например '<2024-03-15 13:45:30 UTC>'

        Raises:
            TypeError: если значение не поддерживается
            OffsetGranularityError: если offset не кратен минуте
        """
        if not self.can_handle(value):
            raise TypeError(f"Cannot format {type(value).__name__} as a temporal value")

        moment = self._to_offset_aware(value)
        offset = moment.utcoffset()

        # Offset вычисляется первым: при нарушении контракта вывода нет вообще
        offset_fragment = self.format_offset(offset) if _has_date(moment) else None

        fragments: list[Optional[str]] = []

        if _has_date(moment):
            fragments.append(f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}")

        if _has_time(moment):
            fragment = f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
            if _milliseconds(moment) > 0:
                fragment += f".{_milliseconds(moment):03d}"
            fragments.append(fragment)

        if not fragments:
            fragments.append(EPOCH_FRAGMENT)

        fragments.append(offset_fragment)

        return "<" + " ".join(f for f in fragments if f and not f.isspace()) + ">"

    def format_offset(self, offset: timedelta) -> Optional[str]:
        """
        Форматирование UTC offset.

        Args:
            offset: UTC offset значения

        Returns:
            None если offset равен опорному,
            'UTC' для нуля, 'UTC±H' для целых часов, 'UTC±H:MM' для целых минут

        Raises:
            OffsetGranularityError: если offset не кратен минуте
        """
        if offset == self._reference_offset:
            return None

        if offset == ZERO_OFFSET:
            return "UTC"

        absolute_offset = abs(offset)

        if absolute_offset % ONE_HOUR == ZERO_OFFSET:
            formatted_offset = str(absolute_offset // ONE_HOUR)
        elif absolute_offset % ONE_MINUTE == ZERO_OFFSET:
            hours, remainder = divmod(absolute_offset, ONE_HOUR)
            formatted_offset = f"{hours}:{remainder // ONE_MINUTE:02d}"
        else:
            raise OffsetGranularityError(offset)

        sign = "-" if offset < ZERO_OFFSET else "+"
        return "UTC" + sign + formatted_offset

    def _to_offset_aware(self, value: Any) -> datetime:
        """Приведение поддерживаемого значения к aware datetime."""
        if isinstance(value, datetime):
            if value.utcoffset() is not None:
                return value
            logger.debug("Assuming reference offset %s for naive %r", self._reference_offset, value)
            return value.replace(tzinfo=timezone(self._reference_offset))

        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=timezone(self._reference_offset))

        return datetime.combine(date.min, value.replace(tzinfo=None), tzinfo=timezone(self._reference_offset))

    def __repr__(self) -> str:
        return f"TemporalValueFormatter(reference_offset={self._reference_offset!r})"


# =============================================================================
# HELPERS
# =============================================================================


def _has_date(moment: datetime) -> bool:
    return moment.day != 1 or moment.month != 1 or moment.year != 1


def _has_time(moment: datetime) -> bool:
    return moment.hour != 0 or moment.minute != 0 or moment.second != 0


def _milliseconds(moment: datetime) -> int:
    # отбрасывание, не округление
    return moment.microsecond // 1000
