"""
EquivalencyOptions — Модель настроек правил упорядочивания и форматирования

Immutable Pydantic модели документа настроек.
Полная совместимость с JSON Schema (src/core/contracts/schema/equivalency_options.json).
"""

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# NESTED MODELS
# =============================================================================


class OrderingOptions(BaseModel):
    """
    Какие коллекции сравниваются со строгим порядком.

    Коллекция сравнивается с учётом порядка, если строгий порядок включён
    для всех коллекций или её member path есть в списке.
    """

    strict_ordering_for_all: bool = Field(
        False, description="Строгий порядок для всех коллекций графа"
    )
    strict_ordering_paths: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Member paths со строгим порядком (например, 'Orders.Items')",
    )

    model_config = {"frozen": True}

    @field_validator("strict_ordering_paths")
    @classmethod
    def validate_paths_not_blank(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Шаблон правила не может быть пустым или состоять из пробелов."""
        for path in v:
            if not path.strip():
                raise ValueError("strict_ordering_paths must not contain blank paths")
        return v


class FormattingOptions(BaseModel):
    """
    Форматирование значений в сообщениях об ошибках.

    reference_offset_minutes — UTC offset, который подразумевается у значений
    без offset; None означает стандартный offset локальной зоны.
    """

    reference_offset_minutes: Optional[int] = Field(
        None,
        gt=-1440,
        lt=1440,
        description="Опорный UTC offset в минутах (nullable, локальный если не задан)",
    )

    model_config = {"frozen": True}

    def reference_offset(self) -> Optional[timedelta]:
        """
        Опорный offset как timedelta.

        Returns:
            Offset, или None если используется локальный offset
        """
        if self.reference_offset_minutes is None:
            return None
        return timedelta(minutes=self.reference_offset_minutes)


# =============================================================================
# EQUIVALENCY OPTIONS MODEL
# =============================================================================


class EquivalencyOptions(BaseModel):
    """
    Документ настроек equivalency engine.

    Immutable модель (frozen=True, все коллекции — tuple). Содержит:
    - Версию схемы (schema_version)
    - Правила упорядочивания (ordering)
    - Форматирование значений (formatting)
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    ordering: OrderingOptions = Field(
        default_factory=OrderingOptions, description="Правила упорядочивания"
    )
    formatting: FormattingOptions = Field(
        default_factory=FormattingOptions, description="Форматирование значений"
    )

    model_config = {"frozen": True}
