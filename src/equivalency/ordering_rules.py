"""Ordering rules — какие коллекции графа объектов сравниваются со строгим порядком.

Equivalency engine для каждой посещённой коллекции спрашивает все настроенные
правила, применимо ли правило к member path. Если применимо хотя бы одно,
коллекция сравнивается с учётом порядка; иначе — как множество.

Правила:
- PathBasedOrderingRule: один member path (с индексными квалификаторами или без)
- MatchAllOrderingRule: все коллекции
- PredicateBasedOrderingRule: пути, для которых выполняется предикат
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from src.core.domain.member_path import (
    contains_indexing_qualifiers,
    has_initial_index_qualifier,
    paths_equal,
    remove_initial_index_qualifier,
)
from src.core.domain.options import OrderingOptions

logger = logging.getLogger(__name__)


# =============================================================================
# ПРАВИЛА
# =============================================================================


class OrderingRule(ABC):
    """Важен ли порядок элементов коллекции по данному member path."""

    @abstractmethod
    def applies_to(self, path: str) -> bool:
        """True если коллекцию по member path нужно сравнивать с учётом порядка."""


@dataclass(frozen=True)
class PathBasedOrderingRule(OrderingRule):
    """Правило упорядочивания для одного member path.

    Пути, полученные при обходе элементов коллекции верхнего уровня, несут
    индекс элемента ('[0].Orders.Amount'). Правило без индексных квалификаторов
    ('Orders.Amount') применяется к таким путям для любого элемента. Правило
    со своими квалификаторами применяется только к этой позиции.

    Сравнение — вся строка, без учёта регистра. Некорректные пути не вызывают
    exception, они просто не совпадают.
    """

    path: str

    def applies_to(self, path: str) -> bool:
        """Применимо ли правило к member path.

        Args:
            path: member path сравниваемой коллекции

        Returns:
            True если путь (без начального '[<n>].', где это допустимо) равен пути правила
        """
        candidate = path
        if not contains_indexing_qualifiers(self.path) and not has_initial_index_qualifier(self.path):
            candidate = remove_initial_index_qualifier(candidate)

        return paths_equal(candidate, self.path)

    def __str__(self) -> str:
        return f"Be strict about the order of collection items when path is {self.path}"


@dataclass(frozen=True)
class MatchAllOrderingRule(OrderingRule):
    """Строгий порядок для всех коллекций."""

    def applies_to(self, path: str) -> bool:
        return True

    def __str__(self) -> str:
        return "Always be strict about the collection order"


@dataclass(frozen=True)
class PredicateBasedOrderingRule(OrderingRule):
    """Правило на основе предиката от member path.

    Exception из предиката пробрасывается вызывающему.
    """

    predicate: Callable[[str], bool]
    description: str = "a custom predicate"

    def applies_to(self, path: str) -> bool:
        return bool(self.predicate(path))

    def __str__(self) -> str:
        return f"Be strict about the order of items in collections matching {self.description}"


# =============================================================================
# НАБОР ПРАВИЛ
# =============================================================================


class OrderingRuleCollection:
    """Immutable набор правил упорядочивания для одного прогона сравнения.

    Создаётся один раз на этапе конфигурации; with_rule() возвращает новый
    набор, текущий не изменяется.
    """

    def __init__(self, rules: Iterable[OrderingRule] = ()):
        self._rules: tuple[OrderingRule, ...] = tuple(rules)

    @classmethod
    def from_options(cls, options: OrderingOptions) -> "OrderingRuleCollection":
        """Правила из документа настроек.

        Args:
            options: секция ordering из EquivalencyOptions

        Returns:
            Набор с MatchAllOrderingRule (если включён) и одним
            PathBasedOrderingRule на каждый путь
        """
        rules: list[OrderingRule] = []
        if options.strict_ordering_for_all:
            rules.append(MatchAllOrderingRule())
        rules.extend(PathBasedOrderingRule(path) for path in options.strict_ordering_paths)
        return cls(rules)

    def with_rule(self, rule: OrderingRule) -> "OrderingRuleCollection":
        """Новый набор с добавленным правилом."""
        return OrderingRuleCollection(self._rules + (rule,))

    def is_ordering_strict_for(self, path: str) -> bool:
        """True если хотя бы одно правило требует строгий порядок для member path."""
        for rule in self._rules:
            if rule.applies_to(path):
                logger.debug("Strict ordering for %r: %s", path, rule)
                return True
        return False

    def __iter__(self) -> Iterator[OrderingRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __str__(self) -> str:
        return "\n".join(str(rule) for rule in self._rules)
