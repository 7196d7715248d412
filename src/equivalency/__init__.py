"""Equivalency — правила для equivalency engine графа объектов.

- Ordering rules: строгое или независимое от порядка сравнение коллекций по member path
"""

from .ordering_rules import (
    MatchAllOrderingRule,
    OrderingRule,
    OrderingRuleCollection,
    PathBasedOrderingRule,
    PredicateBasedOrderingRule,
)

__all__ = [
    "OrderingRule",
    "PathBasedOrderingRule",
    "MatchAllOrderingRule",
    "PredicateBasedOrderingRule",
    "OrderingRuleCollection",
]
