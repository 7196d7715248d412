"""
Domain models and value objects.

Содержит работу с member paths и модели настроек equivalency engine.
"""

from src.core.domain.member_path import (
    INDEX_DIGITS,
    contains_indexing_qualifiers,
    has_initial_index_qualifier,
    initial_index_qualifier_length,
    paths_equal,
    remove_initial_index_qualifier,
)
from src.core.domain.options import (
    EquivalencyOptions,
    FormattingOptions,
    OrderingOptions,
)

__all__ = [
    # Member path
    "INDEX_DIGITS",
    "contains_indexing_qualifiers",
    "initial_index_qualifier_length",
    "has_initial_index_qualifier",
    "remove_initial_index_qualifier",
    "paths_equal",
    # Options models
    "EquivalencyOptions",
    "OrderingOptions",
    "FormattingOptions",
]
