"""
Contract Validation Module

Валидация JSON документа настроек против встроенной схемы.
"""

from .validators import (
    build_validator,
    load_equivalency_options,
    options_errors,
    options_validator,
    validate_equivalency_options,
)

__all__ = [
    "build_validator",
    "options_validator",
    "options_errors",
    "validate_equivalency_options",
    "load_equivalency_options",
]
