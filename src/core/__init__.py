"""
Core domain models, configuration contracts, and member path primitives.

Базовые строительные блоки, не зависящие от equivalency engine и
конвейера форматирования.
"""
