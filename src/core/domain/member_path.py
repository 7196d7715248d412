"""
Member Path — Работа с путями членов графа объектов

Member path указывает на узел сравниваемого графа объектов:
именованные сегменты соединяются '.', индексы последовательностей — '[<n>]'.

    Orders[2].Items[0].Name

Пути, полученные при обходе элементов коллекции верхнего уровня, начинаются
с индекса текущего элемента ('[0].Orders.Amount'). Модуль определяет и
отрезает этот начальный индекс и сравнивает пути без учёта регистра.
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Индекс — только ASCII цифры (не любые Unicode decimal digits)
INDEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

INDEX_OPEN: Final[str] = "["
INDEX_CLOSE: Final[str] = "]"
MEMBER_SEPARATOR: Final[str] = "."


# =============================================================================
# ИНДЕКСНЫЕ КВАЛИФИКАТОРЫ
# =============================================================================


def contains_indexing_qualifiers(path: str) -> bool:
    """
    Проверка, содержит ли путь индексный квалификатор.

    В строке должны быть и '[', и ']'; одиночная скобка не считается.

    Args:
        path: Member path или шаблон правила

    Returns:
        True если в пути есть обе скобки
    """
    return INDEX_OPEN in path and INDEX_CLOSE in path


def initial_index_qualifier_length(path: str) -> int:
    """
    Длина начального префикса '[<digits>].'.

    Посимвольный разбор: '[' в позиции 0, одна или больше ASCII цифр, ']' и '.'.

    Args:
        path: Member path

    Returns:
        Длина префикса, или 0 если путь не начинается с него

    Examples:
        >>> initial_index_qualifier_length("[12].Name")
        5
        >>> initial_index_qualifier_length("Orders[0].Name")
        0
        >>> initial_index_qualifier_length("[].Name")
        0
    """
    if not path.startswith(INDEX_OPEN):
        return 0

    position = 1
    while position < len(path) and path[position] in INDEX_DIGITS:
        position += 1

    if position == 1:
        # между скобками нет цифр
        return 0

    if path[position:position + 2] != INDEX_CLOSE + MEMBER_SEPARATOR:
        return 0

    return position + 2


def has_initial_index_qualifier(path: str) -> bool:
    """Начинается ли путь с '[<digits>].'"""
    return initial_index_qualifier_length(path) > 0


def remove_initial_index_qualifier(path: str) -> str:
    """
    Удаление одного начального префикса '[<digits>].'.

    Квалификаторы дальше по пути не трогаются, удаляется только первый
    префикс ('[0].[1].Name' → '[1].Name').

    Args:
        path: Member path

    Returns:
        Путь без начального индексного квалификатора
    """
    length = initial_index_qualifier_length(path)
    return path[length:]


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def paths_equal(left: str, right: str) -> bool:
    """
    Сравнение двух member paths целиком без учёта регистра.

    str.casefold() — результат не зависит от локали процесса.
    """
    return left.casefold() == right.casefold()
