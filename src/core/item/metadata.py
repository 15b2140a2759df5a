"""
Structured Metadata — дерево тегов и глубокое структурное сравнение

Метаданные предмета (NBTer.encode_nbt) — произвольное дерево:
- ScalarTag: листовое значение (str, bytes, int, float, bool, None, ...)
- ListTag: упорядоченная последовательность тегов
- CompoundTag: отображение ключ → тег

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение рекурсивное и структурное (не identity, не shallow)
2. Виды узлов должны совпадать: скаляр никогда не равен списку или словарю
3. Скаляры равны только при совпадении конкретного типа (1 != 1.0 != True);
   NaN равен NaN (сравнение рефлексивно)
4. ListTag чувствителен к порядку и длине
5. CompoundTag требует одинаковые наборы ключей (тип + значение), порядок записей не важен
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Tuple, Union


# =============================================================================
# ТЕГИ
# =============================================================================


@dataclass(frozen=True)
class ScalarTag:
    """Листовой узел."""

    value: Any


@dataclass(frozen=True)
class ListTag:
    """Упорядоченная последовательность тегов."""

    items: Tuple["Tag", ...] = ()


@dataclass(frozen=True)
class CompoundTag:
    """
    Отображение ключ → тег.

    Записи хранятся кортежем пар в порядке вставки; порядок не участвует в сравнении.
    """

    entries: Tuple[Tuple[Any, "Tag"], ...] = ()

    def keys(self) -> Tuple[Any, ...]:
        return tuple(key for key, _ in self.entries)

    def get(self, key: Any) -> Union["Tag", None]:
        for entry_key, tag in self.entries:
            if _key_identity(entry_key) == _key_identity(key):
                return tag
        return None


Tag = Union[ScalarTag, ListTag, CompoundTag]


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_tag(payload: Any) -> Tag:
    """
    Конверсия произвольного Python payload в дерево тегов.

    Args:
        payload: Mapping, list/tuple, скаляр или уже готовый тег

    Returns:
        Тег соответствующего вида:
        - Mapping → CompoundTag
        - list/tuple → ListTag
        - остальное → ScalarTag

    Examples:
        >>> to_tag({"Damage": 3})
        CompoundTag(entries=(('Damage', ScalarTag(value=3)),))
        >>> to_tag([1, 2])
        ListTag(items=(ScalarTag(value=1), ScalarTag(value=2)))
    """
    if isinstance(payload, (ScalarTag, ListTag, CompoundTag)):
        return payload
    if isinstance(payload, Mapping):
        return CompoundTag(entries=tuple((key, to_tag(value)) for key, value in payload.items()))
    if isinstance(payload, (list, tuple)):
        return ListTag(items=tuple(to_tag(item) for item in payload))
    return ScalarTag(value=payload)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def deep_equal(a: Any, b: Any) -> bool:
    """
    Глубокое структурное равенство двух payload (или деревьев тегов).

    Args:
        a: Первый payload
        b: Второй payload

    Returns:
        True если деревья структурно равны
    """
    return _tags_equal(to_tag(a), to_tag(b))


def _tags_equal(a: Tag, b: Tag) -> bool:
    if type(a) is not type(b):
        return False

    if isinstance(a, ScalarTag):
        return _scalars_equal(a.value, b.value)

    if isinstance(a, ListTag):
        if len(a.items) != len(b.items):
            return False
        return all(_tags_equal(x, y) for x, y in zip(a.items, b.items))

    # CompoundTag
    left = {_key_identity(key): tag for key, tag in a.entries}
    right = {_key_identity(key): tag for key, tag in b.entries}
    if left.keys() != right.keys():
        return False
    return all(_tags_equal(tag, right[key]) for key, tag in left.items())


def _scalars_equal(a: Any, b: Any) -> bool:
    # bool является подклассом int: сравниваем точный тип
    if type(a) is not type(b):
        return False
    if a is b:
        return True
    if isinstance(a, float) and math.isnan(a) and math.isnan(b):
        return True
    return bool(a == b)


def _key_identity(key: Any) -> Tuple[type, Any]:
    return (type(key), key)
