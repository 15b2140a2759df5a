"""
Capabilities — опциональные контракты предметов

Предмет (item) непрозрачен для Stack: реестр типов предметов находится вне этого пакета.
Stack взаимодействует с предметом только через контракты ниже.

Обязательный контракт:
- Item: каноническая идентичность (id, meta)

Опциональные контракты (отсутствие → значение по умолчанию, не ошибка):
- MaxCounter: переопределение максимального размера стека
- Weapon: переопределение урона
- Nameable: переименованная копия предмета
- NBTer: структурированные метаданные для глубокого сравнения
"""

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class Item(Protocol):
    """
    Предмет с канонической идентичностью.

    encode_item(): пара (id типа, вариант/meta).
    """

    def encode_item(self) -> Tuple[str, int]: ...


@runtime_checkable
class MaxCounter(Protocol):
    """Предмет с собственным максимальным размером стека."""

    def max_count(self) -> int: ...


@runtime_checkable
class Weapon(Protocol):
    """Предмет с собственным уроном в ближнем бою."""

    def attack_damage(self) -> float: ...


@runtime_checkable
class Nameable(Protocol):
    """
    Предмет, который можно переименовать.

    with_name(*values) возвращает НОВЫЙ предмет; исходный не изменяется.
    """

    def with_name(self, *values: Any) -> Any: ...


@runtime_checkable
class NBTer(Protocol):
    """
    Предмет со структурированными метаданными.

    encode_nbt(): дерево из скаляров, последовательностей и словарей
    (или готовых тегов из src.core.item.metadata).
    """

    def encode_nbt(self) -> Any: ...
