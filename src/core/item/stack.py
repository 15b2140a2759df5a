"""
Stack — неизменяемый стек предметов

Immutable Pydantic модель: количество одинаковых предметов плюс метаданные
отображения (custom name, lore) и алгоритмы слияния стеков.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. count >= 0 всегда, ни одна операция не даёт отрицательного количества
2. Пустой стек (count == 0) никогда не отдаёт свой предмет: item() возвращает None
3. Все "with"/"grow"/"add" операции возвращают НОВЫЙ экземпляр, исходный не изменяется
4. Ошибка возможна только при создании (InvalidStack) или при невалидных аргументах мутатора
   (копии проходят ту же валидацию модели, что и создание)
"""

import logging
from numbers import Real
from typing import Any, Iterable, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr

from src.core.item.capabilities import Item, MaxCounter, Nameable, NBTer, Weapon
from src.core.item.constants import DEFAULT_ATTACK_DAMAGE, DEFAULT_MAX_COUNT
from src.core.item.metadata import deep_equal

logger = logging.getLogger(__name__)


class InvalidStack(ValueError):
    """Стек не может быть создан: отрицательное количество, отсутствующий предмет
    или объект, не реализующий Item (encode_item)."""


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_values(*values: Any) -> str:
    """
    Форматирование значений для имени предмета, сообщений, подсказок.

    Строковые представления соединяются одиночными пробелами,
    один завершающий перевод строки отбрасывается.

    Examples:
        >>> format_values("Hello", "World")
        'Hello World'
        >>> format_values("Sword", 3)
        'Sword 3'
        >>> format_values()
        ''
    """
    return " ".join(str(value) for value in values).removesuffix("\n")


# =============================================================================
# STACK MODEL
# =============================================================================


class Stack(BaseModel):
    """
    Стек предметов.

    Immutable модель (frozen=True). Предмет хранится как приватный атрибут
    и доступен только через item(), который возвращает None для пустого стека.

    Создание:
        Stack(item, count) или new_stack(item, count)

    Raises:
        InvalidStack: count < 0, item is None или item не реализует Item
    """

    count: int = Field(..., ge=0, description="Количество предметов в стеке")
    custom_name: str = Field(default="", description="Пользовательское имя ('' — не задано)")
    lore: Tuple[str, ...] = Field(default=(), description="Строки описания, сверху вниз")

    _item: Any = PrivateAttr(default=None)

    model_config = {"frozen": True}  # Immutable

    def __init__(self, item: Any, count: int, **data: Any) -> None:
        if item is None:
            logger.debug("Rejected stack: item is None (count=%r)", count)
            raise InvalidStack("cannot have a stack with item None")
        if not isinstance(item, Item):
            logger.debug("Rejected stack: %r does not implement encode_item", item)
            raise InvalidStack(f"item must implement encode_item(), got {type(item).__name__}")
        if isinstance(count, Real) and count < 0:
            logger.debug("Rejected stack: negative count %r for %r", count, item)
            raise InvalidStack(f"cannot use negative count for item stack: {count}")

        super().__init__(count=count, **data)
        self._item = item

    def _derive(self, item: Any = None, **update: Any) -> "Stack":
        """Копия через полную валидацию модели и проверки __init__."""
        fields = {"count": self.count, "custom_name": self.custom_name, "lore": self.lore}
        fields.update(update)
        return type(self)(self._item if item is None else item, **fields)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def empty(self) -> bool:
        """Стек пуст, если count == 0."""
        return self.count == 0

    def item(self) -> Optional[Any]:
        """
        Предмет стека.

        Returns:
            Предмет или None, если стек пуст (даже если ссылка хранится внутри)
        """
        if self.empty():
            return None
        return self._item

    def max_count(self) -> int:
        """
        Максимальный размер стека при добавлении в инвентарь или entity.

        Returns:
            MaxCounter.max_count() предмета или DEFAULT_MAX_COUNT (64)
        """
        item = self.item()
        if isinstance(item, MaxCounter):
            return item.max_count()
        return DEFAULT_MAX_COUNT

    def attack_damage(self) -> float:
        """
        Урон стека.

        Returns:
            Weapon.attack_damage() предмета или DEFAULT_ATTACK_DAMAGE (2.0)
        """
        item = self.item()
        if isinstance(item, Weapon):
            return item.attack_damage()
        return DEFAULT_ATTACK_DAMAGE

    # -------------------------------------------------------------------------
    # Metadata mutators
    # -------------------------------------------------------------------------

    def with_custom_name(self, *values: Any) -> "Stack":
        """
        Копия стека с новым пользовательским именем.

        Имя форматируется через format_values. Если предмет реализует Nameable,
        в копии хранится переименованный предмет. Без аргументов имя очищается.

        Args:
            *values: Значения для имени (например, "Hello", "World")

        Returns:
            Новый Stack
        """
        item = self.item()
        renamed_item = item.with_name(*values) if isinstance(item, Nameable) else None
        return self._derive(renamed_item, custom_name=format_values(*values))

    def with_lore(self, *lines: str) -> "Stack":
        """
        Копия стека с новым lore. Каждая строка — отдельная строка описания.

        Lore очищается, если строки не переданы.

        Raises:
            ValidationError: Если строка lore не является str
        """
        return self._derive(lore=tuple(lines))

    # -------------------------------------------------------------------------
    # Quantity mutators
    # -------------------------------------------------------------------------

    def grow(self, n: int) -> "Stack":
        """
        Копия стека с count, изменённым на n.

        Отрицательное n уменьшает стек. Результат никогда не отрицательный.

        Examples:
            count=5, grow(3) → 8
            count=5, grow(-1000) → 0

        Raises:
            ValidationError: Если результат не целый (например, grow(0.5))
        """
        return self._derive(count=max(0, self.count + n))

    def add_stack(self, other: "Stack") -> Tuple["Stack", "Stack"]:
        """
        Слияние другого стека в этот.

        Первый возвращаемый стек заполняется насколько позволяет max_count(),
        второй содержит остаток (может оказаться пустым). Имя и lore не меняются.

        Порядок проверок:
        1. Стеки несравнимы → (self, other) без изменений
        2. Этот стек уже полон → (self, other) без изменений
        3. transfer = min(max_count - count, other.count)

        Args:
            other: Стек-источник

        Returns:
            (self', other') после переноса
        """
        if not self.comparable(other):
            return self, other

        max_count = self.max_count()
        if self.count >= max_count:
            return self, other

        transfer = min(max_count - self.count, other.count)
        return (
            self._derive(count=self.count + transfer),
            other._derive(count=other.count - transfer),
        )

    # -------------------------------------------------------------------------
    # Equivalence
    # -------------------------------------------------------------------------

    def comparable(self, other: "Stack") -> bool:
        """
        Можно ли объединить два стека в один слот.

        Пустой стек совместим с любым другим: это правило слияния
        в пустой слот, а НЕ равенство. Для равенства значений используйте ==.

        Для непустых стеков все условия обязательны:
        1. encode_item() предметов совпадает (id + meta)
        2. custom_name совпадает
        3. lore совпадает поэлементно, с учётом порядка
        4. Если хотя бы один предмет реализует NBTer — оба реализуют,
           и их encode_nbt() структурно равны (deep_equal)

        Returns:
            True если стеки можно объединить
        """
        if self.empty() or other.empty():
            return True

        item, other_item = self.item(), other.item()
        if tuple(item.encode_item()) != tuple(other_item.encode_item()):
            return False

        if self.custom_name != other.custom_name:
            return False

        if len(self.lore) != len(other.lore):
            return False
        if any(line != other_line for line, other_line in zip(self.lore, other.lore)):
            return False

        has_nbt = isinstance(item, NBTer)
        if has_nbt != isinstance(other_item, NBTer):
            return False
        if has_nbt:
            return deep_equal(item.encode_nbt(), other_item.encode_nbt())
        return True

    # -------------------------------------------------------------------------
    # Representation
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        item = self.item()
        if item is None:
            return f"Stack<empty> quantity={self.count}"
        return (
            f"Stack<{type(item).__name__}({item!r})>"
            f"(custom_name={self.custom_name!r}, lore={list(self.lore)!r}) quantity={self.count}"
        )


def new_stack(item: Any, count: int, lore: Iterable[str] = (), custom_name: str = "") -> Stack:
    """
    Создание стека.

    Args:
        item: Предмет (не None)
        count: Количество (>= 0)
        lore: Начальные строки lore
        custom_name: Начальное имя

    Returns:
        Новый Stack

    Raises:
        InvalidStack: count < 0, item is None или item не реализует Item
    """
    return Stack(item, count, custom_name=custom_name, lore=tuple(lore))
