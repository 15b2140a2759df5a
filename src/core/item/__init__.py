"""
Item Stack — неизменяемые стеки предметов.

Содержит Stack, опциональные контракты предметов и глубокое сравнение метаданных.
"""

from src.core.item.capabilities import Item, MaxCounter, Nameable, NBTer, Weapon
from src.core.item.constants import DEFAULT_ATTACK_DAMAGE, DEFAULT_MAX_COUNT
from src.core.item.metadata import (
    CompoundTag,
    ListTag,
    ScalarTag,
    Tag,
    deep_equal,
    to_tag,
)
from src.core.item.stack import InvalidStack, Stack, format_values, new_stack

__all__ = [
    # Constants
    "DEFAULT_MAX_COUNT",
    "DEFAULT_ATTACK_DAMAGE",
    # Capabilities
    "Item",
    "MaxCounter",
    "Weapon",
    "Nameable",
    "NBTer",
    # Metadata
    "Tag",
    "ScalarTag",
    "ListTag",
    "CompoundTag",
    "to_tag",
    "deep_equal",
    # Stack
    "Stack",
    "InvalidStack",
    "new_stack",
    "format_values",
]
