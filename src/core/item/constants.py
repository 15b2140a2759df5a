"""
Item Constants — значения по умолчанию для стеков предметов

Единственное место, где заданы fallback-значения для capability-диспетчеризации.
Если предмет не реализует соответствующий контракт, Stack использует эти значения.
"""

from typing import Final


# =============================================================================
# ВМЕСТИМОСТЬ
# =============================================================================

# Максимальный размер стека, если предмет не реализует MaxCounter
DEFAULT_MAX_COUNT: Final[int] = 64


# =============================================================================
# УРОН
# =============================================================================

# Урон в ближнем бою, если предмет не реализует Weapon
DEFAULT_ATTACK_DAMAGE: Final[float] = 2.0
