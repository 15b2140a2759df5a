"""
Ядро предметов: неизменяемые стеки и контракты предметов.

src.core.item — Stack, опциональные capability-контракты (MaxCounter, Weapon,
Nameable, NBTer) и глубокое сравнение структурированных метаданных.
Реестр типов предметов, инвентари и сетевой протокол находятся вне пакета.
"""
