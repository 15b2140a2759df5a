"""
Тесты для структурированных метаданных (дерево тегов + deep_equal)

Проверяет:
1. Конверсию payload → теги
2. Строгое сравнение скаляров по типу
3. Порядок в списках и независимость от порядка в словарях
4. Несовпадение видов узлов
"""

import pytest

from src.core.item import CompoundTag, ListTag, ScalarTag, deep_equal, to_tag


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


class TestToTag:
    """Тесты to_tag"""

    def test_scalar(self) -> None:
        assert to_tag(5) == ScalarTag(5)
        assert to_tag("x") == ScalarTag("x")
        assert to_tag(None) == ScalarTag(None)

    def test_list_and_tuple(self) -> None:
        expected = ListTag((ScalarTag(1), ScalarTag(2)))
        assert to_tag([1, 2]) == expected
        assert to_tag((1, 2)) == expected

    def test_nested_mapping(self) -> None:
        tag = to_tag({"display": {"Name": "Rock"}})
        assert isinstance(tag, CompoundTag)
        assert tag.keys() == ("display",)
        inner = tag.get("display")
        assert isinstance(inner, CompoundTag)
        assert inner.get("Name") == ScalarTag("Rock")
        assert inner.get("Missing") is None

    def test_tag_passthrough(self) -> None:
        tag = ListTag((ScalarTag(1),))
        assert to_tag(tag) is tag


# =============================================================================
# DEEP EQUAL
# =============================================================================


class TestDeepEqual:
    """Тесты deep_equal"""

    def test_equal_nested(self) -> None:
        a = {"Items": [{"Slot": 0, "Count": 3}], "Lock": "key"}
        b = {"Lock": "key", "Items": [{"Count": 3, "Slot": 0}]}
        assert deep_equal(a, b)

    def test_list_order_sensitive(self) -> None:
        assert not deep_equal([1, 2], [2, 1])

    def test_list_length(self) -> None:
        assert not deep_equal([1, 2], [1, 2, 3])

    def test_missing_key(self) -> None:
        assert not deep_equal({"a": 1}, {"a": 1, "b": 2})

    def test_different_value_under_key(self) -> None:
        assert not deep_equal({"a": {"b": 1}}, {"a": {"b": 2}})

    @pytest.mark.parametrize(
        "a,b",
        [
            (1, 1.0),
            (1, True),
            (0, False),
            ("1", 1),
            (b"x", "x"),
        ],
    )
    def test_scalar_type_strict(self, a, b) -> None:
        """Скаляры разных типов не равны"""
        assert not deep_equal(a, b)

    def test_key_type_strict(self) -> None:
        """Ключи сравниваются по типу и значению"""
        assert not deep_equal({1: "x"}, {"1": "x"})
        assert not deep_equal({1: "x"}, {True: "x"})

    def test_kind_mismatch(self) -> None:
        """Скаляр, список и словарь — разные виды узлов"""
        assert not deep_equal([], {})
        assert not deep_equal("ab", ["a", "b"])
        assert not deep_equal(None, [])

    def test_empty_structures(self) -> None:
        assert deep_equal({}, {})
        assert deep_equal([], ())

    def test_nan_equal_to_nan(self) -> None:
        """NaN равен NaN: сравнение рефлексивно"""
        assert deep_equal(float("nan"), float("nan"))
        assert deep_equal({"a": [float("nan")]}, {"a": [float("nan")]})
        assert not deep_equal(float("nan"), 1.0)

    def test_tags_and_payload_mixed(self) -> None:
        assert deep_equal(to_tag({"a": [1]}), {"a": [1]})
