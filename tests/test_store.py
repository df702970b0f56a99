"""
Tests for the in-memory store and the id generator
"""
import pytest
from grubdash.models import Dish
from grubdash.services.store import ResourceStore, IdentifierGenerator

def make_dish(dish_id, name="Spaghetti"):
    return Dish(id=dish_id, name=name, description="Fresh", price=10, image_url="https://example.com/a.jpg")

class TestResourceStore:
    """Тесты для ResourceStore"""

    def test_insert_and_find(self):
        store = ResourceStore()
        dish = make_dish("1")

        assert store.insert(dish) is dish
        assert store.find_by_id("1") is dish
        assert store.find_by_id("2") is None
        assert len(store) == 1

    def test_index_replace_remove(self):
        """Тест: позиция, замена и удаление записи"""
        first, second = make_dish("1"), make_dish("2")
        store = ResourceStore([first, second])

        assert store.index_of(second) == 1

        replacement = make_dish("2", name="Lasagna")
        store.replace_at(1, replacement)
        assert store.find_by_id("2") is replacement

        assert store.remove_at(0) is first
        assert store.ids() == ["2"]

    def test_index_of_missing_record(self):
        store = ResourceStore([make_dish("1")])

        with pytest.raises(ValueError):
            store.index_of(make_dish("1"))

    def test_all_aliases_live_storage(self):
        """Тест: all() возвращает живой список, а не копию"""
        store = ResourceStore()
        snapshot = store.all()

        store.insert(make_dish("1"))

        assert len(snapshot) == 1

class TestIdentifierGenerator:
    """Тесты для IdentifierGenerator"""

    def test_starts_from_one_without_seed(self):
        next_id = IdentifierGenerator()

        assert next_id() == "1"
        assert next_id() == "2"

    def test_continues_from_max_numeric_seed_id(self):
        """Тест: счётчик продолжает максимальный числовой ID"""
        next_id = IdentifierGenerator(["3", "12", "7", "3c637d011d844ebab1205fef8a7e36ea"])

        assert next_id.last == 12
        assert next_id() == "13"
        assert next_id() == "14"

    def test_generators_are_independent(self):
        dishes_ids = IdentifierGenerator(["5"])
        orders_ids = IdentifierGenerator(["1"])

        assert dishes_ids() == "6"
        assert orders_ids() == "2"
