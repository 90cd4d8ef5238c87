"""Tests for the versioned JSON cart repository."""

import json

from shopcart.domain.model.line_item import LineItem
from shopcart.domain.model.value_objects import Money
from shopcart.infrastructure.persistence.json_cart_repository import (
    CART_STORAGE_KEY,
    SCHEMA_VERSION,
    JsonCartRepository,
)
from tests.fakes import FakeKeyValueStore


def _items():
    return [
        LineItem(id=3, title="Duramo", price=Money.of("219.90"), image="c.jpg", amount=2),
        LineItem(id=1, title="Leve", price=Money.of("179.9"), image="a.jpg", amount=1),
    ]


class TestJsonCartRepository:

    def test_load_missing_returns_none(self):
        assert JsonCartRepository(FakeKeyValueStore()).load() is None

    def test_save_then_load(self):
        repo = JsonCartRepository(FakeKeyValueStore())
        repo.save(_items())
        assert repo.load() == _items()

    def test_blob_layout(self):
        store = FakeKeyValueStore()
        JsonCartRepository(store).save(_items())

        raw = json.loads(store.data[CART_STORAGE_KEY])
        assert raw["version"] == SCHEMA_VERSION
        assert raw["items"][0] == {
            "id": 3,
            "title": "Duramo",
            "price": "219.90",
            "image": "c.jpg",
            "amount": 2,
        }

    def test_empty_cart_is_stored_as_empty_list(self):
        store = FakeKeyValueStore()
        repo = JsonCartRepository(store)
        repo.save([])
        assert repo.load() == []

    def test_custom_key(self):
        store = FakeKeyValueStore()
        JsonCartRepository(store, key="other").save(_items())
        assert "other" in store.data

    def test_legacy_unversioned_list_ignored(self):
        legacy = json.dumps([{"id": 1, "title": "A", "price": 10, "image": "", "amount": 1}])
        store = FakeKeyValueStore({CART_STORAGE_KEY: legacy})
        assert JsonCartRepository(store).load() is None

    def test_invalid_json_ignored(self):
        store = FakeKeyValueStore({CART_STORAGE_KEY: "[{"})
        assert JsonCartRepository(store).load() is None

    def test_non_positive_amount_ignored(self):
        blob = json.dumps({
            "version": SCHEMA_VERSION,
            "items": [{"id": 1, "title": "A", "price": "10", "image": "", "amount": 0}],
        })
        store = FakeKeyValueStore({CART_STORAGE_KEY: blob})
        assert JsonCartRepository(store).load() is None

    def test_missing_field_ignored(self):
        blob = json.dumps({"version": SCHEMA_VERSION, "items": [{"id": 1, "amount": 1}]})
        store = FakeKeyValueStore({CART_STORAGE_KEY: blob})
        assert JsonCartRepository(store).load() is None

    def test_bad_price_ignored(self):
        blob = json.dumps({
            "version": SCHEMA_VERSION,
            "items": [{"id": 1, "title": "A", "price": "free", "image": "", "amount": 1}],
        })
        store = FakeKeyValueStore({CART_STORAGE_KEY: blob})
        assert JsonCartRepository(store).load() is None

    def _load_single(self, **overrides):
        record = {"id": 1, "title": "A", "price": "10.00", "image": "a.jpg", "amount": 1}
        record.update(overrides)
        blob = json.dumps({"version": SCHEMA_VERSION, "items": [record]})
        return JsonCartRepository(FakeKeyValueStore({CART_STORAGE_KEY: blob})).load()

    def test_valid_record_loads(self):
        assert self._load_single()[0].title == "A"

    def test_non_string_title_ignored(self):
        assert self._load_single(title=5) is None

    def test_null_image_ignored(self):
        assert self._load_single(image=None) is None

    def test_float_price_ignored(self):
        assert self._load_single(price=179.9) is None

    def test_non_object_record_ignored(self):
        blob = json.dumps({"version": SCHEMA_VERSION, "items": [[1, "A"]]})
        store = FakeKeyValueStore({CART_STORAGE_KEY: blob})
        assert JsonCartRepository(store).load() is None
