"""Unit tests for the in-memory product store."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.errors import ProductNotFoundError
from src.models.product import ProductFields
from src.services.product_store import ProductStore, create_product_store


@pytest.fixture()
def fields() -> ProductFields:
    return ProductFields(
        name="Kettle",
        description="Electric kettle",
        price=25.0,
        category="Kitchen",
        in_stock=True,
    )


def test_seeded_store_holds_two_products():
    store = create_product_store(seed=True)

    assert [p.name for p in store.list_products()] == ["Laptop", "Smartphone"]


def test_create_assigns_unique_ids(fields):
    store = ProductStore()

    ids = {store.create(fields).id for _ in range(50)}

    assert len(ids) == 50
    assert store.count() == 50


def test_list_returns_independent_snapshot(fields):
    store = ProductStore()
    store.create(fields)

    snapshot = store.list_products()
    snapshot.clear()

    assert store.count() == 1


def test_records_are_immutable(fields):
    store = ProductStore()
    product = store.create(fields)

    with pytest.raises(Exception):
        product.name = "changed"


def test_replace_preserves_id_and_position(fields):
    store = create_product_store(seed=True)
    first = store.list_products()[0]

    updated = store.replace(first.id, fields)

    assert updated.id == first.id
    assert updated.name == "Kettle"
    assert store.list_products()[0] == updated


def test_get_missing_raises(fields):
    store = ProductStore()

    with pytest.raises(ProductNotFoundError) as excinfo:
        store.get("missing")

    assert excinfo.value.product_id == "missing"


def test_replace_missing_raises_and_changes_nothing(fields):
    store = create_product_store(seed=True)
    before = store.list_products()

    with pytest.raises(ProductNotFoundError):
        store.replace("missing", fields)

    assert store.list_products() == before


def test_delete_removes_once(fields):
    store = ProductStore()
    product = store.create(fields)

    store.delete(product.id)

    assert store.count() == 0
    with pytest.raises(ProductNotFoundError):
        store.delete(product.id)


def test_ids_are_not_reissued_after_delete(fields):
    store = ProductStore()
    deleted = store.create(fields)
    store.delete(deleted.id)

    later = [store.create(fields).id for _ in range(20)]

    assert deleted.id not in later


def test_concurrent_mutations_are_atomic_for_readers(fields):
    store = ProductStore()
    writers = 4
    per_writer = 40
    replacement = fields.model_copy(update={"name": "Kettle v2", "price": 30.0})
    writers_done = threading.Event()
    problems: list[str] = []

    def write() -> None:
        created = [store.create(fields) for _ in range(per_writer)]
        for product in created:
            store.replace(product.id, replacement)
        for product in created[::2]:
            store.delete(product.id)

    def read() -> None:
        while not writers_done.is_set():
            snapshot = store.list_products()
            ids = [p.id for p in snapshot]
            if len(ids) != len(set(ids)):
                problems.append("duplicate id in snapshot")
            for product in snapshot:
                if (product.name, product.price) not in {
                    ("Kettle", 25.0),
                    ("Kettle v2", 30.0),
                }:
                    problems.append(f"torn record {product!r}")
                try:
                    seen = store.get(product.id)
                except ProductNotFoundError:
                    continue
                if set(seen.model_dump()) != set(product.model_dump()):
                    problems.append(f"record missing fields {seen!r}")

    readers = [threading.Thread(target=read) for _ in range(2)]
    for reader in readers:
        reader.start()
    try:
        with ThreadPoolExecutor(max_workers=writers) as pool:
            for future in [pool.submit(write) for _ in range(writers)]:
                future.result()
    finally:
        writers_done.set()
    for reader in readers:
        reader.join()

    assert problems == []
    remaining = store.list_products()
    assert store.count() == writers * per_writer // 2
    assert len({p.id for p in remaining}) == len(remaining)
    assert all(p.name == "Kettle v2" for p in remaining)
