import os

from lightbnb.services.property_stub import InMemoryPropertyStore

FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "properties.json")


def test_empty_store_starts_ids_at_one():
    store = InMemoryPropertyStore()
    first = store.add({"title": "A"})
    second = store.add({"title": "B"})
    assert (first["id"], second["id"]) == (1, 2)
    assert store.get(2)["title"] == "B"


def test_seeded_store_continues_after_fixture_ids():
    store = InMemoryPropertyStore.from_json(FIXTURE)
    assert len(store) == 2
    assert store.get(1)["title"] == "Speed lamp"

    added = store.add({"owner_id": 3, "title": "New place", "cost_per_night": 5000})
    assert added["id"] == 3
    assert len(store) == 3


def test_add_returns_the_same_record():
    store = InMemoryPropertyStore()
    record = {"title": "C"}
    assert store.add(record) is record
