import json

from src.storage import HistoryStore, ProductRecord


def record(n: int) -> ProductRecord:
    return ProductRecord(
        product_name=f"Item {n}",
        product_details="Hand-made ceramic mug, 12oz",
        keywords="ceramic mug, gift",
        description=f"Description {n}.",
        model="test/model",
    )


def test_missing_file_is_created_empty(tmp_path):
    path = tmp_path / "nested" / "products.json"
    store = HistoryStore(path)
    assert store.list_records() == []
    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_add_prepends_and_caps(tmp_path):
    store = HistoryStore(tmp_path / "products.json", limit=3)
    for n in range(5):
        store.add(record(n))
    names = [r.product_name for r in store.list_records()]
    assert names == ["Item 4", "Item 3", "Item 2"]


def test_file_uses_camel_case_keys(tmp_path):
    path = tmp_path / "products.json"
    store = HistoryStore(path)
    rec = store.add(record(1))
    saved = json.loads(path.read_text(encoding="utf-8"))[0]
    assert saved["id"] == rec.id
    assert set(saved) == {
        "id", "productName", "productDetails", "keywords",
        "description", "model", "createdAt",
    }
    assert saved["createdAt"].endswith("Z")
