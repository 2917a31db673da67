"""Tests for the JSON-file product store."""

import json
from decimal import Decimal

import pytest

from ims.domain.exceptions import DuplicateNameError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.infrastructure.persistence.json_product_repository import JsonProductRepository


@pytest.fixture
def repo(tmp_path):
    return JsonProductRepository(tmp_path / "data" / "products.json")


def _new(name: str, quantity: int = 1, price: str = "1.00") -> Product:
    return Product(id=None, name=name, quantity=quantity, price=Money.of(price))


class TestJsonProductRepositoryFile:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text()) == {"next_id": 1, "products": []}

    def test_price_stored_as_string(self, repo, tmp_path):
        repo.save(_new("Widget", price="19.99"))
        raw = json.loads((tmp_path / "data" / "products.json").read_text())
        assert raw["products"][0]["price"] == "19.99"

    def test_survives_reopen(self, repo, tmp_path):
        saved = repo.save(_new("Widget", quantity=4, price="2.50"))
        reopened = JsonProductRepository(tmp_path / "data" / "products.json")
        assert reopened.get_by_id(saved.id) == saved


class TestJsonProductRepositorySave:

    def test_assigns_ids(self, repo):
        assert repo.save(_new("A")).id == 1
        assert repo.save(_new("B")).id == 2

    def test_ids_not_reused_after_delete(self, repo):
        repo.save(_new("A"))
        b = repo.save(_new("B"))
        repo.delete(b)
        assert repo.save(_new("C")).id == 3

    def test_update_in_place(self, repo):
        product = repo.save(_new("Widget", quantity=1))
        product.update_quantity(7)
        repo.save(product)
        assert repo.get_by_id(product.id).quantity == 7
        assert len(repo.list_all()) == 1

    def test_rejects_second_product_with_same_name(self, repo):
        repo.save(_new("Widget"))
        with pytest.raises(DuplicateNameError):
            repo.save(_new("Widget"))
        assert len(repo.list_all()) == 1


class TestJsonProductRepositoryQueries:

    def test_get_by_name_is_exact(self, repo):
        repo.save(_new("Widget"))
        assert repo.get_by_name("Widget") is not None
        assert repo.get_by_name("widget") is None

    def test_get_by_id_missing(self, repo):
        assert repo.get_by_id(42) is None

    def test_search_ignores_case(self, repo):
        repo.save(_new("Apple"))
        repo.save(_new("Banana"))
        repo.save(_new("Pineapple"))
        assert [p.name for p in repo.search_by_name("APP")] == ["Apple", "Pineapple"]

    def test_list_page(self, repo):
        for name in ["A", "B", "C", "D", "E"]:
            repo.save(_new(name))
        page = repo.list_page(2, 2)
        assert [p.name for p in page.items] == ["E"]
        assert page.total == 5
        assert page.total_pages == 3

    def test_list_all_round_trips_decimal(self, repo):
        repo.save(_new("Widget", price="0.10"))
        assert repo.list_all()[0].price.amount == Decimal("0.10")

    def test_delete(self, repo):
        product = repo.save(_new("Widget"))
        repo.delete(product)
        assert repo.get_by_id(product.id) is None
        assert repo.list_all() == []


class TestJsonProductRepositoryWriteFailure:

    def test_failed_replace_leaves_no_temp_file(self, repo, tmp_path, monkeypatch):
        repo.save(_new("Widget"))
        path = tmp_path / "data" / "products.json"
        before = path.read_text()

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(
            "ims.infrastructure.persistence.json_product_repository.os.replace",
            broken_replace,
        )
        with pytest.raises(OSError, match="disk full"):
            repo.save(_new("Gadget"))

        assert sorted(p.name for p in path.parent.iterdir()) == ["products.json"]
        assert path.read_text() == before
