"""Tests for the product and category use cases."""

from decimal import Decimal

import pytest

from mythic.application.add_product import AddProductHandler
from mythic.application.categories import (
    AddCategoryHandler,
    ListCategoriesHandler,
    ShowCategoryHandler,
)
from mythic.application.place_order import PlaceOrderHandler
from mythic.application.remove_product import RemoveProductHandler
from mythic.application.show_product import SearchProductsHandler, ShowProductHandler
from mythic.application.update_product import UpdateProductHandler
from mythic.domain.exceptions import NotFoundError, ReferentialIntegrityError, ValidationError
from mythic.domain.model.product import Category
from tests.fakes import FakeCategoryRepository, FakeUnitOfWork


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork(
        categories=FakeCategoryRepository([
            Category(id="c1", name="RPG"),
            Category(id="c2", name="Retro"),
        ])
    )


class TestAddProduct:

    def test_adds_with_categories(self, uow):
        dto = AddProductHandler(uow).handle("Chrono Trigger", "SNES RPG", "29.99", ["c2", "c1"])

        assert dto.price == Decimal("29.99")
        assert dto.category_ids == ["c2", "c1"]
        assert [c.name for c in dto.categories] == ["Retro", "RPG"]
        assert uow.products.get_by_id(dto.id) is not None

    def test_explicit_id(self, uow):
        dto = AddProductHandler(uow).handle("Tetris", "Puzzle", "5", product_id="p2")
        assert dto.id == "p2"

    def test_taken_id_rejected(self, uow):
        AddProductHandler(uow).handle("Tetris", "Puzzle", "5.00", product_id="p2")

        with pytest.raises(ValidationError) as info:
            AddProductHandler(uow).handle("Cheap", "Knock-off", "0.01", product_id="p2")

        assert [e.field for e in info.value.errors] == ["id"]
        stored = ShowProductHandler(uow).handle("p2")
        assert (stored.name, stored.price) == ("Tetris", Decimal("5.00"))

    def test_unknown_category_rejected(self, uow):
        with pytest.raises(ReferentialIntegrityError) as info:
            AddProductHandler(uow).handle("Tetris", "Puzzle", "5", ["c1", "c9"])

        assert info.value.details() == {"entity": "category", "missingIds": ["c9"]}
        assert uow.products.search() == []

    def test_invalid_fields_rejected(self, uow):
        with pytest.raises(ValidationError) as info:
            AddProductHandler(uow).handle("", "Puzzle", "0")
        assert [e.field for e in info.value.errors] == ["name", "price"]


class TestShowAndSearchProducts:

    @pytest.fixture(autouse=True)
    def _catalog(self, uow):
        add = AddProductHandler(uow)
        add.handle("Chrono Trigger", "Time travel RPG", "29.99", ["c1"], product_id="p1")
        add.handle("Tetris", "Falling blocks", "5.00", product_id="p2")
        add.handle("Final Fantasy", "Classic RPG", "19.99", ["c1", "c2"], product_id="p3")

    def test_show(self, uow):
        dto = ShowProductHandler(uow).handle("p3")
        assert dto.name == "Final Fantasy"
        assert dto.category_ids == ["c1", "c2"]

    def test_show_unknown(self, uow):
        with pytest.raises(NotFoundError):
            ShowProductHandler(uow).handle("p9")

    def test_no_filters_returns_everything(self, uow):
        assert len(SearchProductsHandler(uow).handle()) == 3

    def test_name_is_case_insensitive_substring(self, uow):
        result = SearchProductsHandler(uow).handle(name="TRIG")
        assert [p.id for p in result] == ["p1"]

    def test_description_filter(self, uow):
        result = SearchProductsHandler(uow).handle(description="rpg")
        assert {p.id for p in result} == {"p1", "p3"}

    def test_price_cap_is_inclusive(self, uow):
        result = SearchProductsHandler(uow).handle(max_price=Decimal("19.99"))
        assert {p.id for p in result} == {"p2", "p3"}

    def test_filters_combine(self, uow):
        result = SearchProductsHandler(uow).handle(description="rpg", max_price=Decimal("20"))
        assert [p.id for p in result] == ["p3"]


class TestUpdateProduct:

    @pytest.fixture(autouse=True)
    def _product(self, uow):
        AddProductHandler(uow).handle("Tetris", "Falling blocks", "5.00", ["c2"], product_id="p2")

    def test_partial_update(self, uow):
        dto = UpdateProductHandler(uow).handle("p2", price="6.50")
        assert dto.price == Decimal("6.50")
        assert dto.name == "Tetris"
        assert dto.category_ids == ["c2"]

    def test_full_replacement(self, uow):
        dto = UpdateProductHandler(uow).handle("p2", "Tetris DX", "Colour", "7", ["c1"])
        assert (dto.name, dto.description, dto.price) == ("Tetris DX", "Colour", Decimal("7"))
        assert dto.category_ids == ["c1"]

    def test_clear_categories(self, uow):
        assert UpdateProductHandler(uow).handle("p2", category_ids=[]).categories == []

    def test_nothing_to_update(self, uow):
        with pytest.raises(ValidationError, match="Nothing to update"):
            UpdateProductHandler(uow).handle("p2")

    def test_unknown_product(self, uow):
        with pytest.raises(NotFoundError):
            UpdateProductHandler(uow).handle("p9", name="x")

    def test_unknown_category_leaves_product_untouched(self, uow):
        with pytest.raises(ReferentialIntegrityError):
            UpdateProductHandler(uow).handle("p2", name="Renamed", category_ids=["c9"])
        assert ShowProductHandler(uow).handle("p2").name == "Tetris"


class TestRemoveProduct:

    @pytest.fixture(autouse=True)
    def _product(self, uow):
        AddProductHandler(uow).handle("Tetris", "Falling blocks", "5.00", product_id="p2")

    def test_removes(self, uow):
        dto = RemoveProductHandler(uow).handle("p2")
        assert dto.id == "p2"
        with pytest.raises(NotFoundError):
            ShowProductHandler(uow).handle("p2")

    def test_unknown(self, uow):
        with pytest.raises(NotFoundError):
            RemoveProductHandler(uow).handle("p9")

    def test_referenced_by_order_is_kept(self, uow):
        PlaceOrderHandler(uow).handle("u1", ["p2"], True)

        with pytest.raises(ValidationError, match="referenced"):
            RemoveProductHandler(uow).handle("p2")
        assert ShowProductHandler(uow).handle("p2").id == "p2"


class TestCategories:

    def test_add_and_show(self, uow):
        dto = AddCategoryHandler(uow).handle("Strategy")
        assert ShowCategoryHandler(uow).handle(dto.id) == dto

    def test_list_sorted_by_name(self, uow):
        AddCategoryHandler(uow).handle("Action", category_id="c3")
        assert [c.name for c in ListCategoriesHandler(uow).handle()] == ["Action", "RPG", "Retro"]

    def test_taken_id_rejected(self, uow):
        with pytest.raises(ValidationError, match="id"):
            AddCategoryHandler(uow).handle("Shooter", category_id="c1")
        assert ShowCategoryHandler(uow).handle("c1").name == "RPG"

    def test_blank_name(self, uow):
        with pytest.raises(ValidationError):
            AddCategoryHandler(uow).handle("  ")

    def test_unknown(self, uow):
        with pytest.raises(NotFoundError):
            ShowCategoryHandler(uow).handle("c9")
