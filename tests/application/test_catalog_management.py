"""Integration tests for the catalog management use cases."""

import pytest

from storefront.application.add_category import AddCategoryHandler
from storefront.application.add_offer import AddOfferHandler
from storefront.application.add_product import AddProductHandler
from storefront.application.attach_category import AttachCategoryHandler
from storefront.application.show_offers import ShowOffersHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.offer import OfferPricing
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCatalogStore


class TestAddProduct:

    def test_adds_with_sequential_ids(self):
        store = FakeCatalogStore()
        handler = AddProductHandler(store)
        first = handler.handle("Laptop 1", "1499.99", featured=True)
        second = handler.handle("Laptop 2", "999")
        assert (first.id, second.id) == ("1", "2")
        assert first.price == Money(149999)
        assert first.featured and not second.featured
        assert store.get_product("1").name == "Laptop 1"

    def test_duplicate_name_rejected(self):
        handler = AddProductHandler(FakeCatalogStore())
        handler.handle("Laptop 1", "10")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("laptop 1", "12")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(FakeCatalogStore()).handle("  ", "10")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(FakeCatalogStore()).handle("Laptop", "-1")


class TestUpdateProduct:

    def test_updates_price_and_featured(self):
        store = FakeCatalogStore()
        AddProductHandler(store).handle("Laptop 1", "10")
        UpdateProductHandler(store).handle("1", new_price="12.50", featured=True)
        product = store.get_product("1")
        assert product.price == Money(1250)
        assert product.featured

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(FakeCatalogStore()).handle("9", new_price="1")

    def test_nothing_to_update(self):
        with pytest.raises(ValidationError, match="Nothing to update"):
            UpdateProductHandler(FakeCatalogStore()).handle("1")


class TestCategories:

    def test_add_and_attach(self):
        store = FakeCatalogStore()
        AddProductHandler(store).handle("Laptop 1", "10")
        category = AddCategoryHandler(store).handle("Laptops", "laptops")
        AttachCategoryHandler(store).handle("Laptop 1", "laptops")
        AttachCategoryHandler(store).handle("Laptop 1", "laptops")
        assert category.id == "1"
        assert [p.name for p in store.find_by_category_slug("laptops")] == ["Laptop 1"]

    def test_duplicate_slug_rejected(self):
        store = FakeCatalogStore()
        AddCategoryHandler(store).handle("Laptops", "laptops")
        with pytest.raises(ValidationError, match="already exists"):
            AddCategoryHandler(store).handle("Notebooks", "laptops")

    def test_attach_unknown_category(self):
        store = FakeCatalogStore()
        AddProductHandler(store).handle("Laptop 1", "10")
        with pytest.raises(EntityNotFoundError, match="Category not found"):
            AttachCategoryHandler(store).handle("Laptop 1", "tablets")


class TestOffers:

    def test_add_bundle_offer(self):
        store = FakeCatalogStore()
        AddProductHandler(store).handle("Product A", "0.50")
        offer = AddOfferHandler(store).handle("Product A", 3, "1.30", bundle=True)
        assert offer.pricing is OfferPricing.BUNDLE
        assert store.get_tiers("1") == [offer]

    def test_duplicate_minimum_rejected(self):
        store = FakeCatalogStore()
        AddProductHandler(store).handle("Product A", "0.50")
        AddOfferHandler(store).handle("Product A", 3, "0.45")
        with pytest.raises(ValidationError, match="already has an offer"):
            AddOfferHandler(store).handle("Product A", 3, "0.40")

    def test_zero_minimum_rejected(self):
        store = FakeCatalogStore()
        AddProductHandler(store).handle("Product A", "0.50")
        with pytest.raises(ValidationError, match="must be positive"):
            AddOfferHandler(store).handle("Product A", 0, "0.45")

    def test_show_offers(self):
        store = FakeCatalogStore()
        AddProductHandler(store).handle("Product A", "0.50")
        AddOfferHandler(store).handle("Product A", 5, "0.40")
        AddOfferHandler(store).handle("Product A", 3, "1.30", bundle=True)
        lines = ShowOffersHandler(store).handle()
        assert [(l.min_quantity, l.price, l.pricing) for l in lines] == [
            (3, "$1.30", "BUNDLE"),
            (5, "$0.40", "PER_UNIT"),
        ]
