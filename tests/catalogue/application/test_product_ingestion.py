"""Application tests for the AddProduct command handler."""

import pytest
from catalogue.product.ingestion import AddProduct
from catalogue.product.product import Product
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain


def _add_product(**overrides):
    defaults = {"name": "Widget", "price": 5.0}
    defaults.update(overrides)
    return current_domain.process(AddProduct(**defaults), asynchronous=False)


class TestAddProductHandler:
    def test_add_product(self):
        product_id = _add_product()
        assert product_id is not None

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Widget"
        assert product.price == 5.0

    def test_add_product_without_name(self):
        product_id = _add_product(name=None)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name is None
        assert product.describe() == "I don't have a name :("

    def test_add_product_without_price(self):
        product_id = _add_product(price=None)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.price is None

    def test_negative_price_rejected_at_ingestion(self):
        with pytest.raises(ValidationError):
            _add_product(price=-1.0)

    def test_very_large_price_accepted(self):
        product_id = _add_product(name="Yacht", price=1e30)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.formatted_price() == "$1000000000000000000000000000000.00"

    @pytest.mark.parametrize("price", [float("inf"), float("nan")])
    def test_non_finite_price_rejected_at_ingestion(self, price):
        with pytest.raises(ValidationError):
            _add_product(price=price)

    def test_add_product_writes_to_event_store(self):
        product_id = _add_product(name="Event Test")

        messages = current_domain.event_store.store.read("catalogue::product")
        product_messages = [
            m
            for m in messages
            if m.metadata.headers.type.startswith("Catalogue.ProductAdded") and m.data.get("product_id") == product_id
        ]
        assert len(product_messages) == 1
