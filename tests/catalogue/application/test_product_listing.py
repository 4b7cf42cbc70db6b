"""Application tests for the ProductCatalogue accessor."""

from catalogue.product.ingestion import AddProduct
from catalogue.product.listing import CatalogueListing, ProductCatalogue
from catalogue.product.product import Product
from protean.utils.globals import current_domain


class _UnreachableDomain:
    """Stands in for a domain whose store cannot be reached."""

    def repository_for(self, aggregate_cls):
        raise ConnectionError("catalogue store unreachable")


def _add(name, price):
    return current_domain.process(AddProduct(name=name, price=price), asynchronous=False)


class TestListAll:
    def test_empty_catalogue(self):
        listing = ProductCatalogue(current_domain).list_all()

        assert listing.ok
        assert listing.products == []
        assert listing.error is None

    def test_returns_every_product(self):
        ids = {_add("Widget", 5.0), _add("Gadget", 12.5), _add(None, 1.0)}

        listing = ProductCatalogue(current_domain).list_all()

        assert listing.ok
        assert {product.id for product in listing.products} == ids
        assert all(isinstance(product, Product) for product in listing.products)

    def test_lists_beyond_default_page_size(self):
        ids = {_add(f"Product {n}", float(n)) for n in range(150)}

        listing = ProductCatalogue(current_domain).list_all()

        assert listing.ok
        assert len(listing.products) == 150
        assert {product.id for product in listing.products} == ids

    def test_read_failure_is_reported_not_raised(self):
        listing = ProductCatalogue(_UnreachableDomain()).list_all()

        assert not listing.ok
        assert listing.products == []
        assert "unreachable" in listing.error

    def test_failure_is_distinct_from_empty(self):
        empty = ProductCatalogue(current_domain).list_all()
        failed = ProductCatalogue(_UnreachableDomain()).list_all()

        assert empty.products == failed.products
        assert empty.ok != failed.ok


class TestCatalogueListing:
    def test_succeeded_copies_products(self):
        products = [Product(name="Widget", price=5.0)]
        listing = CatalogueListing.succeeded(products)
        products.clear()

        assert len(listing.products) == 1

    def test_failed_has_no_products(self):
        listing = CatalogueListing.failed("boom")
        assert listing.products == []
        assert listing.error == "boom"
        assert not listing.ok


class TestDisplayHelpers:
    def test_formatted_price(self):
        assert ProductCatalogue.formatted_price(Product(price=9)) == "$9.00"

    def test_describe(self):
        sentence = ProductCatalogue.describe(Product(name="Widget", price=5))
        assert "Widget" in sentence
        assert "5" in sentence
