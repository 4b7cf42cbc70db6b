"""Read side of the catalogue: bulk listing of product records.

``ProductCatalogue`` holds no state besides the domain it reads from, so one
instance is built per process and handed to route handlers through a FastAPI
dependency. A failed read never raises to the caller; it comes back as a
``CatalogueListing`` with ``ok == False`` so the web layer can still render
while signalling the failure through the HTTP status.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from protean.domain import Domain

from catalogue.product.product import Product
from catalogue.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogueListing:
    """Outcome of a catalogue read."""

    products: list[Product] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def succeeded(cls, products: list[Product]) -> CatalogueListing:
        return cls(products=list(products))

    @classmethod
    def failed(cls, error: str) -> CatalogueListing:
        return cls(products=[], error=error)


class ProductCatalogue:
    """Accessor over the Product collection."""

    def __init__(self, domain: Domain) -> None:
        self._domain = domain

    def list_all(self) -> CatalogueListing:
        """Return every stored product, in no particular order."""
        try:
            products = self._domain.repository_for(Product)._dao.query.limit(None).all().items
        except Exception as exc:
            logger.exception("Catalogue read failed", error=str(exc))
            return CatalogueListing.failed(str(exc) or exc.__class__.__name__)

        logger.debug("Catalogue read", product_count=len(products))
        return CatalogueListing.succeeded(products)

    @staticmethod
    def formatted_price(product: Product) -> str:
        return product.formatted_price()

    @staticmethod
    def describe(product: Product) -> str:
        return product.describe()
