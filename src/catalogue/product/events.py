"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductAdded:
    """A product record was ingested into the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String()
    price: Float()
    added_at: DateTime(required=True)
