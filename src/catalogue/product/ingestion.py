"""Product ingestion: the single entry point that creates product records.

Field constraints on the command and the aggregate reject malformed input
(e.g. a negative price) here, so readers never need to re-validate.
"""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class AddProduct:
    name: String(max_length=255)
    price: Float(min_value=0.0)


@catalogue.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(name=command.name, price=command.price)
        current_domain.repository_for(Product).add(product)
        return str(product.id)
