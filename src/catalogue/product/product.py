"""Product aggregate root."""

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from catalogue.domain import catalogue
from catalogue.utils.logging import get_logger

logger = get_logger(__name__)

CURRENCY_SYMBOL = "$"
_CENTS = Decimal("0.01")


@catalogue.aggregate
class Product:
    """A purchasable item. Both fields are optional; price is never negative."""

    name: String(max_length=255)
    price: Float(min_value=0.0)

    @invariant.post
    def price_must_be_finite(self):
        if self.price is not None and not math.isfinite(self.price):
            raise ValidationError({"price": ["Price must be a finite number"]})

    @classmethod
    def add(cls, name=None, price=None):
        from catalogue.product.events import ProductAdded

        product = cls(name=name, price=price)
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                price=product.price,
                added_at=datetime.now(),
            )
        )
        return product

    def formatted_price(self) -> str:
        """Price with a leading currency symbol and exactly two decimals, rounded half-up."""
        if self.price is None:
            raise ValidationError({"price": ["Product has no price to format"]})

        amount = Decimal(str(self.price))
        # Enough precision for every integer digit plus the cents
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, amount.adjusted() + 3)
            amount = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        return f"{CURRENCY_SYMBOL}{amount}"

    def describe(self) -> str:
        if not self.name:
            sentence = "I don't have a name :("
        elif self.price is None:
            sentence = f"Hello, I'm a {self.name} and I don't have a price yet"
        else:
            sentence = f"Hello, I'm a {self.name} and I'm worth {self.formatted_price()}"

        logger.debug(sentence, product_id=self.id)
        return sentence
