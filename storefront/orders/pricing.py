"""Order pricing: subtotal from offer prices plus the flat tax."""
from dataclasses import dataclass, field
from decimal import Decimal

from storefront.errors import ERROR_PRODUCT_NOT_FOUND, NotFound
from storefront.payments.constants import TAX_RATE
from storefront.services.models import OrderItem
from storefront.services.money import add, floor_money, multiply, to_decimal, to_minor_units


@dataclass
class PricedLine:
    """One cart line as shown on the checkout page."""
    name: str
    price: Decimal
    quantity: int


@dataclass
class PricedCart:
    subtotal: Decimal
    tax: Decimal
    lines: list[PricedLine] = field(default_factory=list)

    @property
    def amount(self) -> Decimal:
        return self.subtotal + self.tax


def calculate_tax(subtotal: Decimal) -> Decimal:
    """Flat surcharge on the subtotal, floored to a whole unit."""
    return floor_money(multiply(subtotal, TAX_RATE))


async def price_items(db, items: list[OrderItem]) -> PricedCart:
    """
    Price a cart against current offer prices.

    Callers reject empty carts before pricing.

    Raises:
        NotFound: a product reference does not resolve
    """
    subtotal = Decimal("0")
    lines: list[PricedLine] = []

    for item in items:
        product = await db.get_product_by_id(item.product)
        if product is None:
            raise NotFound(f"{ERROR_PRODUCT_NOT_FOUND}: {item.product}")
        lines.append(PricedLine(name=product.name, price=product.offer_price, quantity=item.quantity))
        subtotal = add(subtotal, multiply(product.offer_price, item.quantity))

    return PricedCart(subtotal=subtotal, tax=calculate_tax(subtotal), lines=lines)


def checkout_unit_amount(price: Decimal) -> int:
    """
    Per-unit checkout price in minor units.

    The surcharge is applied per unit on top of the order-level tax, so the
    checkout total can exceed the stored order amount.
    """
    price = to_decimal(price)
    return to_minor_units(floor_money(price + multiply(price, TAX_RATE)))


def build_checkout_line_items(cart: PricedCart, currency: str) -> list[dict]:
    """Stripe ``line_items`` with inline ``price_data``."""
    return [
        {
            "price_data": {
                "currency": currency,
                "product_data": {"name": line.name},
                "unit_amount": checkout_unit_amount(line.price),
            },
            "quantity": line.quantity,
        }
        for line in cart.lines
    ]
