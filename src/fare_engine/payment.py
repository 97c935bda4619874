from typing import Literal

from .core.money import round_money
from .settings import PricingSettings

PaymentMethod = Literal["cash", "invoice", "credit_card", "zelle"]


def payment_discount(
    subtotal: float,
    payment_method: PaymentMethod,
    settings: PricingSettings | None = None,
) -> float:
    """Checkout discount for the payment method, rounded to cents.

    Cash earns ``subtotal * 3.5% + $0.15``; every other method earns nothing.
    """
    settings = settings or PricingSettings()
    if payment_method != "cash":
        return 0.0
    return round_money(subtotal * settings.cash_discount_rate + settings.cash_discount_fixed)


def payment_discount_description(
    payment_method: PaymentMethod,
    settings: PricingSettings | None = None,
) -> str:
    settings = settings or PricingSettings()
    if payment_method != "cash":
        return ""
    rate = f"{settings.cash_discount_rate * 100:g}%"
    return f"Cash payment discount ({rate} + ${settings.cash_discount_fixed:.2f})"
