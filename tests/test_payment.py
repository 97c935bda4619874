import pytest

from fare_engine.payment import payment_discount, payment_discount_description
from fare_engine.settings import PricingSettings


@pytest.mark.unit
class TestPaymentDiscount:
    def test_cash_discount(self):
        assert payment_discount(100.00, "cash") == 3.65

    def test_cash_discount_on_binary_half(self):
        # 475 * 3.5% + 0.15 is stored just below 16.775
        assert payment_discount(475.00, "cash") == 16.77

    def test_cash_discount_is_rounded(self):
        # 123.45 * 0.035 + 0.15 = 4.47075
        assert payment_discount(123.45, "cash") == 4.47

    @pytest.mark.parametrize("method", ["invoice", "credit_card", "zelle"])
    def test_other_methods_earn_nothing(self, method):
        assert payment_discount(100.00, method) == 0.0

    def test_custom_settings(self):
        settings = PricingSettings(cash_discount_rate=0.05, cash_discount_fixed=0.0)
        assert payment_discount(200.00, "cash", settings) == 10.0


@pytest.mark.unit
class TestPaymentDiscountDescription:
    def test_cash(self):
        assert payment_discount_description("cash") == "Cash payment discount (3.5% + $0.15)"

    def test_non_cash_is_empty(self):
        assert payment_discount_description("invoice") == ""

    def test_reflects_settings(self):
        settings = PricingSettings(cash_discount_rate=0.04, cash_discount_fixed=0.25)
        assert (
            payment_discount_description("cash", settings)
            == "Cash payment discount (4% + $0.25)"
        )
