from decimal import Decimal

import pytest

from marketplace.cart.domain.services import CartService
from marketplace.models import CartProduct
from marketplace.tests.factories import CartProductFactory, CustomerFactory, ProductFactory
from utils.service_base import ErrorCodes


@pytest.mark.unit
@pytest.mark.django_db
class TestCartService:
    @pytest.fixture(autouse=True)
    def setup(self, db):
        self.service = CartService()
        self.customer = CustomerFactory()
        self.product = ProductFactory(price=Decimal("1500.00"), stock=5)

    def test_add_product_sets_total_price(self):
        result = self.service.update_cart(self.customer, self.product.id, 3)

        assert result.ok
        assert result.value.quantity == 3
        assert result.value.total_price == Decimal("4500.00")

    def test_update_existing_line(self):
        CartProductFactory(customer=self.customer, product=self.product, quantity=1)

        result = self.service.update_cart(self.customer, self.product.id, 2)

        assert result.value.quantity == 2
        assert CartProduct.objects.filter(customer=self.customer).count() == 1

    def test_zero_quantity_removes_line(self):
        CartProductFactory(customer=self.customer, product=self.product)

        result = self.service.update_cart(self.customer, self.product.id, 0)

        assert result.ok
        assert result.value is None
        assert not CartProduct.objects.exists()

    def test_zero_quantity_for_product_not_in_cart_is_ok(self):
        result = self.service.update_cart(self.customer, self.product.id, 0)

        assert result.ok

    def test_negative_quantity(self):
        result = self.service.update_cart(self.customer, self.product.id, -1)

        assert result.error == ErrorCodes.INVALID_QUANTITY

    def test_quantity_above_stock(self):
        result = self.service.update_cart(self.customer, self.product.id, 6)

        assert result.error == ErrorCodes.INSUFFICIENT_STOCK
        assert not CartProduct.objects.exists()

    def test_unknown_product(self):
        result = self.service.update_cart(self.customer, "00000000-0000-0000-0000-000000000000", 1)

        assert result.error == ErrorCodes.PRODUCT_NOT_FOUND

    def test_get_cart_totals(self):
        self.service.update_cart(self.customer, self.product.id, 2)
        other = ProductFactory(price=Decimal("250.00"))
        self.service.update_cart(self.customer, other.id, 4)
        CartProductFactory()

        cart = self.service.get_cart(self.customer).value

        assert cart["items_count"] == 2
        assert cart["total"] == Decimal("4000.00")
        assert cart["customer_id"] == self.customer.id

    def test_empty_cart(self):
        cart = self.service.get_cart(self.customer).value

        assert cart["items"] == []
        assert cart["total"] == Decimal("0")

    def test_remove_one(self):
        CartProductFactory(customer=self.customer, product=self.product)

        assert self.service.remove_one(self.customer, self.product.id).ok
        assert self.service.remove_one(self.customer, self.product.id).error == ErrorCodes.ITEM_NOT_IN_CART

    def test_remove_all_only_touches_own_cart(self):
        CartProductFactory.create_batch(2, customer=self.customer)
        CartProductFactory()

        result = self.service.remove_all(self.customer)

        assert result.value == 2
        assert CartProduct.objects.count() == 1
