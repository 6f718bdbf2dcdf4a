"""
CartService - Shopping Cart Operations

Each cart line stores ``quantity`` and ``total_price = quantity * price``.
Setting a quantity of zero removes the line; a quantity above the product's
stock is rejected.
"""

from decimal import Decimal
from typing import Dict

from django.db import transaction

from marketplace.infra.observability.metrics import cart_stock_rejections, cart_updates_total
from marketplace.models import CartProduct, Product
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


class CartService(BaseService):
    """
    Service for managing a customer's cart.

    Responsibilities:
    - Get the cart with its total
    - Set a product's quantity (insert, update or remove)
    - Remove one product or clear the cart
    """

    @BaseService.log_performance
    def get_cart(self, customer) -> ServiceResult[Dict]:
        """
        Get the customer's cart lines and total.

        Example:
            >>> result = cart_service.get_cart(customer)
            >>> result.value["total"]
            Decimal('4500.00')
        """
        items = list(CartProduct.objects.for_customer(customer.id).prefetch_related("product__images"))
        total = sum((item.total_price for item in items), Decimal("0"))
        return service_ok(
            {
                "customer_id": customer.id,
                "items": items,
                "items_count": len(items),
                "total": total,
            }
        )

    @BaseService.log_performance
    @transaction.atomic
    def update_cart(self, customer, product_id, quantity: int) -> ServiceResult:
        """
        Set the quantity of ``product_id`` in the cart.

        Returns:
            ServiceResult with the saved CartProduct, or None when the line was removed
        """
        if quantity is None or quantity < 0:
            return service_err(ErrorCodes.INVALID_QUANTITY, "Quantity must be zero or greater")

        product = Product.objects.select_for_update().filter(pk=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} does not exist")

        if quantity == 0:
            deleted, _ = CartProduct.objects.filter(customer=customer, product=product).delete()
            cart_updates_total.labels(action="removed").inc()
            self.logger.info(f"Removed product {product_id} from cart of {customer.id} ({deleted} line)")
            return service_ok(None)

        if quantity > product.stock:
            cart_stock_rejections.inc()
            return service_err(
                ErrorCodes.INSUFFICIENT_STOCK,
                f"Only {product.stock} unit(s) of '{product.name}' in stock",
            )

        item, created = CartProduct.objects.update_or_create(
            customer=customer,
            product=product,
            defaults={"quantity": quantity, "total_price": product.price * quantity},
        )
        cart_updates_total.labels(action="added" if created else "updated").inc()
        self.logger.info(
            f"{'Added' if created else 'Updated'} product {product_id} x{quantity} in cart of {customer.id}"
        )
        return service_ok(item)

    @BaseService.log_performance
    def remove_one(self, customer, product_id) -> ServiceResult[None]:
        deleted, _ = CartProduct.objects.filter(customer=customer, product_id=product_id).delete()
        if not deleted:
            return service_err(ErrorCodes.ITEM_NOT_IN_CART, f"Product {product_id} is not in the cart")
        return service_ok(None)

    @BaseService.log_performance
    def remove_all(self, customer) -> ServiceResult[int]:
        deleted, _ = CartProduct.objects.filter(customer=customer).delete()
        self.logger.info(f"Cleared cart of {customer.id}: {deleted} line(s)")
        return service_ok(deleted)
