from django.db import models


class CartProductQuerySet(models.QuerySet):
    def for_customer(self, customer_id):
        return self.filter(customer_id=customer_id).select_related("product", "product__merchant")


class CartProduct(models.Model):
    """One line of a customer's cart. ``total_price`` is ``quantity * product.price`` at last update."""

    customer = models.ForeignKey("authentication.Customer", on_delete=models.CASCADE, related_name="cart_items")
    product = models.ForeignKey("marketplace.Product", on_delete=models.CASCADE, related_name="cart_entries")
    quantity = models.PositiveIntegerField(default=1)
    total_price = models.DecimalField(max_digits=14, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CartProductQuerySet.as_manager()

    class Meta:
        app_label = "marketplace"
        ordering = ["created_at"]
        unique_together = ("customer", "product")

    def __str__(self):
        return f"{self.quantity} x {self.product_id}"
