from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Rating(models.Model):
    customer = models.ForeignKey("authentication.Customer", on_delete=models.CASCADE, related_name="ratings")
    product = models.ForeignKey("marketplace.Product", on_delete=models.CASCADE, related_name="ratings")
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    review = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"
        ordering = ["-created_at"]
        unique_together = ("customer", "product")

    def __str__(self):
        return f"{self.rating}/5 by {self.customer_id} for {self.product_id}"
