import uuid

from django.core.validators import MinValueValidator
from django.db import models


class ProductCategory(models.TextChoices):
    ELECTRONICS = "ELECTRONICS", "Electronics"
    FASHION = "FASHION", "Fashion"
    FOOD = "FOOD", "Food"
    HEALTH_BEAUTY = "HEALTH_BEAUTY", "Health & Beauty"
    HOME_OFFICE = "HOME_OFFICE", "Home & Office"
    PHONES_TABLETS = "PHONES_TABLETS", "Phones & Tablets"
    OTHER = "OTHER", "Other"


class ProductQuerySet(models.QuerySet):
    def with_relations(self):
        return self.select_related("merchant", "merchant__market").prefetch_related("images")

    def for_merchant(self, merchant_id):
        return self.filter(merchant_id=merchant_id)

    def for_market(self, market_id):
        return self.filter(merchant__market_id=market_id)

    def in_category(self, category):
        return self.filter(category=category)

    def in_state(self, state):
        """Products whose merchant has an address in ``state``."""
        return self.filter(merchant__addresses__state__iexact=state).distinct()


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    merchant = models.ForeignKey("authentication.Merchant", on_delete=models.CASCADE, related_name="products")
    name = models.CharField(max_length=200)
    details = models.TextField(blank=True)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    prev_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    stock = models.PositiveIntegerField(default=0)
    category = models.CharField(max_length=30, choices=ProductCategory.choices, default=ProductCategory.OTHER)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        app_label = "marketplace"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["merchant", "-created_at"]),
            models.Index(fields=["category", "-created_at"]),
        ]

    @property
    def display_image(self):
        for image in self.images.all():
            if image.is_display:
                return image
        return None

    def __str__(self):
        return self.name


class ProductImage(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="images")
    key = models.CharField(max_length=255)
    url = models.URLField(max_length=500)
    is_display = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "marketplace"
        ordering = ["-is_display", "created_at"]

    def __str__(self):
        return f"Image {self.key} for {self.product_id}"
