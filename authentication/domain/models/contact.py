from django.db import models


class Address(models.Model):
    """Postal address owned by either a customer or a merchant."""

    customer = models.ForeignKey(
        "authentication.Customer", on_delete=models.CASCADE, null=True, blank=True, related_name="addresses"
    )
    merchant = models.ForeignKey(
        "authentication.Merchant", on_delete=models.CASCADE, null=True, blank=True, related_name="addresses"
    )
    street = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    country = models.CharField(max_length=100, default="Nigeria")
    postal_code = models.CharField(max_length=20, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "authentication"
        ordering = ["created_at"]
        indexes = [models.Index(fields=["state"])]

    def __str__(self):
        return f"{self.street}, {self.city}, {self.state}"


class PhoneNumber(models.Model):
    customer = models.ForeignKey(
        "authentication.Customer", on_delete=models.CASCADE, null=True, blank=True, related_name="phone_numbers"
    )
    merchant = models.ForeignKey(
        "authentication.Merchant", on_delete=models.CASCADE, null=True, blank=True, related_name="phone_numbers"
    )
    number = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "authentication"
        ordering = ["created_at"]

    def __str__(self):
        return self.number
