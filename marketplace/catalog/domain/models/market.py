import uuid

from django.db import models


class MarketQuerySet(models.QuerySet):
    def markets(self):
        return self.filter(is_mall=False)

    def malls(self):
        return self.filter(is_mall=True)


class Market(models.Model):
    """A physical market or mall that merchants trade from."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150, unique=True)
    description = models.TextField(blank=True)
    address = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    display_image = models.URLField(max_length=500, blank=True)
    display_image_key = models.CharField(max_length=255, blank=True)
    is_mall = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MarketQuerySet.as_manager()

    class Meta:
        app_label = "marketplace"
        ordering = ["name"]
        indexes = [models.Index(fields=["is_mall", "name"])]

    def __str__(self):
        return self.name
