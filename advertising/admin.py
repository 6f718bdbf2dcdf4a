from django.contrib import admin

from .models import Ad, Transaction


@admin.register(Ad)
class AdAdmin(admin.ModelAdmin):
    list_display = ("product", "level", "paid_for", "status", "expires_at", "views", "clicks", "created_at")
    list_filter = ("level", "paid_for")
    search_fields = ("product__name", "product__merchant__brand_name")
    readonly_fields = ("id", "views", "clicks", "created_at", "updated_at")
    list_select_related = ("product",)


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ("reference", "merchant", "level", "amount", "currency", "status", "paid_at", "created_at")
    list_filter = ("status", "level", "currency")
    search_fields = ("reference", "merchant__email", "merchant__brand_name")
    readonly_fields = ("id", "reference", "gateway_response", "paid_at", "created_at", "updated_at")
    list_select_related = ("merchant",)
