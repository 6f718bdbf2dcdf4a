from django.contrib import admin
from django.utils.html import format_html

from .models import CartProduct, Market, Product, ProductImage, Rating


class ProductImageInline(admin.TabularInline):
    model = ProductImage
    extra = 0
    fields = ("url", "is_display", "image_preview")
    readonly_fields = ("image_preview",)

    @admin.display(description="Preview")
    def image_preview(self, obj):
        if obj.url:
            return format_html('<img src="{}" width="100" height="100" />', obj.url)
        return "No Image"


class RatingInline(admin.TabularInline):
    model = Rating
    extra = 0
    fields = ("customer", "rating", "review")
    readonly_fields = ("customer", "rating", "review")


@admin.register(Market)
class MarketAdmin(admin.ModelAdmin):
    list_display = ("name", "is_mall", "city", "state", "merchant_count", "created_at")
    list_filter = ("is_mall", "state")
    search_fields = ("name", "city", "state")
    readonly_fields = ("id", "display_image_key", "created_at", "updated_at")

    @admin.display(description="Merchants")
    def merchant_count(self, obj):
        return obj.merchants.count()


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "merchant", "category", "price", "prev_price", "stock", "created_at")
    list_filter = ("category", "created_at")
    search_fields = ("name", "description", "merchant__brand_name")
    readonly_fields = ("id", "created_at", "updated_at")
    list_select_related = ("merchant",)
    inlines = [ProductImageInline, RatingInline]

    fieldsets = (
        (None, {"fields": ("id", "merchant", "name", "category")}),
        ("Content", {"fields": ("details", "description")}),
        ("Pricing & Stock", {"fields": ("price", "prev_price", "stock")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ("product", "customer", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("product__name", "customer__email", "review")


@admin.register(CartProduct)
class CartProductAdmin(admin.ModelAdmin):
    list_display = ("customer", "product", "quantity", "total_price", "updated_at")
    search_fields = ("customer__email", "product__name")
    readonly_fields = ("total_price",)
