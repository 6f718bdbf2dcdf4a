from django.contrib import admin

from .models import Address, Customer, Merchant, PhoneNumber, VerificationCode


class AddressInline(admin.TabularInline):
    model = Address
    extra = 0
    fields = ("street", "city", "state", "country", "postal_code")


class PhoneNumberInline(admin.TabularInline):
    model = PhoneNumber
    extra = 0
    fields = ("number",)


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("email", "full_name", "role", "is_verified", "is_active", "created_at")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("email", "first_name", "last_name")
    readonly_fields = ("id", "password", "last_login", "created_at", "updated_at")
    inlines = [AddressInline, PhoneNumberInline]

    fieldsets = (
        (None, {"fields": ("id", "email", "password")}),
        ("Profile", {"fields": ("first_name", "last_name", "display_image")}),
        ("Access", {"fields": ("role", "is_active", "is_staff", "email_verified_at")}),
        ("Timestamps", {"fields": ("last_login", "created_at", "updated_at"), "classes": ("collapse",)}),
    )

    @admin.display(boolean=True, description="Verified")
    def is_verified(self, obj):
        return obj.is_verified


@admin.register(Merchant)
class MerchantAdmin(admin.ModelAdmin):
    list_display = ("brand_name", "email", "market", "referred_by", "is_verified", "is_active", "created_at")
    list_filter = ("is_active", "market")
    search_fields = ("brand_name", "email")
    readonly_fields = ("id", "password", "display_image_key", "last_login", "created_at", "updated_at")
    list_select_related = ("market", "referred_by")
    inlines = [AddressInline, PhoneNumberInline]

    @admin.display(boolean=True, description="Verified")
    def is_verified(self, obj):
        return obj.is_verified


@admin.register(VerificationCode)
class VerificationCodeAdmin(admin.ModelAdmin):
    list_display = ("email", "subject_type", "purpose", "is_used", "expires_at", "created_at")
    list_filter = ("subject_type", "purpose", "is_used")
    search_fields = ("email",)
    readonly_fields = ("code", "token", "created_at")
