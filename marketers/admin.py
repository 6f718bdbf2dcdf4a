from django.contrib import admin, messages
from django.utils import timezone

from .models import Marketer, MarketerEarnings


@admin.register(Marketer)
class MarketerAdmin(admin.ModelAdmin):
    list_display = ("username", "referrer_code", "customer", "verified", "created_at")
    list_filter = ("verified",)
    search_fields = ("username", "referrer_code", "customer__email")
    readonly_fields = ("id", "referrer_code", "identity_credential_key", "created_at", "updated_at")
    actions = ["mark_verified"]

    @admin.action(description="Verify selected marketers")
    def mark_verified(self, request, queryset):
        updated = queryset.update(verified=True, updated_at=timezone.now())
        self.message_user(request, f"{updated} marketer(s) verified.", messages.SUCCESS)


@admin.register(MarketerEarnings)
class MarketerEarningsAdmin(admin.ModelAdmin):
    list_display = ("marketer", "merchant", "amount", "paid", "paid_at", "created_at")
    list_filter = ("paid",)
    search_fields = ("marketer__username", "merchant__brand_name")
    readonly_fields = ("ad", "amount", "created_at")
    list_select_related = ("marketer", "merchant")
