"""Customer profile management."""

from django.db import transaction
from django.db.models import Prefetch

from authentication.models import Customer
from marketers.models import MarketerEarnings
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .contacts import replace_contacts

PROFILE_FIELDS = ("first_name", "last_name")


class CustomerService(BaseService):
    @BaseService.log_performance
    def get_customer(self, customer_id) -> ServiceResult[Customer]:
        customer = (
            Customer.objects.prefetch_related("addresses", "phone_numbers").filter(pk=customer_id).first()
        )
        if customer is None:
            return service_err(ErrorCodes.CUSTOMER_NOT_FOUND, f"Customer {customer_id} does not exist")
        return service_ok(customer)

    @BaseService.log_performance
    def update_customer(self, customer: Customer, data: dict) -> ServiceResult[Customer]:
        """Update names, email, addresses and the pair of phone numbers."""
        email = data.get("email")
        if email and email.lower() != customer.email:
            if Customer.objects.filter(email__iexact=email).exclude(pk=customer.pk).exists():
                return service_err(ErrorCodes.EMAIL_TAKEN, "An account with this email already exists")
            customer.email = email.lower()

        for field in PROFILE_FIELDS:
            if field in data:
                setattr(customer, field, data[field])

        with transaction.atomic():
            customer.save()
            replace_contacts(customer, data.get("addresses"), data.get("phone_numbers"))

        return self.get_customer(customer.id)

    @BaseService.log_performance
    def delete_customer(self, customer: Customer) -> ServiceResult[None]:
        customer_id = customer.id
        customer.delete()
        self.logger.info(f"Customer {customer_id} deleted")
        return service_ok(None)

    @BaseService.log_performance
    def get_marketer_profile(self, customer: Customer) -> ServiceResult[dict]:
        marketer = getattr(customer, "marketer_profile", None)
        if marketer is None:
            return service_err(ErrorCodes.MARKETER_NOT_FOUND, "This customer is not a marketer")
        totals = MarketerEarnings.objects.for_marketer(marketer.id).totals()
        return service_ok({"marketer": marketer, "email": customer.email, "total_earnings": totals["total"]})

    @BaseService.log_performance
    def get_referrals(self, customer: Customer) -> ServiceResult[list]:
        """Merchants referred by the customer's marketer profile, each with the earnings they produced."""
        marketer = getattr(customer, "marketer_profile", None)
        if marketer is None:
            return service_err(ErrorCodes.MARKETER_NOT_FOUND, "This customer is not a marketer")

        earnings = MarketerEarnings.objects.for_marketer(marketer.id).order_by("-created_at")
        merchants = marketer.referred_merchants.prefetch_related(
            Prefetch("referral_earnings", queryset=earnings, to_attr="marketer_earnings")
        ).order_by("brand_name")

        return service_ok([{"merchant": merchant, "earnings": merchant.marketer_earnings} for merchant in merchants])
