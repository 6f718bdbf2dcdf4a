"""Signup and sign-in flows for customer accounts."""

from django.db import transaction

from authentication.infra.observability.metrics import registration_total
from authentication.models import Customer, CustomerRole, VerificationPurpose
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

from .base_auth_service import BaseAuthService
from .contacts import replace_contacts
from .results import RegisterResult


class CustomerAuthService(BaseAuthService):
    subject_model = Customer
    subject_type = Customer.subject_type
    not_found_code = ErrorCodes.CUSTOMER_NOT_FOUND

    @BaseService.log_performance
    def register(self, data: dict) -> ServiceResult[RegisterResult]:
        """
        Create a customer and send the email verification code.

        ``data`` is validated signup input: email, password, first_name,
        last_name and optional addresses / phone_numbers.
        """
        email = data["email"].lower()
        if Customer.objects.filter(email__iexact=email).exists():
            registration_total.labels(subject_type=self.subject_type, status="failed").inc()
            return service_err(ErrorCodes.EMAIL_TAKEN, "An account with this email already exists")

        with transaction.atomic():
            customer = Customer.objects.create_user(
                email=email,
                password=data["password"],
                first_name=data["first_name"],
                last_name=data["last_name"],
                role=CustomerRole.CUSTOMER,
            )
            replace_contacts(customer, data.get("addresses"), data.get("phone_numbers"))

        registration_total.labels(subject_type=self.subject_type, status="success").inc()
        email_sent = self.send_code(customer, VerificationPurpose.EMAIL_VERIFICATION)
        self.logger.info(f"Customer {customer.id} registered")
        return service_ok(RegisterResult(subject=customer, email_sent=email_sent))

    def create_from_google(self, email: str, id_info: dict) -> Customer:
        return Customer.objects.create_user(
            email=email,
            first_name=id_info.get("given_name", "")[:50],
            last_name=id_info.get("family_name", "")[:50],
            display_image=id_info.get("picture", ""),
        )
