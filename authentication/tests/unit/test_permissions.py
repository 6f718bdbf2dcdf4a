import uuid

import pytest

from authentication.authentication import AuthContext
from authentication.permissions import check_access

CUSTOMER_ID = "8d3c0f0e-1c55-4c3c-9f8e-0d6b2f1f9a11"


def customer_ctx(role="CUSTOMER", verified=True):
    return AuthContext(subject_id=CUSTOMER_ID, subject_type="customer", role=role, verified=verified)


@pytest.mark.unit
class TestCheckAccess:
    def test_anonymous_is_unauthenticated(self):
        assert check_access(None, "customer") == "unauthenticated"

    def test_wrong_subject_type_is_unauthenticated(self):
        merchant = AuthContext(subject_id=CUSTOMER_ID, subject_type="merchant", role=None, verified=True)

        assert check_access(merchant, "customer") == "unauthenticated"

    def test_lenient_guard_admits_unverified(self):
        assert check_access(customer_ctx(verified=False), "customer") is None

    def test_strict_guard_requires_verification(self):
        assert check_access(customer_ctx(verified=False), "customer", strict=True) == "forbidden"

    def test_strict_guard_requires_role(self):
        assert check_access(customer_ctx(), "customer", strict=True, role="ADMIN") == "forbidden"
        assert check_access(customer_ctx(role="ADMIN"), "customer", strict=True, role="ADMIN") is None

    def test_lenient_guard_still_checks_role(self):
        assert check_access(customer_ctx(verified=False), "customer", role="MARKETER") == "forbidden"

    def test_ownership_compares_as_strings(self):
        assert check_access(customer_ctx(), "customer", owner_id=uuid.UUID(CUSTOMER_ID)) is None
        assert check_access(customer_ctx(), "customer", owner_id=uuid.uuid4()) == "forbidden"
