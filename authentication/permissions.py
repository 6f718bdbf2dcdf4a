"""
Route guards for customer and merchant endpoints.

``CustomerAuthGuard.authorise(...)`` and ``MerchantAuthGuard.authorise(...)``
build DRF permission classes from a few pure predicates over ``AuthContext``:

    permission_classes = [CustomerAuthGuard.authorise(strict=True, role=CustomerRole.ADMIN)]

A caller of the wrong subject type (or anonymous) gets 401; a caller of the
right type that fails ``strict``, ``role`` or ownership gets 403.
"""

from __future__ import annotations

from typing import Optional

from rest_framework.exceptions import NotAuthenticated
from rest_framework.permissions import BasePermission

from authentication.api.serializers.jwt_serializers import CUSTOMER_SUBJECT, MERCHANT_SUBJECT
from authentication.authentication import AuthContext


def is_subject_type(ctx: Optional[AuthContext], subject_type: str) -> bool:
    return isinstance(ctx, AuthContext) and ctx.subject_type == subject_type


def is_verified(ctx: AuthContext) -> bool:
    return ctx.verified


def has_role(ctx: AuthContext, role: Optional[str]) -> bool:
    return role is None or ctx.role == role


def owns_resource(ctx: AuthContext, resource_owner_id) -> bool:
    return resource_owner_id is not None and str(resource_owner_id) == ctx.subject_id


def check_access(
    ctx: Optional[AuthContext],
    subject_type: str,
    strict: bool = False,
    role: Optional[str] = None,
    owner_id=None,
) -> Optional[str]:
    """
    Evaluate a guard. Returns None when access is granted, otherwise
    ``"unauthenticated"`` or ``"forbidden"``.
    """
    if not is_subject_type(ctx, subject_type):
        return "unauthenticated"
    if strict and not (is_verified(ctx) and has_role(ctx, role)):
        return "forbidden"
    if not strict and role is not None and not has_role(ctx, role):
        return "forbidden"
    if owner_id is not None and not owns_resource(ctx, owner_id):
        return "forbidden"
    return None


class SubjectGuardPermission(BasePermission):
    """Base permission configured by ``AuthGuard.authorise``."""

    subject_type: str = ""
    strict: bool = False
    role: Optional[str] = None
    owner_kwarg: Optional[str] = None
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view):
        owner_id = view.kwargs.get(self.owner_kwarg) if self.owner_kwarg else None
        outcome = check_access(request.auth, self.subject_type, self.strict, self.role, owner_id)
        if outcome == "unauthenticated":
            raise NotAuthenticated(f"{self.subject_type.capitalize()} authentication required")
        return outcome is None


class AuthGuard:
    subject_type: str = ""

    @classmethod
    def authorise(
        cls,
        strict: bool = False,
        role: Optional[str] = None,
        owner_kwarg: Optional[str] = None,
    ) -> type:
        """
        Build a permission class.

        Args:
            strict: require a verified account (and ``role`` when given)
            role: required customer role
            owner_kwarg: URL kwarg that must equal the caller's id
        """
        name = f"{cls.__name__}Permission"
        return type(
            name,
            (SubjectGuardPermission,),
            {
                "subject_type": cls.subject_type,
                "strict": strict,
                "role": role,
                "owner_kwarg": owner_kwarg,
            },
        )


class CustomerAuthGuard(AuthGuard):
    subject_type = CUSTOMER_SUBJECT


class MerchantAuthGuard(AuthGuard):
    subject_type = MERCHANT_SUBJECT
