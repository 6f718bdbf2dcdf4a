import uuid

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models
from django.utils import timezone


class CustomerRole(models.TextChoices):
    CUSTOMER = "CUSTOMER", "Customer"
    MARKETER = "MARKETER", "Marketer"
    ADMIN = "ADMIN", "Admin"


class CustomerManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Customers must have an email address")
        customer = self.model(email=self.normalize_email(email).lower(), **extra_fields)
        if password:
            customer.set_password(password)
        else:
            customer.set_unusable_password()
        customer.save(using=self._db)
        return customer

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("role", CustomerRole.ADMIN)
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("email_verified_at", timezone.now())
        return self.create_user(email, password, **extra_fields)


class Customer(AbstractBaseUser):
    """Shopper account. Also the Django auth user, so admins are customers with role ADMIN."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    display_image = models.URLField(max_length=500, blank=True)
    role = models.CharField(max_length=20, choices=CustomerRole.choices, default=CustomerRole.CUSTOMER)
    email_verified_at = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomerManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["first_name", "last_name"]

    subject_type = "customer"

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]
        indexes = [models.Index(fields=["role"])]

    @property
    def is_verified(self) -> bool:
        return self.email_verified_at is not None

    @property
    def is_admin(self) -> bool:
        return self.role == CustomerRole.ADMIN

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    # Django admin permission hooks; admins get everything.
    def has_perm(self, perm, obj=None):
        return self.is_active and self.is_admin

    def has_module_perms(self, app_label):
        return self.is_active and self.is_admin

    def __str__(self):
        return self.email
