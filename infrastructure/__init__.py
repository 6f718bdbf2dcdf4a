"""
Infrastructure Package
======================

Abstraction layers for external dependencies.

Modules:
    - storage: File storage abstraction (S3/MinIO, local filesystem)
    - email: Email service abstraction (SMTP, mock)
    - payments: Payment gateway abstraction (Paystack, mock)
    - container: Lazily-built providers and domain services
"""
