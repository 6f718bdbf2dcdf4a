"""
Prometheus Metrics

Authentication counters. Exposed with every other metric at /api/v1/metrics/.
"""

from prometheus_client import Counter

login_total = Counter("auth_login_total", "Total login attempts", ["subject_type", "method", "status"])
"""
Login attempts.
Labels: subject_type (customer/merchant), method (password/google), status (success/failed)

Example:
    login_total.labels(subject_type="customer", method="password", status="success").inc()
"""

registration_total = Counter("auth_registration_total", "Total registration attempts", ["subject_type", "status"])
"""
Registration attempts.
Labels: subject_type (customer/merchant), status (success/failed)
"""

verification_emails_sent = Counter(
    "auth_verification_emails_sent_total", "Verification and reset emails sent", ["purpose", "status"]
)
"""
Emails carrying a verification or password-reset code.
Labels: purpose (email_verification/password_reset), status (sent/failed)
"""
