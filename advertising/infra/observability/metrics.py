"""
Prometheus Metrics

Advertising counters. Exposed with every other metric at /api/v1/metrics/.
"""

from prometheus_client import Counter

free_ads_activated = Counter("ads_free_activated_total", "Free ads activated")

ad_payments_initialized = Counter(
    "ads_payment_initialized_total", "Ad payments initialized with the gateway", ["level", "status"]
)
"""
Labels: level (1-3), status (success/failed)

Example:
    ad_payments_initialized.labels(level="2", status="success").inc()
"""

ad_payment_verifications = Counter(
    "ads_payment_verifications_total", "Ad payment verification outcomes", ["outcome"]
)
"""
Labels: outcome (settled/already_settled/pending/failed/abandoned/amount_mismatch/gateway_error)
"""

ad_interactions = Counter("ads_interactions_total", "Ad views and clicks", ["kind"])
