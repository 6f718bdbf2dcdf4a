"""Prometheus counters for the referral program."""

from prometheus_client import Counter

marketer_registrations = Counter("marketers_registrations_total", "Marketer sign-ups", ["status"])

referral_earnings_credited = Counter(
    "marketers_referral_earnings_credited_total", "Referral earnings recorded for paid ads"
)

referral_earnings_amount = Counter(
    "marketers_referral_earnings_amount_total", "Sum of referral commission credited, in major currency units"
)

earnings_payouts = Counter("marketers_earnings_payouts_total", "Earnings rows marked as paid out")
