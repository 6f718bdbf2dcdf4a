from django.urls import path

from authentication.api.views.customer_views import CustomerMarketerView, CustomerProfileView, CustomerReferralsView

urlpatterns = [
    path("profile/<uuid:customer_id>/", CustomerProfileView.as_view(), name="customer-profile"),
    path("get-marketer/", CustomerMarketerView.as_view(), name="customer-marketer"),
    path("get-referrals/", CustomerReferralsView.as_view(), name="customer-referrals"),
]
