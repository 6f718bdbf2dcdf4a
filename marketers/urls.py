from django.urls import path

from marketers.api.views.marketer_views import (
    MarketerDetailView,
    MarketerEarningsView,
    MarketerListView,
    MarketerPayoutView,
    MarketerVerifyView,
    ReferrerLookupView,
)

urlpatterns = [
    path("", MarketerListView.as_view(), name="marketer-list"),
    path("referrer/<str:code>/", ReferrerLookupView.as_view(), name="marketer-referrer"),
    path("<uuid:marketer_id>/", MarketerDetailView.as_view(), name="marketer-detail"),
    path("<uuid:marketer_id>/verify/", MarketerVerifyView.as_view(), name="marketer-verify"),
    path("<uuid:marketer_id>/earnings/", MarketerEarningsView.as_view(), name="marketer-earnings"),
    path("<uuid:marketer_id>/earnings/pay/", MarketerPayoutView.as_view(), name="marketer-earnings-pay"),
]
