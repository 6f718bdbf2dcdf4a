from django.urls import path

from marketplace.cart.api.views.cart_views import CartView, ClearCartView

urlpatterns = [
    path("clear/", ClearCartView.as_view(), name="cart-clear"),
    path("<uuid:resource_id>/", CartView.as_view(), name="cart"),
]
