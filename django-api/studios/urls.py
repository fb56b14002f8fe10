from django.urls import path

from studios.handlers import AvailabilityView, DiscountValidateView, QuoteView, SlotListView

urlpatterns = [
    path("studios/<str:studio>/slots", SlotListView.as_view(), name="studio-slots"),
    path(
        "studios/<str:studio>/availability",
        AvailabilityView.as_view(),
        name="studio-availability",
    ),
    path("quotes", QuoteView.as_view(), name="quote"),
    path("discounts/validate", DiscountValidateView.as_view(), name="discount-validate"),
]
