"""URL configuration of the GiveWP to Brevo relay."""

from django.urls import path

from givebrevo.views import DonationWebhookView

urlpatterns = [
    path("givewp-brevo/v1/donation/", DonationWebhookView.as_view(), name="givebrevo-donation"),
]
