"""Webhook endpoint receiving GiveWP donations."""

import logging

from django.utils.crypto import constant_time_compare
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.parsers import JSONParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from givebrevo import conf
from givebrevo.activity_log import get_activity_log
from givebrevo.credentials import get_credentials_provider
from givebrevo.marketing import MarketingHandler
from givebrevo.relay import RelayHandler

logger = logging.getLogger(__name__)

SECRET_HEADER = "X-Givebrevo-Secret"


class DonationWebhookView(APIView):
    """
    Receive a GiveWP donation and add the donor to the Brevo list.

    The endpoint is open to any caller unless GIVEBREVO_WEBHOOK_SECRET is set,
    in which case the same value is expected in the X-Givebrevo-Secret header.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    parser_classes = [JSONParser]
    http_method_names = ["post", "options"]

    @staticmethod
    def has_valid_secret(request):
        """Check the shared secret of the request when one is configured."""
        secret = conf.get_webhook_secret()
        if secret is None:
            return True
        return constant_time_compare(request.headers.get(SECRET_HEADER, ""), secret)

    def get_relay(self):
        """Build the relay with the configured collaborators."""
        return RelayHandler(
            credentials_provider=get_credentials_provider(),
            activity_log=get_activity_log(),
            backend_factory=MarketingHandler(),
        )

    def post(self, request):
        """Relay the donor of the webhook body."""
        if not self.has_valid_secret(request):
            logger.warning("Rejected donation webhook with an invalid secret")
            return Response({"error": "Invalid webhook secret"}, status=403)

        try:
            body = request.data
        except (ParseError, UnsupportedMediaType):
            # Relayed as null so that the call is still logged
            body = None

        status_code, payload = self.get_relay().handle(body)
        return Response(payload, status=status_code)
