"""Relay of GiveWP donation webhooks to a Brevo contact list."""

import json
import logging
import re

from givebrevo.marketing.backends import ContactData
from givebrevo.marketing.exceptions import ContactCreationError
from givebrevo.tools.email import is_valid_email, normalize_email
from givebrevo.tools.text import sanitize_text_field

logger = logging.getLogger(__name__)

EMAIL_MISSING = "Donor email missing"
CREDENTIALS_MISSING = "Brevo API Key or List ID missing"
DONOR_ADDED = "Donor added successfully"

_LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")


def to_list_id(value) -> int:
    """
    Cast a stored list id to an integer.

    Only the leading digits are read, so "12abc" gives 12 and a value without
    leading digits gives 0.
    """
    match = _LEADING_INTEGER.match(str(value))
    return int(match.group()) if match else 0


class RelayHandler:
    """
    Forward the donor of a donation webhook to the configured Brevo list.

    Each call of `handle` is independent: credentials are read from the
    provider, at most one request is sent through the backend and every
    outcome is written to the activity log before returning.
    """

    def __init__(self, credentials_provider, activity_log, backend_factory):
        """
        Build a relay from its collaborators.

        Args:
            credentials_provider: object with a `get_credentials()` method
            activity_log: sink with an `append(message)` method
            backend_factory: callable returning a marketing backend for an API key
        """
        self.credentials_provider = credentials_provider
        self.activity_log = activity_log
        self.backend_factory = backend_factory

    def handle(self, body) -> tuple[int, dict]:
        """Process a webhook body and return the status code and body of the response."""
        self.activity_log.append(f"Webhook Received: {json.dumps(body, separators=(',', ':'))}")

        data = body.get("data") if isinstance(body, dict) else None
        donation = data.get("donation") if isinstance(data, dict) else None
        email = normalize_email(donation.get("email")) if isinstance(donation, dict) else ""
        if not email:
            self.activity_log.append(f"Error: {EMAIL_MISSING}")
            return 400, {"error": EMAIL_MISSING}

        if not is_valid_email(email):
            logger.warning("Relaying donor with a malformed email: %r", email)
        first_name = sanitize_text_field(donation.get("firstName"))
        last_name = sanitize_text_field(donation.get("lastName"))

        credentials = self.credentials_provider.get_credentials()
        if not credentials.is_complete:
            self.activity_log.append(f"Error: {CREDENTIALS_MISSING}")
            return 500, {"error": CREDENTIALS_MISSING}

        contact_data = ContactData(
            email=email,
            first_name=first_name,
            last_name=last_name,
            list_ids=[to_list_id(credentials.list_id)],
        )

        try:
            self.backend_factory(credentials.api_key).create_or_update_contact(contact_data)
        except ContactCreationError as err:
            logger.error("Failed to relay donor %s to Brevo: %s", email, err)
            self.activity_log.append(f"Brevo API Error: {err}")
            return 500, {"error": str(err)}

        self.activity_log.append(f"Success: Donor added to Brevo - {email}")
        return 200, {"success": DONOR_ADDED, "email": email}
