"""Brevo marketing automation integration."""

import logging

import requests

from givebrevo import conf
from givebrevo.marketing.backends import ContactData
from givebrevo.marketing.exceptions import ContactCreationError

from .base import BaseBackend

logger = logging.getLogger(__name__)

BREVO_API_URL = "https://api.brevo.com/v3"


class BrevoBackend(BaseBackend):
    """
    Brevo marketing automation integration.

    Handles:
    - Contact creation and update in a contact list
    - Listing the contact lists of the account
    """

    def __init__(self, api_key: str, check_status: bool | None = None, timeout: int | None = None):
        """Configure the Brevo backend."""
        self._api_key = api_key
        self.check_status = conf.get_check_status() if check_status is None else check_status
        self.timeout = conf.get_timeout() if timeout is None else timeout

    @property
    def _headers(self):
        """Headers common to every Brevo API request."""
        return {
            "accept": "application/json",
            "api-key": self._api_key,
        }

    def create_or_update_contact(self, contact_data: ContactData, timeout: int = None) -> dict:
        """
        Create or update a Brevo contact.

        Args:
            contact_data: Contact information and target lists
            timeout: API request timeout in seconds

        Returns:
            dict: Brevo API response, empty when the body is not a JSON object

        Raises:
            ContactCreationError: If the request fails to be sent or to complete, or if the
                response status is not a success while `check_status` is on.

        Note:
            With `check_status` off, a response received with an error status
            is not distinguished from a success.

        """
        try:
            response = requests.post(
                f"{BREVO_API_URL}/contacts",
                json=contact_data.to_payload(),
                headers={**self._headers, "content-type": "application/json"},
                timeout=timeout or self.timeout,
            )
            if self.check_status:
                response.raise_for_status()
        except (requests.RequestException, ValueError) as err:
            # ValueError covers headers that can't be encoded, e.g. a non latin-1 API key
            raise ContactCreationError(str(err)) from err

        if not response.ok:
            logger.warning("Brevo answered %s for contact %s", response.status_code, contact_data.email)

        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    def get_lists(self, timeout: int = None) -> dict[int, str]:
        """
        Fetch the Brevo contact lists of the account.

        Any failure results in an empty mapping, the caller only uses it to
        offer choices.
        """
        try:
            response = requests.get(
                f"{BREVO_API_URL}/contacts/lists",
                headers=self._headers,
                timeout=timeout or self.timeout,
            )
            body = response.json()
        except (requests.RequestException, ValueError) as err:
            logger.info("Could not fetch Brevo lists: %s", err)
            return {}

        if not isinstance(body, dict) or not isinstance(body.get("lists"), list):
            return {}

        lists = {}
        for item in body["lists"]:
            try:
                lists[int(item["id"])] = str(item["name"])
            except (KeyError, TypeError, ValueError):
                continue
        return lists
