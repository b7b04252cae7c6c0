"""Test the donation webhook endpoint."""

import pytest
import responses
from django.urls import reverse
from responses import matchers
from rest_framework.test import APIClient

from givebrevo.activity_log import get_activity_log
from tests import factories

pytestmark = pytest.mark.django_db

CONTACTS_URL = "https://api.brevo.com/v3/contacts"
DONATION = {"data": {"donation": {"email": "a@x.com", "firstName": "A", "lastName": "B"}}}


def logged_messages():
    """Return the messages of the activity log."""
    return [entry.message for entry in get_activity_log().entries()]


def test_webhook_url():
    """The endpoint keeps the path known by GiveWP."""
    assert reverse("givebrevo-donation") == "/givewp-brevo/v1/donation/"


@responses.activate
def test_webhook_donor_added():
    """A donation posted by GiveWP adds the donor to the configured list."""
    factories.BrevoConfigurationFactory(api_key="xkeysib-test", list_id="12")
    responses.add(
        responses.POST,
        CONTACTS_URL,
        json={"id": 1},
        status=201,
        match=[
            matchers.header_matcher({"api-key": "xkeysib-test"}),
            matchers.json_params_matcher(
                {"email": "a@x.com", "attributes": {"FIRSTNAME": "A", "LASTNAME": "B"}, "listIds": [12]}
            ),
        ],
    )

    response = APIClient().post(reverse("givebrevo-donation"), DONATION, format="json")

    assert response.status_code == 200
    assert response.json() == {"success": "Donor added successfully", "email": "a@x.com"}
    assert len(responses.calls) == 1
    assert logged_messages()[-1] == "Success: Donor added to Brevo - a@x.com"


@responses.activate
def test_webhook_email_missing():
    """A donation without email is rejected without calling Brevo."""
    factories.BrevoConfigurationFactory()

    response = APIClient().post(reverse("givebrevo-donation"), {"data": {"donation": {}}}, format="json")

    assert response.status_code == 400
    assert response.json() == {"error": "Donor email missing"}
    assert len(responses.calls) == 0
    assert logged_messages()[-2:] == ['Webhook Received: {"data":{"donation":{}}}', "Error: Donor email missing"]


@responses.activate
def test_webhook_not_configured():
    """Without saved credentials, the donation is not relayed."""
    response = APIClient().post(reverse("givebrevo-donation"), DONATION, format="json")

    assert response.status_code == 500
    assert response.json() == {"error": "Brevo API Key or List ID missing"}
    assert len(responses.calls) == 0


@responses.activate
def test_webhook_api_key_missing():
    """A saved configuration without API key is incomplete."""
    factories.BrevoConfigurationFactory(api_key="", list_id="12")

    response = APIClient().post(reverse("givebrevo-donation"), DONATION, format="json")

    assert response.status_code == 500
    assert response.json() == {"error": "Brevo API Key or List ID missing"}
    assert len(responses.calls) == 0


def test_webhook_invalid_json():
    """A body that is not JSON is logged as null and rejected."""
    response = APIClient().post(reverse("givebrevo-donation"), "{not json", content_type="application/json")

    assert response.status_code == 400
    assert response.json() == {"error": "Donor email missing"}
    assert logged_messages()[-2:] == ["Webhook Received: null", "Error: Donor email missing"]


def test_webhook_form_body():
    """A form encoded body is logged as null and rejected."""
    response = APIClient().post(reverse("givebrevo-donation"), {"email": "a@x.com"})

    assert response.status_code == 400
    assert logged_messages()[-2] == "Webhook Received: null"


def test_webhook_get_not_allowed():
    """Only POST is accepted."""
    response = APIClient().get(reverse("givebrevo-donation"))

    assert response.status_code == 405


def test_webhook_no_authentication_required():
    """The endpoint does not require any session or CSRF token."""
    client = APIClient(enforce_csrf_checks=True)

    response = client.post(reverse("givebrevo-donation"), {"data": {"donation": {}}}, format="json")

    assert response.status_code == 400


def test_webhook_secret_missing(settings):
    """With a shared secret configured, calls without it are refused before logging."""
    settings.GIVEBREVO_WEBHOOK_SECRET = "s3cr3t"

    response = APIClient().post(reverse("givebrevo-donation"), DONATION, format="json")

    assert response.status_code == 403
    assert response.json() == {"error": "Invalid webhook secret"}
    assert logged_messages() == []


def test_webhook_secret_wrong(settings):
    """A wrong shared secret is refused."""
    settings.GIVEBREVO_WEBHOOK_SECRET = "s3cr3t"

    response = APIClient().post(
        reverse("givebrevo-donation"), DONATION, format="json", HTTP_X_GIVEBREVO_SECRET="wrong"
    )

    assert response.status_code == 403


@responses.activate
def test_webhook_secret_valid(settings):
    """A call with the shared secret is relayed."""
    settings.GIVEBREVO_WEBHOOK_SECRET = "s3cr3t"
    factories.BrevoConfigurationFactory(api_key="xkeysib-test", list_id="12")
    responses.add(responses.POST, CONTACTS_URL, json={"id": 1}, status=201)

    response = APIClient().post(
        reverse("givebrevo-donation"), DONATION, format="json", HTTP_X_GIVEBREVO_SECRET="s3cr3t"
    )

    assert response.status_code == 200
    assert len(responses.calls) == 1


def test_webhook_without_writable_log(settings, tmp_path):
    """The webhook answers normally when the activity log can't be written."""
    settings.GIVEBREVO_LOG_FILE = tmp_path / "missing_dir" / "givewp_brevo_log.txt"

    response = APIClient().post(reverse("givebrevo-donation"), {"data": {"donation": {}}}, format="json")

    assert response.status_code == 400
    assert response.json() == {"error": "Donor email missing"}
