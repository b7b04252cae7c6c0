"""Settings of the application and their default values."""

from pathlib import Path

from django.conf import settings

DEFAULT_MARKETING = {"BACKEND": "givebrevo.marketing.backends.brevo.BrevoBackend"}
DEFAULT_CREDENTIALS_PROVIDER = "givebrevo.credentials.DatabaseCredentialsProvider"
DEFAULT_LOG_FILENAME = "givewp_brevo_log.txt"
DEFAULT_TIMEOUT = 10


def get_log_file() -> Path:
    """Return the path of the activity log file."""
    path = getattr(settings, "GIVEBREVO_LOG_FILE", None)
    if not path:
        return Path.cwd() / DEFAULT_LOG_FILENAME
    return Path(path)


def get_credentials_provider_path() -> str:
    """Return the dotted path of the credentials provider class."""
    return getattr(settings, "GIVEBREVO_CREDENTIALS_PROVIDER", DEFAULT_CREDENTIALS_PROVIDER)


def get_timeout() -> int:
    """Return the timeout of the Brevo API requests, in seconds."""
    return getattr(settings, "GIVEBREVO_TIMEOUT", DEFAULT_TIMEOUT)


def get_check_status() -> bool:
    """Whether an error status from the provider is reported as a failure."""
    return getattr(settings, "GIVEBREVO_CHECK_STATUS", False)


def get_webhook_secret() -> str | None:
    """Return the shared secret expected on webhook calls, if any."""
    return getattr(settings, "GIVEBREVO_WEBHOOK_SECRET", None) or None
