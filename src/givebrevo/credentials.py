"""Sources of the Brevo credentials used by the relay."""

from dataclasses import dataclass

from django.conf import settings
from django.utils.module_loading import import_string

from givebrevo import conf
from givebrevo.models import BrevoConfiguration


@dataclass(frozen=True)
class Credentials:
    """Brevo API key and the id of the list donors are added to."""

    api_key: str = ""
    list_id: str = ""

    @property
    def is_complete(self):
        """Whether both credentials are set, "0" counting as unset."""
        return all(value and value != "0" for value in (self.api_key, self.list_id))


class DatabaseCredentialsProvider:
    """Read the credentials saved through the admin."""

    def get_credentials(self) -> Credentials:
        """Return the credentials of the configuration singleton."""
        configuration = BrevoConfiguration.load()
        if configuration is None:
            return Credentials()
        return Credentials(api_key=configuration.api_key, list_id=configuration.list_id)


class SettingsCredentialsProvider:
    """Read the credentials from the GIVEBREVO_API_KEY and GIVEBREVO_LIST_ID settings."""

    def get_credentials(self) -> Credentials:
        """Return the credentials defined in the settings."""
        return Credentials(
            api_key=getattr(settings, "GIVEBREVO_API_KEY", "") or "",
            list_id=str(getattr(settings, "GIVEBREVO_LIST_ID", "") or ""),
        )


def get_credentials_provider():
    """Instantiate the credentials provider configured in the settings."""
    return import_string(conf.get_credentials_provider_path())()
