"""Dummy marketing backend."""

from givebrevo.marketing.backends import ContactData

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy marketing backend doing nothing."""

    def __init__(self, api_key: str = "", **kwargs):
        """Accept the same arguments as the real backends."""
        self._api_key = api_key

    def create_or_update_contact(self, contact_data: ContactData, timeout: int = None) -> dict:
        """Create or update a contact."""
        return {}

    def get_lists(self, timeout: int = None) -> dict[int, str]:
        """Return no list."""
        return {}
