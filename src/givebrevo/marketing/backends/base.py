"""Marketing backend base module."""

from abc import ABC, abstractmethod

from givebrevo.marketing.backends import ContactData


class BaseBackend(ABC):
    """Base class for all marketing backends."""

    @abstractmethod
    def create_or_update_contact(self, contact_data: ContactData, timeout: int = None) -> dict:
        """
        Create or update a contact.

        Args:
            contact_data: Contact information and target lists
            timeout: API request timeout in seconds

        Returns:
            dict: Service response

        Raises:
            ContactCreationError: If the request could not be completed

        """

    @abstractmethod
    def get_lists(self, timeout: int = None) -> dict[int, str]:
        """
        Fetch the contact lists available on the account.

        Returns:
            dict: list names indexed by list id, empty when unavailable

        """
