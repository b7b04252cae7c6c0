"""Marketing backends module."""

from dataclasses import dataclass, field


@dataclass
class ContactData:
    """Contact data for marketing service integration."""

    email: str
    first_name: str = ""
    last_name: str = ""
    list_ids: list[int] = field(default_factory=list)

    def to_payload(self) -> dict:
        """Return the body of a contact upsert request."""
        return {
            "email": self.email,
            "attributes": {"FIRSTNAME": self.first_name, "LASTNAME": self.last_name},
            "listIds": list(self.list_ids),
        }
