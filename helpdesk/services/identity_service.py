from abc import ABC, abstractmethod

import httpx

from helpdesk.logging_config import get_logger

logger = get_logger("identity_service")


class IdentityLookupError(Exception):
    """Owner contact address could not be resolved."""


class IdentityProvider(ABC):
    @abstractmethod
    def get_contact_email(self, owner_id: str) -> str:
        """Return the contact address for a domain owner."""
        pass


class ClerkIdentityProvider(IdentityProvider):
    """Resolve owner addresses through the Clerk backend API."""

    def __init__(self, secret_key: str, api_url: str = "https://api.clerk.com/v1", timeout_seconds: float = 10.0):
        self.secret_key = secret_key
        self.api_url = api_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    def get_contact_email(self, owner_id: str) -> str:
        if not owner_id:
            raise IdentityLookupError("Domain has no owner")

        try:
            with httpx.Client(timeout=self.timeout_seconds) as client:
                response = client.get(
                    f"{self.api_url}/users/{owner_id}",
                    headers={"Authorization": f"Bearer {self.secret_key}"},
                )
        except httpx.HTTPError as exc:
            raise IdentityLookupError(f"Clerk request failed: {exc}") from exc

        if response.status_code != 200:
            logger.error(f"Clerk error: {response.status_code} - {response.text}")
            raise IdentityLookupError(f"Clerk API error: {response.status_code}")

        addresses = response.json().get("email_addresses") or []
        if not addresses or not addresses[0].get("email_address"):
            raise IdentityLookupError(f"User {owner_id} has no email address")

        return addresses[0]["email_address"]
