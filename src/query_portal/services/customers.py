"""Access-code login for seeded company customers."""

import logging
from dataclasses import dataclass

from query_portal.domain.errors import InvalidCredentialsError
from query_portal.domain.models import PublicProfile
from query_portal.domain.seeds import Company, Customer
from query_portal.services.records import RecordStore
from query_portal.services.validation import validate_credentials

_logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("email", "companyId", "name")


@dataclass
class CustomerAccessService:
    """Authenticates customers by email and company access code."""

    store: RecordStore

    def authenticate(self, email: str | None, access_code: str | None) -> PublicProfile:
        """Return the customer profile when the access code matches."""
        validate_credentials(email, access_code)
        normalized = email.strip().lower()
        matches = [
            (key, document)
            for key, document in self.store.find_by_field(
                Customer.collection, "email", normalized
            )
            if document.get("accessCode") == access_code
        ]
        if not matches:
            raise InvalidCredentialsError

        key, document = matches[0]
        if not all(document.get(field) for field in _REQUIRED_FIELDS):
            _logger.warning("Customer document %s is missing required fields", key)
            raise InvalidCredentialsError

        company_id = str(document["companyId"])
        if self.store.get(Company.collection, company_id) is None:
            _logger.warning(
                "Customer %s references unknown company %s", key, company_id
            )
            raise InvalidCredentialsError

        return PublicProfile(
            id=key,
            email=str(document["email"]).lower(),
            name=str(document["name"]),
            company_id=company_id,
            role=str(document.get("role") or "user"),
        )
