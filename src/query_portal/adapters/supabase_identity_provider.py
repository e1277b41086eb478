"""Supabase Auth implementation of the identity provider."""

from dataclasses import dataclass

from supabase import AuthApiError, Client

from query_portal.services.identity import IdentityAlreadyExistsError, IdentityProvider

_ALREADY_EXISTS_CODES = {"email_exists", "user_already_exists"}


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Creates confirmed accounts through the Supabase admin API."""

    client: Client

    def create_user(self, email: str, password: str, display_name: str) -> str:
        """Create an auth user and return its uid."""
        try:
            response = self.client.auth.admin.create_user(
                {
                    "email": email,
                    "password": password,
                    "email_confirm": True,
                    "user_metadata": {"name": display_name},
                }
            )
        except AuthApiError as exc:
            if exc.code in _ALREADY_EXISTS_CODES or "already" in exc.message.lower():
                raise IdentityAlreadyExistsError(email) from exc
            raise
        return response.user.id
