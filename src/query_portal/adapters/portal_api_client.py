"""HTTP client for the portal's login endpoints."""

from dataclasses import dataclass
from typing import Protocol

import httpx


@dataclass(frozen=True)
class PortalResponse:
    """Status code and decoded JSON body of a portal call."""

    status_code: int
    payload: dict[str, object]

    @property
    def ok(self) -> bool:
        """Return True for a successful call."""
        return self.status_code == httpx.codes.OK and bool(self.payload.get("success"))

    @property
    def error(self) -> str:
        """Return the server's error message."""
        return str(self.payload.get("error") or f"HTTP {self.status_code}")


class PortalClient(Protocol):
    """Interface for the portal authentication API."""

    async def login(self, email: str, password: str) -> PortalResponse:
        """Submit credentials to the login endpoint."""

    async def signup(self, name: str, email: str, password: str) -> PortalResponse:
        """Submit a new account to the signup endpoint."""


@dataclass
class HttpxPortalClient(PortalClient):
    """HTTPX-backed portal client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxPortalClient":
        """Create a portal client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def login(self, email: str, password: str) -> PortalResponse:
        """Submit credentials to ``POST /auth``."""
        return await self._post("/auth", {"email": email, "password": password})

    async def signup(self, name: str, email: str, password: str) -> PortalResponse:
        """Submit a new account to ``POST /auth/signup``."""
        return await self._post(
            "/auth/signup", {"name": name, "email": email, "password": password}
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _post(self, path: str, body: dict[str, str]) -> PortalResponse:
        response = await self.http_client.post(
            f"{self.base_url}{path}", json=body, timeout=15
        )
        try:
            payload = response.json()
        except ValueError:
            payload = {"error": response.text or response.reason_phrase}
        if not isinstance(payload, dict):
            payload = {"error": "Unexpected response"}
        return PortalResponse(status_code=response.status_code, payload=payload)
