"""FatSecret Platform API client."""

from dataclasses import dataclass, field
from typing import Protocol

import httpx

from fithood.services.cache import TokenCache

DEFAULT_TOKEN_URL = "https://oauth.fatsecret.com/connect/token"
DEFAULT_API_URL = "https://platform.fatsecret.com/rest/server.api"


class FoodSearchClient(Protocol):
    """Interface for external food search."""

    async def search_foods(
        self, query: str, max_results: int = 10
    ) -> dict[str, object]:
        """Search foods by free text and return raw API data."""


@dataclass
class HttpxFatSecretClient(FoodSearchClient):
    """HTTPX-backed FatSecret client using OAuth2 client credentials."""

    client_id: str
    client_secret: str
    http_client: httpx.AsyncClient
    token_url: str = DEFAULT_TOKEN_URL
    api_url: str = DEFAULT_API_URL
    token_cache: TokenCache = field(default_factory=TokenCache)

    @classmethod
    def create(
        cls,
        client_id: str,
        client_secret: str,
        token_url: str = DEFAULT_TOKEN_URL,
        api_url: str = DEFAULT_API_URL,
    ) -> "HttpxFatSecretClient":
        """Create a client with a managed httpx session."""
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            http_client=httpx.AsyncClient(),
            token_url=token_url,
            api_url=api_url,
        )

    async def get_access_token(self) -> str:
        """Return a cached bearer token, requesting a new one when expired."""
        cached = self.token_cache.get()
        if cached:
            return cached
        response = await self.http_client.post(
            self.token_url,
            auth=(self.client_id, self.client_secret),
            data={"grant_type": "client_credentials", "scope": "basic"},
            timeout=15,
        )
        response.raise_for_status()
        payload = response.json()
        token = str(payload["access_token"])
        self.token_cache.store(token, float(payload.get("expires_in", 0)))
        return token

    async def search_foods(
        self, query: str, max_results: int = 10
    ) -> dict[str, object]:
        """Call ``foods.search`` for a free-text query."""
        token = await self.get_access_token()
        response = await self.http_client.get(
            self.api_url,
            params={
                "method": "foods.search",
                "search_expression": query,
                "format": "json",
                "max_results": max_results,
            },
            headers={"Authorization": f"Bearer {token}"},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
