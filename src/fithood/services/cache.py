"""Expiring access-token cache for external API clients."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta


@dataclass
class TokenCache:
    """Holds one bearer token until shortly before it expires."""

    refresh_margin_seconds: int = 60
    _token: str | None = None
    _expires_at: datetime | None = None

    def get(self, now: datetime | None = None) -> str | None:
        """Return the cached token if it is still usable."""
        if self._token is None or self._expires_at is None:
            return None
        current = now or datetime.now(tz=UTC)
        if current >= self._expires_at:
            self.clear()
            return None
        return self._token

    def store(
        self, token: str, expires_in_seconds: float, now: datetime | None = None
    ) -> None:
        """Cache a token, expiring it ``refresh_margin_seconds`` early."""
        current = now or datetime.now(tz=UTC)
        lifetime = max(expires_in_seconds - self.refresh_margin_seconds, 0)
        self._token = token
        self._expires_at = current + timedelta(seconds=lifetime)

    def clear(self) -> None:
        """Forget the cached token."""
        self._token = None
        self._expires_at = None
