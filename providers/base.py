"""Abstract base provider with a lazily created httpx client and a registry."""

from __future__ import annotations

import abc

import httpx

from providers.models import SearchQuery, SearchResult

USER_AGENT = "RaceRadar/0.1"


class UpstreamError(Exception):
    """A provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"upstream returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class BaseProvider(abc.ABC):
    """Abstract base provider that all live event sources must subclass."""

    #: Unique source identifier, e.g. "eventbrite".
    name: str = ""

    def __init__(
        self,
        token: str,
        *,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not self.name:
            raise ValueError("Provider subclass must set 'name'")
        self.token = token
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={
                    "User-Agent": USER_AGENT,
                    "Accept": "application/json",
                    "Authorization": f"Bearer {self.token}",
                },
                follow_redirects=True,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def fetch(self, url: str, **kwargs: object) -> httpx.Response:
        """GET *url* once. The caller decides what a bad status means."""
        client = await self._ensure_client()
        return await client.get(url, **kwargs)  # type: ignore[arg-type]

    async def aclose(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> BaseProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Search contract
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def search(self, query: SearchQuery) -> SearchResult:
        """Run one search and return normalized events.

        Raises UpstreamError when the provider answers with a failure status.
        """


# ------------------------------------------------------------------
# Registry
# ------------------------------------------------------------------

_registry: dict[str, type[BaseProvider]] = {}


def register(cls: type[BaseProvider]) -> type[BaseProvider]:
    """Class decorator that registers a provider by its *name*."""
    _registry[cls.name] = cls
    return cls


def get_providers() -> dict[str, type[BaseProvider]]:
    """Return a copy of the provider registry."""
    return dict(_registry)


def get_provider(name: str) -> type[BaseProvider]:
    """Look up a registered provider by name."""
    try:
        return _registry[name]
    except KeyError:
        raise KeyError(f"Unknown provider: {name!r}. Available: {list(_registry)}")
