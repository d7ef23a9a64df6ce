"""HTTP client for the Kantodex API."""

from types import TracebackType

import httpx

from kantodex.config import settings
from kantodex.schemas import PokemonOut


class PokedexClient:
    """Async wrapper around the ``/pokemon`` endpoints.

    Errors surface as ``httpx.HTTPError`` (including
    ``httpx.HTTPStatusError`` for non-2xx responses).
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=settings.http_timeout_seconds if timeout is None else timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "PokedexClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def fetch_all(self) -> list[PokemonOut]:
        response = await self._client.get("/pokemon")
        response.raise_for_status()
        return [PokemonOut.model_validate(item) for item in response.json()]

    async def fetch_one(self, number: int) -> PokemonOut | None:
        """Get one Pokemon, or None when the server has no such number."""
        response = await self._client.get(f"/pokemon/{number}")
        response.raise_for_status()
        data = response.json()
        if not data:
            return None
        return PokemonOut.model_validate(data)

    async def update(
        self, number: int, *, seen: bool | None = None, caught: bool | None = None
    ) -> PokemonOut:
        body = {}
        if seen is not None:
            body["seen"] = seen
        if caught is not None:
            body["caught"] = caught

        response = await self._client.patch(f"/pokemon/{number}", json=body)
        response.raise_for_status()
        return PokemonOut.model_validate(response.json())

    async def reset(self) -> list[PokemonOut]:
        response = await self._client.post("/pokemon/reset")
        response.raise_for_status()
        return [PokemonOut.model_validate(item) for item in response.json()]
