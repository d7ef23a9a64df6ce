"""User actions: pick the next status, persist it, merge the result."""

import httpx

from kantodex.client.api import PokedexClient
from kantodex.client.state import DexState
from kantodex.core.lifecycle import DexStatus, LifecyclePolicy
from kantodex.logging import get_logger

logger = get_logger(__name__)


class DexController:
    """Drives a ``DexState`` through a ``PokedexClient``.

    Failed requests are logged and leave the state untouched. Operations
    the policy does not expose raise ``UnsupportedTransition``.
    """

    def __init__(self, client: PokedexClient, state: DexState, policy: LifecyclePolicy):
        self.client = client
        self.state = state
        self.policy = policy

    async def load(self) -> bool:
        try:
            pokemon = await self.client.fetch_all()
        except httpx.HTTPError as e:
            logger.error("Error fetching Pokemon", error=str(e))
            return False

        self.state.replace_all(pokemon)
        logger.debug("Loaded Pokemon", count=len(pokemon))
        return True

    async def toggle_seen(self, number: int) -> bool:
        return await self._transition(number, "toggle_seen")

    async def toggle_caught(self, number: int) -> bool:
        return await self._transition(number, "toggle_caught")

    async def advance(self, number: int) -> bool:
        return await self._transition(number, "advance")

    async def reset(self) -> bool:
        try:
            pokemon = await self.client.reset()
        except httpx.HTTPError as e:
            logger.error("Error resetting Pokemon", error=str(e))
            return False

        self.state.replace_all(pokemon)
        logger.info("Reset Pokedex", count=len(pokemon))
        return True

    async def _transition(self, number: int, operation: str) -> bool:
        current = self.state.get(number)
        if current is None:
            logger.warning("Pokemon not loaded", number=number, operation=operation)
            return False

        target = self.policy.apply_flags(operation, current.seen, current.caught)

        try:
            updated = await self.client.update(number, **target)
        except httpx.HTTPError as e:
            logger.error(
                "Error updating Pokemon",
                number=number,
                operation=operation,
                error=str(e),
            )
            return False

        self.state.merge(updated)
        logger.debug(
            "Pokemon updated",
            number=number,
            operation=operation,
            status=DexStatus.from_flags(updated.seen, updated.caught).value,
        )
        return True
