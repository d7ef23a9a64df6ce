"""Presentation client for the Kantodex API."""

from kantodex.client.api import PokedexClient
from kantodex.client.controller import DexController
from kantodex.client.state import DexState

__all__ = ["PokedexClient", "DexController", "DexState"]
