"""Tests for the PokeAPI catalog client and sync loop."""

import httpx
import pytest

from kantodex.core import pokedex
from kantodex.core.catalog import (
    CatalogFetchError,
    fetch_catalog_entry,
    import_pokemon,
    parse_catalog_entry,
    sync_catalog,
)
from tests.conftest import pokeapi_payload


def test_parse_orders_types_by_slot():
    payload = pokeapi_payload(16, "pidgey", ["normal", "flying"])
    payload["types"].reverse()
    entry = parse_catalog_entry(payload)
    assert entry.number == 16
    assert entry.name == "pidgey"
    assert entry.type_names == ["normal", "flying"]
    assert entry.image_url.endswith("/16.png")


def test_parse_missing_sprite():
    payload = pokeapi_payload(7, "squirtle", ["water"])
    payload["sprites"]["front_default"] = None
    assert parse_catalog_entry(payload).image_url is None


async def test_fetch_entry(catalog_client):
    entry = await fetch_catalog_entry(catalog_client, 7)
    assert (entry.number, entry.name, entry.type_names) == (7, "squirtle", ["water"])


async def test_fetch_non_success(catalog_client):
    with pytest.raises(CatalogFetchError, match="HTTP 404") as exc_info:
        await fetch_catalog_entry(catalog_client, 150)
    assert exc_info.value.number == 150


async def test_fetch_network_error(catalog_client):
    with pytest.raises(CatalogFetchError):
        await fetch_catalog_entry(catalog_client, 13)


async def test_fetch_malformed_payload():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"id": 1}))
    async with httpx.AsyncClient(base_url="https://pokeapi.test", transport=transport) as client:
        with pytest.raises(CatalogFetchError, match="malformed"):
            await fetch_catalog_entry(client, 1)


async def test_import_pokemon(session, catalog_client):
    pokemon = await import_pokemon(session, catalog_client, 16)
    assert pokemon.name == "pidgey"
    assert pokemon.type_names == ["normal", "flying"]
    assert (pokemon.seen, pokemon.caught) == (False, False)


async def test_import_existing(seeded, catalog_client):
    with pytest.raises(pokedex.PokemonAlreadyExists):
        await import_pokemon(seeded, catalog_client, 25)


async def test_sync_fills_gaps_and_skips_failures(seeded, catalog_client):
    await pokedex.update_pokemon(seeded, 25, seen=True, caught=True)

    result = await sync_catalog(seeded, catalog_client, dex_size=30)

    assert result.added == [7, 16]
    assert result.skipped == [1, 4, 25]
    assert 13 in result.failed
    assert len(result.added) + len(result.skipped) + len(result.failed) == 30

    # Existing rows are left alone
    pikachu = await pokedex.get_pokemon(seeded, 25)
    assert (pikachu.seen, pikachu.caught) == (True, True)


async def test_sync_rerun_only_skips(session, catalog_client):
    first = await sync_catalog(session, catalog_client, dex_size=20)
    second = await sync_catalog(session, catalog_client, dex_size=20)

    assert first.added == [7, 16]
    assert second.added == []
    assert second.skipped == [7, 16]


async def test_sync_looks_up_each_number_once(session, catalog_client, monkeypatch):
    calls = []
    original = pokedex.get_pokemon

    async def counting_get_pokemon(session, number):
        calls.append(number)
        return await original(session, number)

    monkeypatch.setattr("kantodex.core.catalog.get_pokemon", counting_get_pokemon)
    monkeypatch.setattr("kantodex.core.pokedex.get_pokemon", counting_get_pokemon)

    result = await sync_catalog(session, catalog_client, dex_size=20)

    assert result.added == [7, 16]
    assert calls == list(range(1, 21))


async def test_import_with_mismatched_id_still_checks(seeded):
    # Catalog answers #200 with Pikachu's data, which is already stored
    def handler(request):
        return httpx.Response(200, json=pokeapi_payload(25, "pikachu", ["electric"]))

    async with httpx.AsyncClient(
        base_url="https://pokeapi.test", transport=httpx.MockTransport(handler)
    ) as client:
        with pytest.raises(pokedex.PokemonAlreadyExists):
            await import_pokemon(seeded, client, 200)
