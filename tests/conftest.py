"""Shared fixtures: in-memory database, seeded Pokemon, API clients."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from kantodex.api import create_app
from kantodex.api.dependencies import get_catalog_client
from kantodex.core.pokedex import create_pokemon, ensure_types
from kantodex.database import get_session
from kantodex.database.models import Base

SPRITE = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/{}.png"

SAMPLE_POKEMON = [
    # number, name, types, seen, caught
    (1, "bulbasaur", ["grass", "poison"], False, False),
    (4, "charmander", ["fire"], True, False),
    (25, "pikachu", ["electric"], True, False),
    (145, "zapdos", ["electric", "flying"], True, True),
]


def pokeapi_payload(number: int, name: str, types: list[str]) -> dict:
    """Minimal PokeAPI /pokemon/{id} response."""
    return {
        "id": number,
        "name": name,
        "sprites": {"front_default": SPRITE.format(number)},
        "types": [
            {"slot": slot, "type": {"name": t, "url": f"https://pokeapi.co/api/v2/type/{t}/"}}
            for slot, t in enumerate(types, start=1)
        ],
    }


@pytest.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        await ensure_types(session)
        yield session


@pytest.fixture
async def seeded(session):
    """Session with SAMPLE_POKEMON stored."""
    for number, name, types, seen, caught in SAMPLE_POKEMON:
        await create_pokemon(
            session,
            number=number,
            name=name,
            image_url=SPRITE.format(number),
            type_names=types,
            seen=seen,
            caught=caught,
        )
    return session


def catalog_handler(request: httpx.Request) -> httpx.Response:
    """Fake PokeAPI: knows a few numbers, fails on #13, 404 otherwise."""
    known = {
        7: ("squirtle", ["water"]),
        16: ("pidgey", ["normal", "flying"]),
        25: ("pikachu", ["electric"]),
    }
    number = int(request.url.path.rstrip("/").split("/")[-1])
    if number == 13:
        raise httpx.ConnectError("connection refused", request=request)
    if number in known:
        name, types = known[number]
        return httpx.Response(200, json=pokeapi_payload(number, name, types))
    return httpx.Response(404, text="Not Found")


@pytest.fixture
async def catalog_client():
    async with httpx.AsyncClient(
        base_url="https://pokeapi.test/api/v2",
        transport=httpx.MockTransport(catalog_handler),
    ) as client:
        yield client


@pytest.fixture
async def app(seeded, session_factory, catalog_client):
    application = create_app()

    async def override_session():
        async with session_factory() as s:
            yield s

    application.dependency_overrides[get_session] = override_session
    application.dependency_overrides[get_catalog_client] = lambda: catalog_client
    return application


@pytest.fixture
async def api(app):
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
