"""Route registration."""

from fastapi import FastAPI

from kantodex.api.routes import health, pokemon


def register_all_routes(app: FastAPI) -> None:
    """Include all routers in the app."""
    app.include_router(health.router)
    app.include_router(pokemon.router)


__all__ = ["register_all_routes"]
