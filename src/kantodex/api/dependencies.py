"""FastAPI dependencies."""

from typing import Annotated

import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from kantodex.database import get_session


def get_catalog_client(request: Request) -> httpx.AsyncClient:
    """PokeAPI client opened in the app lifespan."""
    return request.app.state.catalog_client


SessionDep = Annotated[AsyncSession, Depends(get_session)]
CatalogClientDep = Annotated[httpx.AsyncClient, Depends(get_catalog_client)]
