"""Database connection pool management."""

from typing import Annotated, Any

from fastapi import Depends, Request
from psycopg_pool import AsyncConnectionPool

from todolist.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool[Any]:
    """Build an unopened connection pool from settings."""
    return AsyncConnectionPool(
        settings.database_url,
        open=False,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        timeout=settings.pool_timeout,
    )


def get_pool(request: Request) -> AsyncConnectionPool[Any]:
    """Get the connection pool from app state."""
    return request.app.state.pool


Pool = Annotated[AsyncConnectionPool[Any], Depends(get_pool)]
