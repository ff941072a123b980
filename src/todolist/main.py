"""Todo List Server - FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from psycopg import Error as DatabaseError

from todolist import __version__
from todolist.config import settings
from todolist.database import create_pool
from todolist.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage server lifecycle."""
    # Initialize database pool
    app.state.pool = create_pool(settings)
    await app.state.pool.open(wait=True, timeout=10)
    logger.info("Database pool initialized (max_size=%d)", settings.pool_max_size)

    yield

    # Cleanup
    await app.state.pool.close()
    logger.info("Server shutdown complete")


app = FastAPI(
    title="Todo List Server",
    description="Create, list, update and delete todos stored in PostgreSQL",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(router)


@app.exception_handler(DatabaseError)
async def database_error_handler(request: Request, exc: DatabaseError) -> PlainTextResponse:
    """Report pool and query failures as 500 with the driver's message."""
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=500)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Console entry point: configure logging and serve with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
