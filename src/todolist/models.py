"""Models for the todo API."""

from pydantic import BaseModel

__all__ = [
    "Todo",
    "TodoCreate",
    "TodoUpdate",
    "Pagination",
]


# =============================================================================
# API Input Models
# =============================================================================


class TodoCreate(BaseModel):
    """Input for POST /todo/new."""

    description: str


class TodoUpdate(BaseModel):
    """Input for POST /todo/update.

    Fields left as None are not changed.
    """

    id: str
    description: str | None = None
    completed: bool | None = None


class Pagination(BaseModel):
    """Query parameters for GET /todos."""

    offset: int = 0
    limit: int = 100


# =============================================================================
# Database Models
# =============================================================================


class Todo(BaseModel):
    """A todo row."""

    id: str
    description: str
    completed: bool = False
