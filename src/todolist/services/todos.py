"""Todo service - one SQL statement per operation."""

import logging
from uuid import uuid4

from psycopg import AsyncConnection

from todolist.models import Todo, TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)


async def create_todo(
    conn: AsyncConnection,
    data: TodoCreate,
) -> Todo:
    """Insert a new, uncompleted todo with a random hex id."""
    todo = Todo(
        id=uuid4().hex,
        description=data.description,
        completed=False,
    )

    await conn.execute(
        """
        INSERT INTO todo (id, description, completed)
        VALUES (%s, %s, %s)
        """,
        (todo.id, todo.description, todo.completed),
    )
    return todo


async def list_todos(
    conn: AsyncConnection,
    *,
    offset: int = 0,
    limit: int = 100,
) -> list[Todo]:
    """List todos in result-set order."""
    row = await conn.execute(
        "SELECT id, description, completed FROM todo OFFSET %s LIMIT %s",
        (offset, limit),
    )
    results = await row.fetchall()
    logger.debug("Fetched %d todos (offset=%d, limit=%d)", len(results), offset, limit)

    return [_row_to_todo(r) for r in results]


async def update_todo(
    conn: AsyncConnection,
    data: TodoUpdate,
) -> bool:
    """Apply the supplied fields to a todo.

    Returns False if no todo has the given id.
    """
    row = await conn.execute(
        """
        UPDATE todo
        SET description = COALESCE(%s, description),
            completed = COALESCE(%s, completed)
        WHERE id = %s
        """,
        (data.description, data.completed, data.id),
    )
    return row.rowcount > 0


async def delete_todo(
    conn: AsyncConnection,
    todo_id: str,
) -> bool:
    """Delete a todo. Returns False if it did not exist."""
    row = await conn.execute(
        "DELETE FROM todo WHERE id = %s",
        (todo_id,),
    )
    return row.rowcount > 0


def _row_to_todo(row: tuple) -> Todo:
    """Convert a database row to a Todo model."""
    return Todo(
        id=row[0],
        description=row[1],
        completed=row[2],
    )
