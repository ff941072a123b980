"""Todo routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from todolist.config import settings
from todolist.database import Pool
from todolist.models import Pagination, Todo, TodoCreate, TodoUpdate
from todolist.services import todos as todo_service

router = APIRouter(tags=["todos"])


def get_pagination(request: Request) -> Pagination:
    """Parse offset/limit, falling back to defaults if the query is unusable."""
    try:
        pagination = Pagination.model_validate(dict(request.query_params))
    except ValidationError:
        pagination = Pagination()

    if pagination.limit > settings.max_list_limit:
        pagination.limit = settings.max_list_limit
    return pagination


@router.get("/todos")
async def list_todos(
    pool: Pool,
    pagination: Annotated[Pagination, Depends(get_pagination)],
) -> list[Todo]:
    """List todos with offset/limit paging."""
    async with pool.connection() as conn:
        return await todo_service.list_todos(
            conn,
            offset=pagination.offset,
            limit=pagination.limit,
        )


@router.post("/todo/new", status_code=201)
async def create_todo(
    data: TodoCreate,
    pool: Pool,
) -> Todo:
    """Create a todo. The server assigns the id."""
    async with pool.connection() as conn:
        return await todo_service.create_todo(conn, data)


@router.post("/todo/update")
async def update_todo(
    data: TodoUpdate,
    pool: Pool,
) -> str:
    """Update description and/or completed; returns the id."""
    async with pool.connection() as conn:
        updated = await todo_service.update_todo(conn, data)
        if not updated:
            raise HTTPException(404, "Todo not found")
        return data.id


@router.post("/todo/delete/{todo_id}")
async def delete_todo(
    todo_id: str,
    pool: Pool,
) -> str:
    """Delete a todo; returns the id."""
    async with pool.connection() as conn:
        deleted = await todo_service.delete_todo(conn, todo_id)
        if not deleted:
            raise HTTPException(404, "Todo not found")
        return todo_id
