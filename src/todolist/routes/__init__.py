"""API routes for the todo server."""

from fastapi import APIRouter

from todolist.routes.todos import router as todos_router

router = APIRouter()
router.include_router(todos_router)
