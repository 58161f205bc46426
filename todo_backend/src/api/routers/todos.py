from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status

from ..errors import NotFoundError
from ..models import TodoEntity
from ..repositories import Repository
from ..schemas import TodoCompletionUpdate, TodoCreate, TodoOut
from ..utils import new_todo_id, utc_timestamp

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)


# PUBLIC_INTERFACE
def get_repository(request: Request) -> Repository:
    """
    Dependency returning the repository injected into the running app.
    """
    return request.app.state.repository


def _require(repo: Repository, todo_id: str) -> TodoEntity:
    item = repo.get_by_id(todo_id)
    if item is None:
        raise NotFoundError("Todo not found")
    return item


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="List every todo, newest first. An empty store returns an empty array.",
    responses={
        200: {"description": "List retrieved successfully"},
    },
)
def list_todos(repo: Repository = Depends(get_repository)) -> List[TodoOut]:
    """
    List all todos ordered by creation time, descending.
    """
    return [TodoOut(**it) for it in repo.list_all()]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item. The text is trimmed; id and createdAt are assigned by the server.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"description": "Missing, non-string or blank text"},
    },
)
def create_todo(payload: TodoCreate, repo: Repository = Depends(get_repository)) -> TodoOut:
    """
    Create a new Todo.
    """
    created = repo.insert(new_todo_id(), payload.text, utc_timestamp())
    logger.info("Created todo %s", created["id"])
    return TodoOut(**created)


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"description": "Todo not found"},
    },
)
def get_todo(todo_id: str, repo: Repository = Depends(get_repository)) -> TodoOut:
    """
    Retrieve a single Todo item by its ID.
    """
    return TodoOut(**_require(repo, todo_id))


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description="Set the completion flag of a Todo item. No other field can change.",
    responses={
        200: {"description": "Todo updated"},
        400: {"description": "completed is not a boolean"},
        404: {"description": "Todo not found"},
    },
)
def patch_todo(
    todo_id: str,
    payload: TodoCompletionUpdate,
    repo: Repository = Depends(get_repository),
) -> TodoOut:
    """
    Update the completed flag. The body has already been validated here, so a
    malformed body on an unknown id is reported as 400 rather than 404.
    """
    _require(repo, todo_id)
    repo.update_completed(todo_id, payload.completed)
    return TodoOut(**_require(repo, todo_id))


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        204: {"description": "Todo deleted"},
        404: {"description": "Todo not found"},
    },
)
def delete_todo(todo_id: str, repo: Repository = Depends(get_repository)) -> None:
    """
    Delete a Todo. Returns 204 on success, 404 if not found.
    """
    _require(repo, todo_id)
    repo.delete_by_id(todo_id)
    logger.info("Deleted todo %s", todo_id)
    return None
