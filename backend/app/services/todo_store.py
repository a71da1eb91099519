"""
Todo Store

Thin data-access object over a SQLAlchemy session. Each method is one
persistence call; failures surface as tagged ``AppError`` subclasses.
"""

import logging
from typing import Any

from fastapi import Depends
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.todo import Todo
from ..utils.error_handlers import (
    NotFoundError,
    StoreUnavailableError,
    get_error_message,
    handle_database_error,
)
from ..utils.validation import validate_string_field

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("title", "is_completed")


class TodoStore:
    def __init__(self, db: Session):
        self.db = db

    def find_many(self) -> list[Todo]:
        """All todos, oldest first. Database errors propagate to the app handlers."""
        return self.db.query(Todo).order_by(Todo.id.asc()).all()

    def find_one(self, todo_id: int) -> Todo:
        try:
            todo = self.db.get(Todo, todo_id)
        except OperationalError as e:
            raise StoreUnavailableError(get_error_message("database_error")) from e
        if todo is None:
            raise NotFoundError(get_error_message("todo_not_found"), details={"id": todo_id})
        return todo

    def create(self, title: Any, is_completed: Any = False) -> Todo:
        validate_string_field(title, "title", min_length=0, max_length=None)
        todo = Todo(title=title, is_completed=is_completed)
        try:
            self.db.add(todo)
            self.db.commit()
            self.db.refresh(todo)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise handle_database_error(e, "creating todo") from e

        logger.info("Created todo id=%s", todo.id)
        return todo

    def update(self, todo_id: int, data: dict[str, Any]) -> Todo:
        """Apply ``data`` to the todo; keys not present are left unchanged."""
        if "title" in data:
            validate_string_field(data["title"], "title", min_length=0, max_length=None)

        todo = self.find_one(todo_id)
        for field in _UPDATABLE_FIELDS:
            if field in data:
                setattr(todo, field, data[field])
        try:
            self.db.commit()
            self.db.refresh(todo)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise handle_database_error(e, f"updating todo {todo_id}") from e

        logger.info("Updated todo id=%s", todo_id)
        return todo

    def delete(self, todo_id: int) -> dict[str, Any]:
        """Delete the todo and return its pre-deletion snapshot."""
        todo = self.find_one(todo_id)
        snapshot = todo.to_dict()
        try:
            self.db.delete(todo)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise handle_database_error(e, f"deleting todo {todo_id}") from e

        logger.info("Deleted todo id=%s", todo_id)
        return snapshot


def get_todo_store(db: Session = Depends(get_db)) -> TodoStore:
    return TodoStore(db)
