
from fastapi import APIRouter, Depends

from ..schemas.todo import TodoCreate, TodoOut, TodoUpdate
from ..services.todo_store import TodoStore, get_todo_store
from ..utils.validation import parse_todo_id

router = APIRouter(tags=["Todos"])


@router.get("/allTodos", response_model=list[TodoOut])
def all_todos(store: TodoStore = Depends(get_todo_store)):
    return store.find_many()


@router.post("/createTodo", response_model=TodoOut)
def create_todo(payload: TodoCreate, store: TodoStore = Depends(get_todo_store)):
    return store.create(title=payload.title, is_completed=payload.is_completed)


@router.put("/editTodo/{todo_id}", response_model=TodoOut)
def edit_todo(todo_id: str, payload: TodoUpdate, store: TodoStore = Depends(get_todo_store)):
    tid = parse_todo_id(todo_id)
    return store.update(tid, payload.model_dump(exclude_unset=True))


@router.delete("/deleteTodo/{todo_id}", response_model=TodoOut)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_todo_store)):
    tid = parse_todo_id(todo_id)
    return store.delete(tid)
