from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import CurrentUser
from models.todos import Todo as TodoModel
from routers.subjects import find_user_subject
from schemas.todos import Todo as TodoSchema, TodoCreate, TodoUpdate
from utils.responses import not_found

router = APIRouter(prefix="/todos", tags=["todos"])


def _todo_dict(todo: TodoModel) -> dict:
    payload = TodoSchema.model_validate(todo).model_dump(mode="json")
    payload["subject_name"] = todo.subject.name if todo.subject else None
    return payload


def _find_user_todo(db: Session, user_id: int, todo_id: int):
    return db.query(TodoModel).filter(TodoModel.id == todo_id, TodoModel.user_id == user_id).first()


# ✅ [READ] every todo of the user
@router.get("/")
def read_todos(user: CurrentUser, db: Session = Depends(get_db)):
    records = db.query(TodoModel).filter(TodoModel.user_id == user.id).all()
    return {"success": True, "data": [_todo_dict(r) for r in records]}


# ✅ [CREATE] add a todo
@router.post("/", status_code=201)
def create_todo(todo: TodoCreate, user: CurrentUser, db: Session = Depends(get_db)):
    if todo.subject_id is not None and find_user_subject(db, user.id, todo.subject_id) is None:
        return not_found("Subject not found", subject_id=todo.subject_id)

    db_todo = TodoModel(**todo.model_dump(), user_id=user.id)
    db.add(db_todo)
    db.commit()
    db.refresh(db_todo)
    return {"success": True, "data": _todo_dict(db_todo), "message": "Todo created successfully"}


# ✅ [READ] one todo
@router.get("/{todo_id}")
def read_todo(todo_id: int, user: CurrentUser, db: Session = Depends(get_db)):
    todo = _find_user_todo(db, user.id, todo_id)
    if todo is None:
        return not_found("Todo not found")
    return {"success": True, "data": _todo_dict(todo)}


# ✅ [UPDATE] edit / complete a todo
@router.put("/{todo_id}")
def update_todo(todo_id: int, updated: TodoUpdate, user: CurrentUser, db: Session = Depends(get_db)):
    todo = _find_user_todo(db, user.id, todo_id)
    if todo is None:
        return not_found("Todo not found")

    changes = updated.model_dump(exclude_unset=True)
    if changes.get("subject_id") is not None and find_user_subject(db, user.id, changes["subject_id"]) is None:
        return not_found("Subject not found", subject_id=changes["subject_id"])

    for key, value in changes.items():
        setattr(todo, key, value)

    db.commit()
    db.refresh(todo)
    return {"success": True, "data": _todo_dict(todo), "message": "Todo updated successfully"}


# ✅ [DELETE] remove a todo
@router.delete("/{todo_id}")
def delete_todo(todo_id: int, user: CurrentUser, db: Session = Depends(get_db)):
    todo = _find_user_todo(db, user.id, todo_id)
    if todo is None:
        return not_found("Todo not found")

    db.delete(todo)
    db.commit()
    return {"success": True, "data": {"todo_id": todo_id}, "message": "Todo deleted successfully"}
