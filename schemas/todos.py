from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
from datetime import date

Priority = Literal["low", "medium", "high"]

# ✅ input: POST /todos
class TodoCreate(BaseModel):
    subject_id: Optional[int] = None
    title: str = Field(..., max_length=255)
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Priority = "medium"
    completed: bool = False

# ✅ input: PUT /todos/{id}
class TodoUpdate(BaseModel):
    subject_id: Optional[int] = None
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None

# ✅ output
class Todo(BaseModel):
    id: int
    subject_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Priority
    completed: bool

    model_config = ConfigDict(from_attributes=True)
