from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# ✅ input: POST /subjects
class SubjectCreate(BaseModel):
    name: str = Field(..., max_length=50)                 # subject name
    color: Optional[str] = Field(default=None, max_length=50)
    target_grade: Optional[float] = Field(default=None, ge=1.0, le=5.0)

# ✅ input: PUT /subjects/{id} (every field optional)
class SubjectUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=50)
    color: Optional[str] = Field(default=None, max_length=50)
    target_grade: Optional[float] = Field(default=None, ge=1.0, le=5.0)

# ✅ output
class Subject(BaseModel):
    id: int
    name: str
    color: Optional[str] = None
    target_grade: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)
