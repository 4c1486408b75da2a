from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date

from services.grading.enums import ActivityType, Mode, Quarter

# ✅ input: POST /assessments
class AssessmentCreate(BaseModel):
    subject_id: int
    name_assessment: str = Field(..., max_length=255)
    type_quarter: Quarter
    type_activity: ActivityType
    mode: Mode
    score: float = Field(..., ge=0)                      # score > total_items is accepted
    total_items: float = Field(..., ge=0)                # 0 is allowed (no items)
    date_taken: Optional[date] = None

# ✅ input: PUT /assessments/{id}
class AssessmentUpdate(BaseModel):
    name_assessment: Optional[str] = Field(default=None, max_length=255)
    type_quarter: Optional[Quarter] = None
    type_activity: Optional[ActivityType] = None
    mode: Optional[Mode] = None
    score: Optional[float] = Field(default=None, ge=0)
    total_items: Optional[float] = Field(default=None, ge=0)
    date_taken: Optional[date] = None

# ✅ output
class Assessment(BaseModel):
    id: int
    subject_id: int
    name_assessment: str
    type_quarter: Quarter
    type_activity: ActivityType
    mode: Mode
    score: float
    total_items: float
    date_taken: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)

# ✅ output with the parent subject attached (GET /assessments)
class AssessmentWithSubject(Assessment):
    subject_name: Optional[str] = None
