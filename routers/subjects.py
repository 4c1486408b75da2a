from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, selectinload

from database.db import get_db
from dependencies.security import CurrentUser
from models.subjects import Subject as SubjectModel
from schemas.assessments import Assessment as AssessmentSchema
from schemas.subjects import Subject as SubjectSchema, SubjectCreate, SubjectUpdate
from utils.responses import not_found

router = APIRouter(prefix="/subjects", tags=["subjects"])


# ==========================================================
# [Common] ownership lookup (shared with assessments / todos / grades)
# ==========================================================
def find_user_subject(db: Session, user_id: int, subject_id: int) -> Optional[SubjectModel]:
    return (
        db.query(SubjectModel)
        .filter(SubjectModel.id == subject_id, SubjectModel.user_id == user_id)
        .first()
    )


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _subject_dict(subject: SubjectModel) -> dict:
    return SubjectSchema.model_validate(subject).model_dump(mode="json")


# ==========================================================
# CRUD
# ==========================================================

# ✅ [READ] every subject of the user, each with its assessments (latest first)
@router.get("/")
def read_subjects(user: CurrentUser, db: Session = Depends(get_db)):
    subjects = (
        db.query(SubjectModel)
        .options(selectinload(SubjectModel.assessments))
        .filter(SubjectModel.user_id == user.id)
        .all()
    )
    if not subjects:
        return {"success": True, "data": [], "message": "No subjects found"}

    data = [
        {
            **_subject_dict(subject),
            "assessments": [AssessmentSchema.model_validate(a).model_dump(mode="json") for a in subject.assessments],
        }
        for subject in subjects
    ]
    return {"success": True, "data": data, "message": "All subjects"}


# ✅ [CREATE] add a subject
@router.post("/", status_code=201)
def create_subject(subject: SubjectCreate, user: CurrentUser, db: Session = Depends(get_db)):
    db_subject = SubjectModel(**subject.model_dump(), user_id=user.id)
    db.add(db_subject)
    db.commit()
    db.refresh(db_subject)
    return {
        "success": True,
        "data": _subject_dict(db_subject),
        "message": "Subject created successfully",
    }


# ✅ [READ] search subjects by (partial) name
@router.get("/{subject_name}")
def search_subjects(subject_name: str, user: CurrentUser, db: Session = Depends(get_db)):
    subjects = (
        db.query(SubjectModel)
        .filter(SubjectModel.user_id == user.id, SubjectModel.name.like(f"%{_escape_like(subject_name)}%", escape="\\"))
        .all()
    )
    if not subjects:
        return not_found("Subject not found")
    return {"success": True, "data": [_subject_dict(s) for s in subjects]}


# ✅ [UPDATE] edit a subject
@router.put("/{subject_id}")
def update_subject(subject_id: int, updated: SubjectUpdate, user: CurrentUser, db: Session = Depends(get_db)):
    subject = find_user_subject(db, user.id, subject_id)
    if subject is None:
        return not_found("Subject not found")

    for key, value in updated.model_dump(exclude_unset=True).items():
        setattr(subject, key, value)

    db.commit()
    db.refresh(subject)
    return {
        "success": True,
        "data": _subject_dict(subject),
        "message": "Subject updated successfully",
    }


# ✅ [DELETE] remove a subject (its assessments / todos cascade)
@router.delete("/{subject_id}")
def delete_subject(subject_id: int, user: CurrentUser, db: Session = Depends(get_db)):
    subject = find_user_subject(db, user.id, subject_id)
    if subject is None:
        return not_found("Subject not found")

    db.delete(subject)
    db.commit()
    return {
        "success": True,
        "data": {"subject_id": subject_id},
        "message": "Subject deleted successfully",
    }
