from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from database.db import get_db
from dependencies.security import CurrentUser
from models.assessments import Assessment as AssessmentModel
from routers.subjects import find_user_subject
from schemas.assessments import AssessmentCreate, AssessmentUpdate, AssessmentWithSubject
from services.grading.enums import Quarter
from utils.responses import not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessments", tags=["assessments"])


def assessment_dict(assessment: AssessmentModel) -> dict:
    payload = AssessmentWithSubject.model_validate(assessment).model_dump(mode="json")
    payload["subject_name"] = assessment.subject.name if assessment.subject else None
    return payload


def _find_user_assessment(db: Session, user_id: int, assessment_id: int):
    return (
        db.query(AssessmentModel)
        .filter(AssessmentModel.id == assessment_id, AssessmentModel.user_id == user_id)
        .first()
    )


# ✅ [READ] every assessment of the user
@router.get("/")
def read_assessments(user: CurrentUser, db: Session = Depends(get_db)):
    records = db.query(AssessmentModel).filter(AssessmentModel.user_id == user.id).all()
    return {"success": True, "data": [assessment_dict(r) for r in records]}


# ✅ [CREATE] record a score
@router.post("/", status_code=201)
def create_assessment(assessment: AssessmentCreate, user: CurrentUser, db: Session = Depends(get_db)):
    if find_user_subject(db, user.id, assessment.subject_id) is None:
        return not_found("Subject not found", subject_id=assessment.subject_id)

    db_assessment = AssessmentModel(
        **assessment.model_dump(mode="json", exclude={"date_taken"}),
        date_taken=assessment.date_taken,
        user_id=user.id,
    )
    db.add(db_assessment)
    db.commit()
    db.refresh(db_assessment)
    logger.info(
        "Assessment %s created: subject=%s quarter=%s activity=%s mode=%s",
        db_assessment.id, db_assessment.subject_id, db_assessment.type_quarter,
        db_assessment.type_activity, db_assessment.mode,
    )
    return {
        "success": True,
        "data": assessment_dict(db_assessment),
        "message": "Assessment created successfully",
    }


# ✅ [READ] every assessment of one quarter
@router.get("/{quarter}")
def read_quarter_assessments(quarter: Quarter, user: CurrentUser, db: Session = Depends(get_db)):
    records = (
        db.query(AssessmentModel)
        .filter(AssessmentModel.user_id == user.id, AssessmentModel.type_quarter == quarter.value)
        .all()
    )
    if not records:
        return not_found("No assessments found")
    return {"success": True, "data": [assessment_dict(r) for r in records]}


# ✅ [UPDATE] edit a score
@router.put("/{assessment_id}")
def update_assessment(assessment_id: int, updated: AssessmentUpdate, user: CurrentUser, db: Session = Depends(get_db)):
    assessment = _find_user_assessment(db, user.id, assessment_id)
    if assessment is None:
        return not_found("Assessment not found")

    for key, value in updated.model_dump(exclude_unset=True).items():
        # enum members are stored by value
        setattr(assessment, key, getattr(value, "value", value))

    db.commit()
    db.refresh(assessment)
    return {
        "success": True,
        "data": assessment_dict(assessment),
        "message": "Assessment updated successfully",
    }


# ✅ [DELETE] remove a score
@router.delete("/{assessment_id}")
def delete_assessment(assessment_id: int, user: CurrentUser, db: Session = Depends(get_db)):
    assessment = _find_user_assessment(db, user.id, assessment_id)
    if assessment is None:
        return not_found("Assessment not found")

    db.delete(assessment)
    db.commit()
    return {
        "success": True,
        "data": {"assessment_id": assessment_id},
        "message": "Assessment deleted successfully",
    }
