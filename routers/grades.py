from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from database.db import get_db
from dependencies.security import CurrentUser
from models.assessments import Assessment as AssessmentModel
from models.subjects import Subject as SubjectModel
from routers.assessments import assessment_dict
from routers.subjects import find_user_subject
from services.grading.aggregator import AssessmentRecord
from services.grading.enums import ActivityType, Quarter
from services.grading.formatting import (
    activity_payload,
    quarter_report_payload,
    scope_report_payload,
    subject_term_payload,
    term_report_payload,
)
from services.grading.reports import (
    SubjectRef,
    build_quarter_report,
    build_scope_report,
    build_subject_term_report,
    build_term_report,
)
from services.grading.transmutation import DEFAULT_TRANSMUTATION, TransmutationTable
from utils.responses import not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/grades", tags=["grades"])


# ==========================================================
# [Common] grading scale + record loading
# ==========================================================
def get_transmutation_table() -> TransmutationTable:
    return DEFAULT_TRANSMUTATION


def _load_records(db: Session, user_id: int, quarter: Optional[Quarter] = None, subject_id: Optional[int] = None):
    query = db.query(AssessmentModel).filter(AssessmentModel.user_id == user_id)
    if quarter is not None:
        query = query.filter(AssessmentModel.type_quarter == quarter.value)
    if subject_id is not None:
        query = query.filter(AssessmentModel.subject_id == subject_id)
    return [AssessmentRecord.model_validate(row) for row in query.all()]


def _load_subjects(db: Session, user_id: int):
    rows = db.query(SubjectModel).filter(SubjectModel.user_id == user_id).order_by(SubjectModel.id).all()
    return [SubjectRef.model_validate(row) for row in rows]


# ==========================================================
# [1] every subject, every quarter
# ==========================================================
@router.get("/all-quarters")
def get_overall_grades_all_quarters(
    user: CurrentUser,
    db: Session = Depends(get_db),
    table: TransmutationTable = Depends(get_transmutation_table),
):
    subjects = _load_subjects(db, user.id)
    if not subjects:
        return {"message": "No subjects found", "subjects": {}, "overall_average": None}

    report = build_term_report(subjects, _load_records(db, user.id), table)
    return term_report_payload(report)


# ==========================================================
# [2] one subject, every quarter
# ==========================================================
@router.get("/subjects/{subject_id}/all-quarters")
def get_subject_grades_all_quarters(
    subject_id: int,
    user: CurrentUser,
    db: Session = Depends(get_db),
    table: TransmutationTable = Depends(get_transmutation_table),
):
    subject = find_user_subject(db, user.id, subject_id)
    if subject is None:
        return not_found(
            "Subject not found for the current user.",
            subject_id=subject_id, quarters=[], subject_final_average=None,
        )

    report = build_subject_term_report(
        SubjectRef.model_validate(subject), _load_records(db, user.id, subject_id=subject_id), table
    )
    return subject_term_payload(report)


# ==========================================================
# [3] every subject, one quarter
# ==========================================================
@router.get("/{quarter}")
def get_quarter_grades(
    quarter: Quarter,
    user: CurrentUser,
    db: Session = Depends(get_db),
    table: TransmutationTable = Depends(get_transmutation_table),
):
    report = build_quarter_report(_load_subjects(db, user.id), _load_records(db, user.id, quarter=quarter), quarter, table)
    return quarter_report_payload(report)


# ==========================================================
# [4] one subject, one quarter
# ==========================================================
@router.get("/{quarter}/subjects/{subject_id}")
def get_scope_grades(
    quarter: Quarter,
    subject_id: int,
    user: CurrentUser,
    db: Session = Depends(get_db),
    table: TransmutationTable = Depends(get_transmutation_table),
):
    if find_user_subject(db, user.id, subject_id) is None:
        return not_found("Subject not found", subject_id=subject_id, quarter=quarter.value)

    records = _load_records(db, user.id, quarter=quarter, subject_id=subject_id)
    return scope_report_payload(build_scope_report(records, subject_id, quarter, table))


# ✅ [READ] one activity's f2f / online breakdown
@router.get("/{quarter}/subjects/{subject_id}/activities/{activity}")
def get_activity_grades(
    quarter: Quarter,
    subject_id: int,
    activity: ActivityType,
    user: CurrentUser,
    db: Session = Depends(get_db),
    table: TransmutationTable = Depends(get_transmutation_table),
):
    if find_user_subject(db, user.id, subject_id) is None:
        return not_found("Subject not found", subject_id=subject_id, quarter=quarter.value)

    records = _load_records(db, user.id, quarter=quarter, subject_id=subject_id)
    report = build_scope_report(records, subject_id, quarter, table)
    return {"activity": activity.value, **activity_payload(report.activities[activity])}


# ✅ [READ] raw records behind a scope report
@router.get("/{quarter}/subjects/{subject_id}/records")
def get_scope_records(quarter: Quarter, subject_id: int, user: CurrentUser, db: Session = Depends(get_db)):
    rows = (
        db.query(AssessmentModel)
        .filter(
            AssessmentModel.user_id == user.id,
            AssessmentModel.type_quarter == quarter.value,
            AssessmentModel.subject_id == subject_id,
        )
        .all()
    )
    if not rows:
        return not_found(
            "No activities found for the specified quarter and subject.",
            quarter=quarter.value, subject_id=subject_id, data=[],
        )
    return {"success": True, "data": [assessment_dict(r) for r in rows]}
