"""
services/grading/reports.py

Report builders of the grade engine. Everything here is pure: records in, frozen
report objects out. No I/O, no shared state, never raises on empty input.

Hierarchy
  1) build_scope_report         one subject, one quarter
  2) build_quarter_report       every subject, one quarter        (fan-out over 1)
  3) build_subject_term_report  one subject, every quarter        (fan-out over 1)
  4) build_term_report          every subject, every quarter      (fan-out over 3)

Averages at levels 2-4 only count scopes that actually have a grade; ungraded
subjects / quarters are left out of the denominator instead of counting as 5.00.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from services.grading.aggregator import ActivityAggregate, AssessmentRecord, aggregate_activities
from services.grading.enums import ACTIVITIES, QUARTERS, ActivityType, Quarter, Status
from services.grading.transmutation import DEFAULT_TRANSMUTATION, TransmutationTable

logger = logging.getLogger(__name__)

F2F_WEIGHT = 0.60
ONLINE_WEIGHT = 0.40


# =========================================================
# Value types
# =========================================================

class GradeResult(BaseModel):
    """raw_score / final_grade are both None when the scope has no data."""
    raw_score: Optional[float] = None
    final_grade: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class ScopeReport(BaseModel):
    subject_id: int
    quarter: Quarter
    activities: Dict[ActivityType, ActivityAggregate]
    has_data: bool
    avg_f2f_percent: Optional[float] = None
    avg_online_percent: Optional[float] = None
    f2f: GradeResult = GradeResult()
    online: GradeResult = GradeResult()
    overall: GradeResult = GradeResult()

    model_config = ConfigDict(frozen=True)


class SubjectRef(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(frozen=True, from_attributes=True)


class SubjectQuarterEntry(BaseModel):
    subject: SubjectRef
    report: ScopeReport
    status: Status

    model_config = ConfigDict(frozen=True)


class QuarterReport(BaseModel):
    quarter: Quarter
    subjects: Tuple[SubjectQuarterEntry, ...]
    overall_average: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class SubjectTermReport(BaseModel):
    subject: SubjectRef
    quarters: Dict[Quarter, ScopeReport]
    final_average: Optional[float] = None
    status: Status

    model_config = ConfigDict(frozen=True)


class TermReport(BaseModel):
    subjects: Tuple[SubjectTermReport, ...]
    overall_average: Optional[float] = None

    model_config = ConfigDict(frozen=True)


# =========================================================
# Shared fan-out / fan-in helpers
# =========================================================

def blend(avg_f2f_percent: float, avg_online_percent: float) -> float:
    """Overall raw score: 60% face-to-face, 40% online."""
    return avg_f2f_percent * F2F_WEIGHT + avg_online_percent * ONLINE_WEIGHT


def graded_mean(grades: Iterable[Optional[float]]) -> Optional[float]:
    graded = [g for g in grades if g is not None]
    if not graded:
        return None
    return sum(graded) / len(graded)


def _status(grade: Optional[float], table: TransmutationTable, ungraded: Status) -> Status:
    if grade is None:
        return ungraded
    return Status.PASSING if table.is_passing(grade) else Status.FAILED


def _group_by(records: Iterable[AssessmentRecord], key: Callable[[AssessmentRecord], Hashable]) -> Dict[Hashable, List[AssessmentRecord]]:
    groups: Dict[Hashable, List[AssessmentRecord]] = defaultdict(list)
    for record in records:
        groups[key(record)].append(record)
    return groups


# =========================================================
# 1) one subject, one quarter
# =========================================================

def build_scope_report(
    records: Iterable[AssessmentRecord],
    subject_id: int,
    quarter: Quarter,
    table: TransmutationTable = DEFAULT_TRANSMUTATION,
) -> ScopeReport:
    """
    Records must already be scoped to `subject_id` + `quarter`.

    Each mode average always divides by the four activity types; an activity with no
    items contributes a 0% term rather than being skipped.
    """
    quarter = Quarter(quarter)
    activities = aggregate_activities(records)
    has_data = any(aggregate.has_data for aggregate in activities.values())

    if not has_data:
        return ScopeReport(subject_id=subject_id, quarter=quarter, activities=activities, has_data=False)

    avg_f2f = sum(a.f2f.percentage for a in activities.values()) / len(ACTIVITIES)
    avg_online = sum(a.online.percentage for a in activities.values()) / len(ACTIVITIES)
    overall_raw = blend(avg_f2f, avg_online)

    return ScopeReport(
        subject_id=subject_id,
        quarter=quarter,
        activities=activities,
        has_data=True,
        avg_f2f_percent=avg_f2f,
        avg_online_percent=avg_online,
        f2f=GradeResult(raw_score=avg_f2f, final_grade=table.transmute(avg_f2f)),
        online=GradeResult(raw_score=avg_online, final_grade=table.transmute(avg_online)),
        overall=GradeResult(raw_score=overall_raw, final_grade=table.transmute(overall_raw)),
    )


# =========================================================
# 2) every subject, one quarter
# =========================================================

def build_quarter_report(
    subjects: Sequence[SubjectRef],
    records: Iterable[AssessmentRecord],
    quarter: Quarter,
    table: TransmutationTable = DEFAULT_TRANSMUTATION,
) -> QuarterReport:
    quarter = Quarter(quarter)
    by_subject = _group_by((r for r in records if r.quarter == quarter), lambda r: r.subject_id)

    entries = []
    for subject in subjects:
        report = build_scope_report(by_subject.get(subject.id, ()), subject.id, quarter, table)
        entries.append(
            SubjectQuarterEntry(
                subject=subject,
                report=report,
                status=_status(report.overall.final_grade, table, Status.NO_GRADE),
            )
        )

    overall_average = graded_mean(entry.report.overall.final_grade for entry in entries)
    logger.debug(
        "quarter report %s: %d subjects, %d graded, average=%s",
        quarter.value, len(entries), sum(1 for e in entries if e.report.has_data), overall_average,
    )
    return QuarterReport(quarter=quarter, subjects=tuple(entries), overall_average=overall_average)


# =========================================================
# 3) one subject, every quarter
# =========================================================

def build_subject_term_report(
    subject: SubjectRef,
    records: Iterable[AssessmentRecord],
    table: TransmutationTable = DEFAULT_TRANSMUTATION,
) -> SubjectTermReport:
    by_quarter = _group_by((r for r in records if r.subject_id == subject.id), lambda r: r.quarter)
    quarters = {
        quarter: build_scope_report(by_quarter.get(quarter, ()), subject.id, quarter, table)
        for quarter in QUARTERS
    }
    final_average = graded_mean(report.overall.final_grade for report in quarters.values())
    return SubjectTermReport(
        subject=subject,
        quarters=quarters,
        final_average=final_average,
        status=_status(final_average, table, Status.NO_GRADES_YET),
    )


# =========================================================
# 4) every subject, every quarter
# =========================================================

def build_term_report(
    subjects: Sequence[SubjectRef],
    records: Iterable[AssessmentRecord],
    table: TransmutationTable = DEFAULT_TRANSMUTATION,
) -> TermReport:
    by_subject = _group_by(records, lambda r: r.subject_id)
    reports = tuple(build_subject_term_report(subject, by_subject.get(subject.id, ()), table) for subject in subjects)
    overall_average = graded_mean(report.final_average for report in reports)
    logger.debug("term report: %d subjects, average=%s", len(reports), overall_average)
    return TermReport(subjects=reports, overall_average=overall_average)
