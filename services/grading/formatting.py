"""
services/grading/formatting.py

Report objects → JSON-ready dicts returned by routers/grades.py.

Rounding
- activity percentages: 2 decimals
- raw scores / averages: 4 decimals
- final grades: never rounded (they come straight from the transmutation table)

The single scope payload spells missing values out as "No Data" / "No Grade";
the cross-subject and longitudinal payloads use null.
"""

from typing import Optional, Union

from services.grading.aggregator import ActivityAggregate, ModeTotals
from services.grading.enums import QUARTERS
from services.grading.reports import GradeResult, QuarterReport, ScopeReport, SubjectTermReport, TermReport

NO_DATA = "No Data"
NO_GRADE = "No Grade"


def _round(value: Optional[float], digits: int = 4) -> Optional[float]:
    return round(value, digits) if value is not None else None


def _or(value: Optional[float], sentinel: str) -> Union[float, str]:
    return sentinel if value is None else value


# =========================================================
# single subject / single quarter
# =========================================================

def _mode_totals_payload(totals: ModeTotals) -> dict:
    return {
        "score_obtained": totals.score_sum,
        "total_possible": totals.items_sum,
        "percentage": round(totals.percentage, 2),
    }


def activity_payload(aggregate: ActivityAggregate) -> dict:
    return {
        "partial_grades": {
            "face_to_face": _mode_totals_payload(aggregate.f2f),
            "online": _mode_totals_payload(aggregate.online),
        }
    }


def _mode_breakdown(result: GradeResult) -> dict:
    raw = _or(_round(result.raw_score), NO_DATA)
    return {
        "avg_percent": raw,
        "raw_score": raw,
        "final_grade": _or(result.final_grade, NO_GRADE),
    }


def scope_report_payload(report: ScopeReport) -> dict:
    return {
        "subject_id": report.subject_id,
        "quarter": report.quarter.value,
        "has_data": report.has_data,
        "activities": {
            activity.value: activity_payload(aggregate) for activity, aggregate in report.activities.items()
        },
        "f2f_breakdown": _mode_breakdown(report.f2f),
        "online_breakdown": _mode_breakdown(report.online),
        "overall_breakdown": {
            "avg_f2f_percent": _or(_round(report.avg_f2f_percent), NO_DATA),
            "avg_online_percent": _or(_round(report.avg_online_percent), NO_DATA),
            "raw_score": _or(_round(report.overall.raw_score), NO_DATA),
            "final_grade": _or(report.overall.final_grade, NO_GRADE),
        },
    }


# =========================================================
# every subject / one quarter
# =========================================================

def quarter_report_payload(report: QuarterReport) -> dict:
    subjects = {}
    for entry in report.subjects:
        subjects[entry.subject.name] = {
            "subject_id": entry.subject.id,
            "status": entry.status.value,
            "f2f_breakdown": {
                "raw_score_percent": _round(entry.report.f2f.raw_score),
                "final_grade": entry.report.f2f.final_grade,
            },
            "online_breakdown": {
                "raw_score_percent": _round(entry.report.online.raw_score),
                "final_grade": entry.report.online.final_grade,
            },
            "overall_breakdown": {
                "raw_score_percent": _round(entry.report.overall.raw_score),
                "final_grade": entry.report.overall.final_grade,
            },
        }
    return {
        "message": f"Overall grades for {report.quarter.value}, separated by mode breakdown",
        "quarter": report.quarter.value,
        "subjects": subjects,
        "overall_average": _round(report.overall_average),
    }


# =========================================================
# longitudinal (every quarter)
# =========================================================

def _quarter_cell(report: ScopeReport) -> dict:
    return {
        label: {"raw_score": _round(result.raw_score), "final_grade": result.final_grade}
        for label, result in (("f2f", report.f2f), ("online", report.online), ("overall", report.overall))
    }


def _subject_term_body(report: SubjectTermReport) -> dict:
    return {
        "quarters": {quarter.value: _quarter_cell(scope) for quarter, scope in report.quarters.items()},
        "subject_final_average": _round(report.final_average),
        "status": report.status.value,
    }


def subject_term_payload(report: SubjectTermReport) -> dict:
    return {
        "message": (
            f"Grades for subject '{report.subject.name}' across all quarters, "
            "separated by mode breakdown."
        ),
        "subject_name": report.subject.name,
        "subject_id": report.subject.id,
        **_subject_term_body(report),
    }


def term_report_payload(report: TermReport) -> dict:
    return {
        "message": "Overall grades for all subjects across all quarters, separated by mode",
        "quarters": [quarter.value for quarter in QUARTERS],
        "subjects": {subject.subject.name: _subject_term_body(subject) for subject in report.subjects},
        "overall_average": _round(report.overall_average),
    }
