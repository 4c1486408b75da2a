"""
services/grading/aggregator.py

Activity level aggregation: sums of score / total_items per activity type and mode,
plus the percentage derived from them.

A percentage of 0 is returned when no items were recorded; `items_sum == 0` is the
only way to tell "nothing recorded" apart from a real 0%.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from services.grading.enums import ACTIVITIES, ActivityType, Mode, Quarter


class AssessmentRecord(BaseModel):
    """Engine input. Built from ORM rows (`type_quarter` / `type_activity`) or plain dicts."""

    subject_id: int
    quarter: Quarter = Field(validation_alias=AliasChoices("quarter", "type_quarter"))
    activity_type: ActivityType = Field(validation_alias=AliasChoices("activity_type", "type_activity"))
    mode: Mode
    score: float
    total_items: float
    date_taken: Optional[date] = None

    model_config = ConfigDict(frozen=True, from_attributes=True)


class ModeTotals(BaseModel):
    score_sum: float = 0.0
    items_sum: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def has_items(self) -> bool:
        return self.items_sum > 0

    @property
    def percentage(self) -> float:
        if self.items_sum > 0:
            return self.score_sum / self.items_sum * 100
        return 0.0


class ActivityAggregate(BaseModel):
    activity: ActivityType
    f2f: ModeTotals = ModeTotals()
    online: ModeTotals = ModeTotals()

    model_config = ConfigDict(frozen=True)

    @property
    def has_data(self) -> bool:
        return self.f2f.has_items or self.online.has_items

    def for_mode(self, mode: Mode) -> ModeTotals:
        return self.f2f if mode is Mode.F2F else self.online


def aggregate_activities(records: Iterable[AssessmentRecord]) -> Dict[ActivityType, ActivityAggregate]:
    """
    Single pass over `records` (already scoped to one subject + quarter).
    Always returns all four activity types, in `ActivityType` order.
    """
    sums: Dict[Tuple[ActivityType, Mode], list] = {
        (activity, mode): [0.0, 0.0] for activity in ACTIVITIES for mode in Mode
    }
    for record in records:
        bucket = sums[(record.activity_type, record.mode)]
        bucket[0] += record.score
        bucket[1] += record.total_items

    return {
        activity: ActivityAggregate(
            activity=activity,
            f2f=ModeTotals(score_sum=sums[(activity, Mode.F2F)][0], items_sum=sums[(activity, Mode.F2F)][1]),
            online=ModeTotals(score_sum=sums[(activity, Mode.ONLINE)][0], items_sum=sums[(activity, Mode.ONLINE)][1]),
        )
        for activity in ACTIVITIES
    }


def aggregate_activity(records: Iterable[AssessmentRecord], activity: ActivityType) -> ActivityAggregate:
    return aggregate_activities(records)[ActivityType(activity)]
