"""
services/grading/transmutation.py

Percentage → numeric grade mapping (1.00 best ... 5.00 failing).

- The ladder is data, not branching code: builders take a `TransmutationTable`
  argument and default to `DEFAULT_TRANSMUTATION`.
- Input is not clamped; anything at or above the top threshold is 1.00 and
  anything below the lowest threshold gets `floor_grade`.
- `None` in → `None` out ("no grade"), never the failing grade.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class TransmutationTable(BaseModel):
    # (minimum percentage, grade) pairs; kept sorted from the highest threshold down
    steps: Tuple[Tuple[float, float], ...]
    floor_grade: float = 5.00
    passing_grade: float = 3.00

    model_config = ConfigDict(frozen=True)

    @field_validator("steps")
    @classmethod
    def _sort_descending(cls, v):
        return tuple(sorted(v, key=lambda step: step[0], reverse=True))

    def transmute(self, percentage: Optional[float]) -> Optional[float]:
        if percentage is None:
            return None
        for threshold, grade in self.steps:
            if percentage >= threshold:
                return grade
        return self.floor_grade

    def is_passing(self, grade: float) -> bool:
        return grade <= self.passing_grade


DEFAULT_TRANSMUTATION = TransmutationTable(
    steps=(
        (98, 1.00),
        (95, 1.25),
        (92, 1.50),
        (89, 1.75),
        (86, 2.00),
        (83, 2.25),
        (80, 2.50),
        (77, 2.75),
        (75, 3.00),
    ),
)


def transmute(
    percentage: Optional[float], table: TransmutationTable = DEFAULT_TRANSMUTATION
) -> Optional[float]:
    """Module level shortcut for `table.transmute(percentage)`."""
    return table.transmute(percentage)
