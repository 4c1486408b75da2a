"""
services/grading/enums.py

Closed enumerations used by the grade engine. Iteration order is significant:
`Quarter` iterates in academic order and `ActivityType` defines the fixed set of
activities every quarter average is divided by.
"""

from enum import Enum


class Quarter(str, Enum):
    PRELIMINARY = "preliminary"
    MIDTERM = "midterm"
    PRE_FINAL = "pre_final"
    FINAL = "final"


class ActivityType(str, Enum):
    QUIZ = "quiz"
    EXAM = "exam"
    ASSIGNMENT = "assignment"
    PROJECT = "project"


class Mode(str, Enum):
    F2F = "f2f"
    ONLINE = "online"


class Status(str, Enum):
    PASSING = "Passing"
    FAILED = "Failed"
    NO_GRADE = "No Grade"
    NO_GRADES_YET = "No Grades Yet"


QUARTERS = tuple(Quarter)
ACTIVITIES = tuple(ActivityType)
