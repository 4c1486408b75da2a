# ✅ import every model so Base.metadata knows all tables
from models.users import User
from models.subjects import Subject
from models.assessments import Assessment
from models.todos import Todo

__all__ = ["User", "Subject", "Assessment", "Todo"]
