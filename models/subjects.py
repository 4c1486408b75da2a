from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from database.db import Base

class Subject(Base):
    __tablename__ = "subjects"  # subject table, owned by a user

    id = Column(Integer, primary_key=True, index=True)                                        # subject ID (Primary Key)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)     # owner
    name = Column(String(50), nullable=False)                                                # subject name (e.g. Calculus)
    color = Column(String(50))                                                               # UI colour tag
    target_grade = Column(Float)                                                            # goal on the 1.00-5.00 scale
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="subjects")
    assessments = relationship(
        "Assessment",
        back_populates="subject",
        cascade="all, delete-orphan",
        order_by="Assessment.date_taken.desc()",  # latest first
    )
    todos = relationship("Todo", back_populates="subject", cascade="all, delete-orphan")
