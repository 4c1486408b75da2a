from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from database.db import Base

class Assessment(Base):
    __tablename__ = "assessments"  # raw assessment scores (input of the grade engine)

    id = Column(Integer, primary_key=True, index=True)                                          # assessment ID (Primary Key)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)       # owner
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False) # subject
    name_assessment = Column(String(255), nullable=False)                                      # e.g. "Quiz 1"
    type_quarter = Column(String(20), nullable=False, index=True)                              # preliminary / midterm / pre_final / final
    type_activity = Column(String(20), nullable=False)                                         # quiz / exam / assignment / project
    mode = Column(String(10), nullable=False)                                                  # f2f / online
    score = Column(Float, nullable=False)                                                      # points obtained
    total_items = Column(Float, nullable=False)                                                # points possible (may be 0)
    date_taken = Column(Date)                                                                  # not used by the calculation
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="assessments")
    subject = relationship("Subject", back_populates="assessments")
