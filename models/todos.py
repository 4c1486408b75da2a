from sqlalchemy import Column, Integer, String, Text, Date, Boolean, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from database.db import Base

class Todo(Base):
    __tablename__ = "todos"  # to-do items, optionally attached to a subject

    id = Column(Integer, primary_key=True, index=True)                                          # todo ID (Primary Key)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)       # owner
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=True)  # optional subject
    title = Column(String(255), nullable=False)                                                # title
    description = Column(Text)                                                                 # details
    due_date = Column(Date)                                                                    # deadline
    priority = Column(String(10), nullable=False, default="medium")                            # low / medium / high
    completed = Column(Boolean, nullable=False, default=False)                                 # done flag
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="todos")
    subject = relationship("Subject", back_populates="todos")
