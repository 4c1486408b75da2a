from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from database.db import Base

class User(Base):
    __tablename__ = "users"  # account table (owner of subjects / assessments / todos)

    id = Column(Integer, primary_key=True, index=True)                    # user ID (Primary Key)
    name = Column(String(100), nullable=False)                           # display name
    email = Column(String(255), nullable=False, unique=True, index=True) # login e-mail
    password_hash = Column(String(255), nullable=False)                  # bcrypt hash ("$2b$12$...")
    api_token = Column(String(128), unique=True, nullable=True)           # bearer token (None after logout)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    subjects = relationship("Subject", back_populates="user", cascade="all, delete-orphan")
    assessments = relationship("Assessment", back_populates="user", cascade="all, delete-orphan")
    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan")
