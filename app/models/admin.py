"""
Admin model
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.core.db import Base, utcnow

class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)  # argon2 encoded hash, never the raw password
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    sessions = relationship(
        "AuthSession", back_populates="admin", cascade="all, delete-orphan", passive_deletes=True
    )
