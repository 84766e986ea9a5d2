from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import BaseModel


class User(BaseModel):
    __tablename__ = 'users'

    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)

    # Relationships
    memberships = relationship("TeamMember", back_populates="user", lazy='dynamic')
    availabilities = relationship("PlayerAvailability", back_populates="user", lazy='dynamic')
