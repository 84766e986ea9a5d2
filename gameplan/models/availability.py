from sqlalchemy import Column, String, Integer, ForeignKey, Date, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
import enum
from .base import BaseModel


class AvailabilityStatus(enum.Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    MAYBE = "maybe"


class PlayerAvailability(BaseModel):
    __tablename__ = 'player_availability'
    __table_args__ = (
        UniqueConstraint('user_id', 'date', 'time_slot', name='uq_player_availability_slot'),
    )

    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    time_slot = Column(String(11), nullable=False)  # e.g. "09:00-11:00"
    status = Column(Enum(AvailabilityStatus), nullable=False)
    notes = Column(String(500), default='')

    # Relationships
    user = relationship("User", back_populates="availabilities")
