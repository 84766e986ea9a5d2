from sqlalchemy import Column, String, Integer, ForeignKey, Date, Enum, Boolean
from sqlalchemy.orm import relationship
import enum
from .base import BaseModel


class Frequency(enum.Enum):
    WEEKLY = "weekly"
    BI_WEEKLY = "bi_weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class RecurringPattern(BaseModel):
    __tablename__ = 'recurring_patterns'

    series_id = Column(Integer, ForeignKey('game_series.id'), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(1000))

    # Cadence
    frequency = Column(Enum(Frequency), nullable=False)
    interval = Column(Integer, default=1, nullable=False)  # weeks, only read for CUSTOM
    day_of_week = Column(Integer, nullable=False)  # 0 (Sunday) - 6 (Saturday)

    # Slot
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    location = Column(String(255), nullable=False)
    min_players = Column(Integer, default=1)
    max_players = Column(Integer, default=20)

    # Active window
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    is_active = Column(Boolean, default=True)
    created_by = Column(Integer, ForeignKey('users.id'), nullable=False)

    # Relationships
    series = relationship("GameSeries", back_populates="patterns")
