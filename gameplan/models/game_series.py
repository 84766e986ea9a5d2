from sqlalchemy import Column, String, Integer, ForeignKey, Date, Enum
from sqlalchemy.orm import relationship
import enum
from .base import BaseModel


class SeriesType(enum.Enum):
    TOURNAMENT = "tournament"
    LEAGUE = "league"
    CASUAL = "casual"


class GameSeries(BaseModel):
    __tablename__ = 'game_series'

    name = Column(String(255), nullable=False)
    description = Column(String(1000))
    type = Column(Enum(SeriesType), default=SeriesType.CASUAL, nullable=False)
    start_date = Column(Date)
    end_date = Column(Date)
    created_by = Column(Integer, ForeignKey('users.id'), nullable=False)

    # Relationships
    games = relationship("Game", back_populates="series", lazy='dynamic')
    patterns = relationship("RecurringPattern", back_populates="series", lazy='dynamic')
