from sqlalchemy import Column, String, Integer, ForeignKey, Date, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
import enum
from .base import BaseModel


class GameStatus(enum.Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Game(BaseModel):
    __tablename__ = 'games'

    # Basic Info
    series_id = Column(Integer, ForeignKey('game_series.id'), index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(1000))
    sport_type = Column(String(50), nullable=False)

    # Schedule
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # HH:MM

    # Location
    location = Column(String(255), index=True)

    # Roster size
    min_players = Column(Integer, default=1)
    max_players = Column(Integer, default=20)

    # Status
    status = Column(Enum(GameStatus), default=GameStatus.SCHEDULED, index=True)
    created_by = Column(Integer, ForeignKey('users.id'), nullable=False)

    # Relationships
    series = relationship("GameSeries", back_populates="games")
    teams = relationship("GameTeam", back_populates="game", lazy='dynamic')


class GameTeam(BaseModel):
    __tablename__ = 'game_teams'
    __table_args__ = (UniqueConstraint('game_id', 'team_id', name='uq_game_team'),)

    game_id = Column(Integer, ForeignKey('games.id'), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey('teams.id'), nullable=False, index=True)

    # Relationships
    game = relationship("Game", back_populates="teams")
