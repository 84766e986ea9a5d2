from sqlalchemy import Column, String, Integer, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
import enum
from .base import BaseModel


class TeamRole(enum.Enum):
    ADMIN = "admin"
    CAPTAIN = "captain"
    PLAYER = "player"
    SNACK_PROVIDER = "snack_provider"


class Team(BaseModel):
    __tablename__ = 'teams'

    name = Column(String(255), nullable=False)
    description = Column(String(1000))
    created_by = Column(Integer, ForeignKey('users.id'), nullable=False)

    # Relationships
    members = relationship("TeamMember", back_populates="team", lazy='dynamic')


class TeamMember(BaseModel):
    __tablename__ = 'team_members'
    __table_args__ = (UniqueConstraint('team_id', 'user_id', name='uq_team_member'),)

    team_id = Column(Integer, ForeignKey('teams.id'), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    role = Column(Enum(TeamRole), default=TeamRole.PLAYER, nullable=False)

    # Relationships
    team = relationship("Team", back_populates="members")
    user = relationship("User", back_populates="memberships")
