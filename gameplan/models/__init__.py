from .user import User
from .team import Team, TeamMember
from .game_series import GameSeries
from .game import Game, GameTeam
from .recurring_pattern import RecurringPattern
from .availability import PlayerAvailability
from .weather import WeatherForecast
from .conflict import SchedulingConflict
from .slot import CandidateSlot

__all__ = [
    'User', 'Team', 'TeamMember', 'GameSeries', 'Game', 'GameTeam',
    'RecurringPattern', 'PlayerAvailability', 'WeatherForecast',
    'SchedulingConflict', 'CandidateSlot'
]
