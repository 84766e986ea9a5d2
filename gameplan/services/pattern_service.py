from datetime import date, timedelta
from typing import Dict, Iterator, List, Protocol
from dateutil.relativedelta import relativedelta
from sqlalchemy.exc import SQLAlchemyError
from gameplan.database import DatabaseManager
from gameplan.exceptions import PatternNotFound, InvalidRange
from gameplan.models import GameSeries, RecurringPattern
from gameplan.models.game import GameStatus
from gameplan.models.recurring_pattern import Frequency
from gameplan.repository import SchedulingRepository
from gameplan.utils.timeslots import display_date, sunday_weekday
from gameplan.utils.validators import validate_pattern
from config.config import get_config
from gameplan.utils.logger import get_logger

logger = get_logger(__name__)


class GameCreator(Protocol):
    """Anything that can persist one game and hand back its id"""

    def create_game(self, fields: Dict) -> int:
        ...


def next_period_start(cursor: date, pattern: RecurringPattern) -> date:
    """Cursor position after an occurrence on ``cursor``"""
    if pattern.frequency == Frequency.WEEKLY:
        return cursor + timedelta(days=7)
    if pattern.frequency == Frequency.BI_WEEKLY:
        return cursor + timedelta(days=14)
    if pattern.frequency == Frequency.MONTHLY:
        # Clamps to month end, e.g. Jan 31 -> Feb 29
        return cursor + relativedelta(months=1)
    if pattern.frequency == Frequency.CUSTOM:
        return cursor + timedelta(days=pattern.interval * 7)
    raise ValueError(f"Unknown frequency: {pattern.frequency}")


def occurrence_dates(pattern: RecurringPattern, start_date: date, end_date: date) -> Iterator[date]:
    """Walk [start_date, end_date] and yield each date the pattern fires on.

    Non-matching days are scanned one at a time. After a match the cursor
    jumps a whole period, so each period contributes at most one occurrence;
    when the jump lands off the pattern's weekday (monthly), scanning resumes
    until the next matching weekday.
    """
    cursor = start_date
    while cursor <= end_date:
        if sunday_weekday(cursor) == pattern.day_of_week:
            yield cursor
            cursor = next_period_start(cursor, pattern)
        else:
            cursor += timedelta(days=1)


class PatternExpander:
    """Turns a recurring pattern into concrete scheduled games"""

    def __init__(self, repository: SchedulingRepository = None, game_creator: GameCreator = None,
                 reject_inverted_range: bool = None, sport_type: str = None):
        settings = get_config()
        self.repository = repository or SchedulingRepository()
        self.game_creator = game_creator or self.repository
        self.reject_inverted_range = (
            settings.REJECT_INVERTED_RANGE if reject_inverted_range is None else reject_inverted_range
        )
        # Every generated game gets the configured sport, not one taken from the pattern
        self.sport_type = sport_type or settings.DEFAULT_SPORT_TYPE

    def expand(self, pattern_id: int, start_date: date, end_date: date) -> List[int]:
        """Create one game per occurrence and return their ids in date order.

        Runs in a single repository transaction: if any game fails to
        persist, none of this call's games are kept and the error propagates.
        Calling twice with the same window creates the games twice.
        """
        pattern = self.repository.get_pattern(pattern_id)
        if not pattern:
            logger.warning(f"Recurring pattern {pattern_id} not found")
            raise PatternNotFound(pattern_id)

        if start_date > end_date:
            if self.reject_inverted_range:
                raise InvalidRange(start_date, end_date)
            logger.info(f"Empty expansion window {start_date} - {end_date} for pattern {pattern_id}")
            return []

        game_ids = []
        try:
            with self.repository.transaction():
                for occurrence in occurrence_dates(pattern, start_date, end_date):
                    game_ids.append(self.game_creator.create_game(self._game_fields(pattern, occurrence)))
        except Exception as e:
            logger.error(f"Error expanding pattern {pattern_id} after {len(game_ids)} games: {str(e)}")
            raise

        logger.info(f"Generated {len(game_ids)} games from pattern {pattern_id} "
                    f"for {start_date} - {end_date}")
        return game_ids

    def _game_fields(self, pattern: RecurringPattern, occurrence: date) -> Dict:
        return {
            'series_id': pattern.series_id,
            'name': f"{pattern.name} - {display_date(occurrence)}",
            'description': pattern.description,
            'sport_type': self.sport_type,
            'date': occurrence,
            'time': pattern.start_time,
            'location': pattern.location,
            'min_players': pattern.min_players,
            'max_players': pattern.max_players,
            'status': GameStatus.SCHEDULED,
            'created_by': pattern.created_by
        }


class RecurringPatternService:
    """Service for recurring pattern management"""

    def __init__(self, repository: SchedulingRepository = None, expander: PatternExpander = None):
        self.repository = repository or SchedulingRepository()
        self.expander = expander or PatternExpander(self.repository)
        self.series_db = DatabaseManager(GameSeries)

    def create_recurring_pattern(self, series_id: int, data: Dict, created_by: int) -> Dict:
        """Validate and store a new pattern for a series"""
        settings = get_config()
        fields = {
            'name': (data.get('name') or '').strip(),
            'description': data.get('description') or '',
            'frequency': data.get('frequency'),
            'interval': data.get('interval') or 1,
            'day_of_week': data.get('day_of_week'),
            'start_time': data.get('start_time'),
            'end_time': data.get('end_time'),
            'location': (data.get('location') or '').strip(),
            'min_players': data.get('min_players') or settings.DEFAULT_MIN_PLAYERS,
            'max_players': data.get('max_players') or settings.DEFAULT_MAX_PLAYERS,
            'start_date': data.get('start_date'),
            'end_date': data.get('end_date')
        }

        valid, error = validate_pattern(fields)
        if not valid:
            return {'error': error}

        try:
            if not self.series_db.get(series_id):
                return {'error': 'Game series not found'}

            fields.update({
                'series_id': series_id,
                'frequency': Frequency(fields['frequency']),
                'is_active': True,
                'created_by': created_by
            })
            pattern = self.repository.create_pattern(fields)

            logger.info(f"Recurring pattern created: {pattern.id} for series {series_id}")

            return {'pattern_id': pattern.id, 'success': True}

        except SQLAlchemyError as e:
            logger.error(f"Error creating recurring pattern: {str(e)}")
            return {'error': 'Failed to create recurring pattern'}

    def get_recurring_pattern(self, pattern_id: int) -> Dict:
        pattern = self.repository.get_pattern(pattern_id)
        if not pattern:
            return {'error': 'Recurring pattern not found'}
        return self._format_pattern(pattern)

    def get_series_patterns(self, series_id: int) -> List[Dict]:
        """Patterns of a series, newest first"""
        return [self._format_pattern(p) for p in self.repository.list_patterns(series_id)]

    def expand_pattern(self, pattern_id: int, start_date: date, end_date: date) -> List[int]:
        return self.expander.expand(pattern_id, start_date, end_date)

    def _format_pattern(self, pattern: RecurringPattern) -> Dict:
        return {
            'id': pattern.id,
            'series_id': pattern.series_id,
            'name': pattern.name,
            'description': pattern.description,
            'frequency': pattern.frequency.value,
            'interval': pattern.interval,
            'day_of_week': pattern.day_of_week,
            'start_time': pattern.start_time,
            'end_time': pattern.end_time,
            'location': pattern.location,
            'min_players': pattern.min_players,
            'max_players': pattern.max_players,
            'start_date': pattern.start_date.isoformat(),
            'end_date': pattern.end_date.isoformat(),
            'is_active': pattern.is_active,
            'created_by': pattern.created_by,
            'created_at': pattern.created_at.isoformat() if pattern.created_at else None
        }
