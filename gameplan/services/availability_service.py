from datetime import date
from typing import Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from gameplan.models import PlayerAvailability
from gameplan.models.availability import AvailabilityStatus
from gameplan.repository import SchedulingRepository
from gameplan.utils.validators import validate_availability
from config.config import get_config
from gameplan.utils.logger import get_logger

logger = get_logger(__name__)


class AvailabilityPolicy:
    """Decides whether a looked-up status counts a player as available"""

    name = 'base'

    def is_available(self, status: Optional[AvailabilityStatus]) -> bool:
        raise NotImplementedError


class AbsentMeansAvailable(AvailabilityPolicy):
    """Only an explicit ``unavailable`` excludes a player; no record counts as available"""

    name = 'absent_means_available'

    def is_available(self, status):
        return status != AvailabilityStatus.UNAVAILABLE


class AbsentMeansUnavailable(AvailabilityPolicy):
    """Players must have declared ``available`` or ``maybe``"""

    name = 'absent_means_unavailable'

    def is_available(self, status):
        return status in (AvailabilityStatus.AVAILABLE, AvailabilityStatus.MAYBE)


class AvailabilityService:
    """Service for player availability"""

    def __init__(self, repository: SchedulingRepository = None):
        self.repository = repository or SchedulingRepository()

    def set_player_availability(self, user_id: int, data: Dict) -> Dict:
        """Record a player's status for one date and slot, replacing any earlier entry"""
        valid, error = validate_availability(data)
        if not valid:
            return {'error': error}

        try:
            record = self.repository.upsert_availability(
                user_id,
                data['date'],
                data['time_slot'],
                AvailabilityStatus(data['status']),
                data.get('notes') or ''
            )

            logger.info(f"Availability set for user {user_id} on {data['date']} "
                        f"{data['time_slot']}: {data['status']}")

            return {'success': True, 'availability': self._format_availability(record)}

        except SQLAlchemyError as e:
            logger.error(f"Error setting player availability: {str(e)}")
            return {'error': 'Failed to set player availability'}

    def get_player_availability(self, user_id: int, start_date: date, end_date: date) -> List[Dict]:
        """A player's entries between two dates inclusive, ordered by date then slot"""
        records = self.repository.list_availability(user_id, start_date, end_date)
        return [self._format_availability(record) for record in records]

    def get_team_availability_summary(self, team_id: int, summary_date: date) -> List[Dict]:
        """Per fixed slot, how many team members declared each status"""
        summary = []
        for time_slot in get_config().SUMMARY_TIME_SLOTS:
            counts = self.repository.count_team_statuses(team_id, summary_date, time_slot)
            summary.append({
                'time_slot': time_slot,
                'available': counts.get(AvailabilityStatus.AVAILABLE, 0),
                'unavailable': counts.get(AvailabilityStatus.UNAVAILABLE, 0),
                'maybe': counts.get(AvailabilityStatus.MAYBE, 0),
                'not_set': counts.get(None, 0)
            })
        return summary

    def _format_availability(self, record: PlayerAvailability) -> Dict:
        return {
            'id': record.id,
            'user_id': record.user_id,
            'date': record.date.isoformat(),
            'time_slot': record.time_slot,
            'status': record.status.value,
            'notes': record.notes,
            'updated_at': record.updated_at.isoformat() if record.updated_at else None
        }
