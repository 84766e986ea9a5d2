from typing import List
from gameplan.models import Game, SchedulingConflict
from gameplan.models.availability import AvailabilityStatus
from gameplan.models.conflict import ConflictType, ConflictSeverity
from gameplan.repository import SchedulingRepository
from gameplan.utils.logger import get_logger

logger = get_logger(__name__)


class ConflictDetector:
    """Checks one game against other bookings and its roster's availability"""

    def __init__(self, repository: SchedulingRepository = None):
        self.repository = repository or SchedulingRepository()

    def detect_conflicts(self, game_id: int) -> List[SchedulingConflict]:
        """Run every rule and concatenate the findings.

        An unknown game yields an empty list rather than an error. Findings
        are neither deduplicated nor persisted.
        """
        game = self.repository.get_game(game_id)
        if not game:
            logger.warning(f"Conflict check requested for missing game {game_id}")
            return []

        conflicts = []
        conflicts.extend(self._check_time_conflicts(game))
        conflicts.extend(self._check_location_conflicts(game))
        conflicts.extend(self._check_availability_conflicts(game))

        logger.info(f"Found {len(conflicts)} conflicts for game {game_id}")
        return conflicts

    def _check_time_conflicts(self, game: Game) -> List[SchedulingConflict]:
        # Same date and identical start time only; overlapping intervals are not compared
        conflicts = []
        for other in self.repository.find_games_by_date_and_time(game.date, game.time):
            if other.id == game.id:
                continue
            conflicts.append(SchedulingConflict(
                game_id=game.id,
                conflict_type=ConflictType.TIME_OVERLAP,
                severity=ConflictSeverity.HIGH,
                conflict_details=f"Time conflict with game: {other.name} at {other.location}"
            ))
        return conflicts

    def _check_location_conflicts(self, game: Game) -> List[SchedulingConflict]:
        # A venue booked twice on one day is flagged whatever the times
        conflicts = []
        for other in self.repository.find_games_by_location_and_date(game.location, game.date):
            if other.id == game.id:
                continue
            conflicts.append(SchedulingConflict(
                game_id=game.id,
                conflict_type=ConflictType.LOCATION_CONFLICT,
                severity=ConflictSeverity.CRITICAL,
                conflict_details=f"Location conflict with game: {other.name} at {other.time}"
            ))
        return conflicts

    def _check_availability_conflicts(self, game: Game) -> List[SchedulingConflict]:
        conflicts = []
        for user_id in self.repository.get_roster_user_ids(game.id):
            status = self.repository.get_availability(user_id, game.date, game.time)
            if status == AvailabilityStatus.UNAVAILABLE:
                conflicts.append(SchedulingConflict(
                    game_id=game.id,
                    conflict_type=ConflictType.PLAYER_UNAVAILABLE,
                    severity=ConflictSeverity.MEDIUM,
                    conflict_details=f"Player {user_id} is unavailable for this time slot"
                ))
        return conflicts
