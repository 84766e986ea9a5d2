import math
from datetime import date
from typing import List, Optional
from gameplan.models import CandidateSlot
from gameplan.repository import SchedulingRepository
from gameplan.services.availability_service import AvailabilityPolicy, AbsentMeansAvailable
from gameplan.utils.timeslots import format_slot, slot_start
from config.config import get_config
from gameplan.utils.logger import get_logger

logger = get_logger(__name__)


def candidate_slots(duration_minutes: int, day_start_hour: int, day_end_hour: int) -> List[str]:
    """Hourly windows long enough for the game that end no later than day_end_hour"""
    if duration_minutes <= 0:
        raise ValueError("Duration must be a positive number of minutes")

    span_hours = math.ceil(duration_minutes / 60)
    slots = []
    for candidate_start_hour in range(day_start_hour, day_end_hour - span_hours + 1):
        candidate_end_hour = candidate_start_hour + span_hours
        slots.append(format_slot(candidate_start_hour, candidate_end_hour))
    return slots


class SlotOptimizer:
    """Finds the hourly window on a date where most of a series' roster can play"""

    def __init__(self, repository: SchedulingRepository = None, policy: AvailabilityPolicy = None,
                 enforce_max_players: bool = None, day_start_hour: int = None, day_end_hour: int = None):
        settings = get_config()
        self.repository = repository or SchedulingRepository()
        self.policy = policy or AbsentMeansAvailable()
        self.enforce_max_players = (
            settings.ENFORCE_MAX_PLAYERS if enforce_max_players is None else enforce_max_players
        )
        self.day_start_hour = settings.DAY_START_HOUR if day_start_hour is None else day_start_hour
        self.day_end_hour = settings.DAY_END_HOUR if day_end_hour is None else day_end_hour

    def find_optimal_slot(self, series_id: int, slot_date: date, duration_minutes: int = None,
                          min_players: int = None, max_players: int = None) -> Optional[CandidateSlot]:
        """Best candidate by available players, earliest on ties.

        Omitted duration and player bounds fall back to the configured defaults.

        Candidates below min_players are skipped. Existing bookings at a
        candidate's start are reported but never disqualify it. max_players
        only filters when enforce_max_players is set.
        """
        settings = get_config()
        if duration_minutes is None:
            duration_minutes = settings.DEFAULT_DURATION_MINUTES
        if min_players is None:
            min_players = settings.DEFAULT_MIN_PLAYERS
        if max_players is None:
            max_players = settings.DEFAULT_MAX_PLAYERS

        roster = self.repository.get_series_roster_user_ids(series_id)
        best_slot = None

        for time_slot in candidate_slots(duration_minutes, self.day_start_hour, self.day_end_hour):
            available = self._count_available(roster, slot_date, time_slot)
            conflicts = self.repository.count_games_at_date_time(slot_date, slot_start(time_slot))

            if available < min_players:
                continue
            if self.enforce_max_players and available > max_players:
                continue

            # Strict comparison keeps the earliest slot among equals
            if best_slot is None or available > best_slot.available_players:
                best_slot = CandidateSlot(time=time_slot, available_players=available, conflicts=conflicts)

        if best_slot:
            logger.info(f"Optimal slot for series {series_id} on {slot_date}: {best_slot.time} "
                        f"with {best_slot.available_players} players")
        else:
            logger.info(f"No slot for series {series_id} on {slot_date} reaches {min_players} players")

        return best_slot

    def _count_available(self, roster: List[int], slot_date: date, time_slot: str) -> int:
        return sum(
            1 for user_id in roster
            if self.policy.is_available(self.repository.get_availability(user_id, slot_date, time_slot))
        )
