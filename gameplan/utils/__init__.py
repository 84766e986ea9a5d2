from .logger import setup_logger, get_logger
from .validators import (
    validate_time, validate_time_slot, validate_date_range,
    validate_player_bounds, validate_pattern, validate_availability
)
from .timeslots import format_hour, format_slot, slot_start, display_date, sunday_weekday

__all__ = [
    'setup_logger', 'get_logger',
    'validate_time', 'validate_time_slot', 'validate_date_range',
    'validate_player_bounds', 'validate_pattern', 'validate_availability',
    'format_hour', 'format_slot', 'slot_start', 'display_date', 'sunday_weekday'
]
