import re
from datetime import date
from typing import Dict, Optional, Tuple

TIME_PATTERN = r'^([01]?[0-9]|2[0-3]):[0-5][0-9]$'
TIME_SLOT_PATTERN = r'^([01]?[0-9]|2[0-3]):[0-5][0-9]-([01]?[0-9]|2[0-3]):[0-5][0-9]$'

FREQUENCIES = ('weekly', 'bi_weekly', 'monthly', 'custom')
AVAILABILITY_STATUSES = ('available', 'unavailable', 'maybe')


def validate_time(value: str) -> Tuple[bool, Optional[str]]:
    """Validate a time of day in HH:MM format"""
    if not value or not re.match(TIME_PATTERN, value):
        return False, "Time must be in HH:MM format"
    return True, None


def validate_time_slot(value: str) -> Tuple[bool, Optional[str]]:
    """Validate a time slot in HH:MM-HH:MM format"""
    if not value or not re.match(TIME_SLOT_PATTERN, value):
        return False, "Time slot must be in HH:MM-HH:MM format"
    return True, None


def validate_date_range(start_date: date, end_date: date) -> Tuple[bool, Optional[str]]:
    """Validate that end date falls after start date"""
    if not start_date or not end_date:
        return False, "Start date and end date are required"
    if end_date <= start_date:
        return False, "End date must be after start date"
    return True, None


def validate_player_bounds(min_players: int, max_players: int) -> Tuple[bool, Optional[str]]:
    """Validate min/max player counts"""
    for label, value in (('Min players', min_players), ('Max players', max_players)):
        if not isinstance(value, int) or isinstance(value, bool) or not 1 <= value <= 100:
            return False, f"{label} must be between 1 and 100"
    if min_players > max_players:
        return False, "Min players cannot exceed max players"
    return True, None


def validate_pattern(data: Dict) -> Tuple[bool, Optional[str]]:
    """Validate recurring pattern fields"""
    name = (data.get('name') or '').strip()
    if not 1 <= len(name) <= 255:
        return False, "Name must be between 1 and 255 characters"

    if len(data.get('description') or '') > 1000:
        return False, "Description must be less than 1000 characters"

    frequency = data.get('frequency')
    if frequency not in FREQUENCIES:
        return False, "Frequency must be weekly, bi_weekly, monthly, or custom"

    interval = data.get('interval', 1)
    if not isinstance(interval, int) or isinstance(interval, bool) or not 1 <= interval <= 52:
        return False, "Interval must be between 1 and 52"

    day_of_week = data.get('day_of_week')
    if not isinstance(day_of_week, int) or isinstance(day_of_week, bool) or not 0 <= day_of_week <= 6:
        return False, "Day of week must be between 0 (Sunday) and 6 (Saturday)"

    for field in ('start_time', 'end_time'):
        valid, _ = validate_time(data.get(field))
        if not valid:
            return False, f"{field} must be in HH:MM format"

    location = (data.get('location') or '').strip()
    if not 1 <= len(location) <= 255:
        return False, "Location must be between 1 and 255 characters"

    valid, error = validate_player_bounds(data.get('min_players'), data.get('max_players'))
    if not valid:
        return False, error

    return validate_date_range(data.get('start_date'), data.get('end_date'))


def validate_availability(data: Dict) -> Tuple[bool, Optional[str]]:
    """Validate a player availability entry"""
    if not isinstance(data.get('date'), date):
        return False, "Date must be a valid date"

    valid, error = validate_time_slot(data.get('time_slot'))
    if not valid:
        return False, error

    if data.get('status') not in AVAILABILITY_STATUSES:
        return False, "Status must be available, unavailable, or maybe"

    if len(data.get('notes') or '') > 500:
        return False, "Notes must be less than 500 characters"

    return True, None
