from datetime import date


def format_hour(hour: int) -> str:
    """Format an hour of day as HH:00"""
    return f"{hour:02d}:00"


def format_slot(start_hour: int, end_hour: int) -> str:
    """Format an hourly window as HH:00-HH:00"""
    return f"{format_hour(start_hour)}-{format_hour(end_hour)}"


def slot_start(time_slot: str) -> str:
    """Start time of an HH:MM-HH:MM slot"""
    return time_slot.split('-')[0]


def display_date(value: date) -> str:
    """Short display form used in generated game names, e.g. 1/7/2024"""
    return f"{value.month}/{value.day}/{value.year}"


def sunday_weekday(value: date) -> int:
    """Day of week with Sunday as 0 and Saturday as 6"""
    return (value.weekday() + 1) % 7
